"""Partitioner: split a dataset into source and target panes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Mapping

from .key_map import RowKey, group_keys_map, item_key
from .validation import check_dataset_keys, check_target_keys, normalize_keys

Item = Mapping[str, Any]


@dataclass(frozen=True)
class Partition:
    """Items of both panes, each in render order.

    ``source_items`` follows dataset order. ``target_items`` follows the
    target key order, with stale target keys already dropped.
    """

    source_items: list[Item] = field(default_factory=list)
    target_items: list[Item] = field(default_factory=list)

    @property
    def source_keys(self) -> list:
        return [item.get("key") for item in self.source_items]

    @property
    def target_keys(self) -> list:
        return [item.get("key") for item in self.target_items]

    def items(self, pane: str) -> list[Item]:
        """Items of ``pane`` ("left" = source, "right" = target)."""
        if pane == "left":
            return list(self.source_items)
        if pane == "right":
            return list(self.target_items)
        raise ValueError(f"Unknown pane '{pane}'. Use 'left' or 'right'.")

    def __len__(self) -> int:
        return len(self.source_items) + len(self.target_items)


class Partitioner:
    """Splits items by target-key membership.

    Membership comes from a key→position map over the target keys. The
    target list is built by walking the target keys and looking each one
    up in the dataset, so stale keys are skipped rather than left as
    holes.
    """

    @staticmethod
    def keyed_records(
        dataset: Iterable[Item],
        row_key: RowKey | None = None,
    ) -> list[Item]:
        """Dataset records carrying a ``key`` field.

        With ``row_key`` each record is a shallow copy with the derived
        key; the caller's records are never mutated.
        """
        if row_key is None:
            return list(dataset)
        return [{**item, "key": item_key(item, row_key)} for item in dataset]

    @staticmethod
    def separate(
        dataset: Iterable[Item] | None,
        target_keys: Iterable[Hashable] | None,
        row_key: RowKey | None = None,
    ) -> Partition:
        """Return the source/target split of ``dataset``.

        Parameters
        ----------
        dataset : ordered item records
        target_keys : ordered keys currently in the target pane
        row_key : optional key-deriving function applied to each record

        Duplicate dataset keys: the first occurrence fills the target
        slot; later copies of a target key are dropped, later copies of a
        source key stay in the source pane.
        """
        records = Partitioner.keyed_records(normalize_keys(dataset), row_key)
        keys = normalize_keys(target_keys)
        target_map = group_keys_map(keys)

        check_dataset_keys([item_key(record) for record in records])

        source_items: list[Item] = []
        by_key: dict[Hashable, Item] = {}
        for record in records:
            key = item_key(record)
            if key in target_map:
                by_key.setdefault(key, record)
            else:
                source_items.append(record)

        check_target_keys(keys, by_key)

        # target_map preserves first-seen order of the target keys
        target_items = [by_key[key] for key in target_map if key in by_key]
        return Partition(source_items=source_items, target_items=target_items)
