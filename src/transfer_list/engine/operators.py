"""SelectionOperators: set algebra behind toggle, select-all and invert."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping

from ..core.key_map import RowKey, item_key


class SelectionOperators:
    """Pure functions from a previous selection to a new one.

    Results are lists without duplicates. Existing keys keep their
    position; new keys are appended in the order given.
    """

    @staticmethod
    def toggle(prev: Iterable[Hashable], key: Hashable, checked: bool) -> list:
        holder = [k for k in prev if k != key]
        if checked:
            holder.append(key)
        return holder

    @staticmethod
    def select_all(
        prev: Iterable[Hashable],
        keys: Iterable[Hashable],
        check_all: bool,
    ) -> list:
        """Union ``keys`` into ``prev`` (check_all) or subtract them.

        Repeated calls with different visible pages accumulate.
        """
        prev = list(prev)
        if check_all:
            return list(dict.fromkeys(prev + list(keys)))
        remove = set(keys)
        return [key for key in prev if key not in remove]

    @staticmethod
    def invert(prev: Iterable[Hashable], keys: Iterable[Hashable]) -> list:
        """Flip the selection state of each of ``keys``."""
        prev = list(prev)
        keys = list(dict.fromkeys(keys))
        selected = set(prev)
        to_check = [key for key in keys if key not in selected]
        flipped = SelectionOperators.select_all(prev, keys, False)
        return SelectionOperators.select_all(flipped, to_check, True)

    @staticmethod
    def enabled_keys(
        items: Iterable[Mapping[str, Any]],
        row_key: RowKey | None = None,
    ) -> list:
        """Keys a "select all" control should act on."""
        return [item_key(item, row_key) for item in items if not item.get("disabled")]
