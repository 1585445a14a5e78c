"""Key maps: O(1) membership and position lookups over item keys."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Mapping

RowKey = Callable[[Mapping[str, Any]], Hashable]


def item_key(item: Mapping[str, Any], row_key: RowKey | None = None) -> Hashable:
    """Key of an item record, derived through ``row_key`` when given."""
    if row_key is not None:
        return row_key(item)
    return item.get("key")


def group_keys_map(keys: Iterable[Hashable]) -> dict[Hashable, int]:
    """Map each key to the position of its first occurrence."""
    positions: dict[Hashable, int] = {}
    for index, key in enumerate(keys):
        positions.setdefault(key, index)
    return positions


def group_disabled_keys(
    items: Iterable[Mapping[str, Any]],
    row_key: RowKey | None = None,
) -> set:
    """Keys of every item flagged ``disabled``."""
    return {item_key(item, row_key) for item in items if item.get("disabled")}

