"""Transfer: the main user-facing API (dual-pane selection controller)."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable

import param

from .core.direction import LEFT, RIGHT, rendered_side, validate_direction
from .core.partition import Partition, Partitioner
from .core.records import records_from_dataframe
from .engine.move import MoveEngine, MoveResult
from .engine.operators import SelectionOperators
from .widget.selection import SelectionStore

logger = logging.getLogger(__name__)


class Transfer(param.Parameterized):
    """Dual-pane transfer list state.

    Usage::

        import transfer_list as tl

        tr = tl.Transfer(
            data_source=[{"key": "1"}, {"key": "2", "disabled": True}],
            target_keys=[],
            on_change=lambda keys, direction, moved: print(keys, moved),
        )
        tr.select_item("left", "1", True)
        tr.move_to_right()

    The caller owns ``data_source`` and ``target_keys``: moves only
    propose a new target-key list through ``on_change``, and the caller
    assigns it back. Supplying ``selected_keys`` at construction makes the
    selection controlled; each later assignment of ``selected_keys`` or
    ``target_keys`` re-splits it. Use ``tr.param.update(...)`` to assign
    both at once.
    """

    # --- Caller-owned data ---
    data_source = param.List(default=[], doc="Item records, each with a 'key'.")
    target_keys = param.List(default=[], doc="Ordered keys in the target pane.")
    selected_keys = param.List(
        default=None, allow_None=True,
        doc="Controlled selection across both panes. None = uncontrolled.",
    )
    row_key = param.Callable(default=None, doc="fn(record) -> key")

    # --- Behavior ---
    one_way = param.Boolean(default=False, doc="Target items are removed, not moved back.")
    disabled = param.Boolean(default=False)
    layout_direction = param.Selector(default="ltr", objects=["ltr", "rtl"])

    # --- Notifications ---
    on_change = param.Callable(default=None, doc="fn(target_keys, direction, moved_keys)")
    on_select_change = param.Callable(default=None, doc="fn(source_selected, target_selected)")
    on_search = param.Callable(default=None, doc="fn(direction, text)")
    on_scroll = param.Callable(default=None, doc="fn(direction, event)")

    def __init__(self, **params):
        super().__init__(**params)
        self._store = SelectionStore(self.selected_keys, self.target_keys)
        self._store.on_select(self._emit_select_change)
        # Rebuilt on the next read after any of its inputs is reassigned
        self._partition: Partition | None = None
        self.param.watch(
            self._invalidate_partition,
            ["data_source", "target_keys", "row_key"],
            onlychanged=False,
        )
        self.param.watch(
            self._sync_selection, ["selected_keys", "target_keys"], onlychanged=False
        )

    @classmethod
    def from_dataframe(
        cls,
        df,
        key_column: str | None = None,
        disabled_column: str | None = "disabled",
        **params,
    ) -> Transfer:
        """Create a Transfer whose items are the rows of ``df``."""
        records = records_from_dataframe(
            df, key_column=key_column, disabled_column=disabled_column
        )
        return cls(data_source=records, **params)

    # --- Derived data ---

    @property
    def partition(self) -> Partition:
        """Current source/target split.

        Cached until ``data_source``, ``target_keys`` or ``row_key`` is
        reassigned; in-place mutation of those lists is not detected.
        """
        if self._partition is None:
            self._partition = Partitioner.separate(
                self.data_source, self.target_keys, self.row_key
            )
        return self._partition

    @property
    def source_items(self) -> list:
        return list(self.partition.source_items)

    @property
    def target_items(self) -> list:
        return list(self.partition.target_items)

    @property
    def controlled(self) -> bool:
        return self._store.controlled

    @property
    def source_selected_keys(self) -> list:
        return self._store.source_selected_keys

    @property
    def target_selected_keys(self) -> list:
        return self._store.target_selected_keys

    def checked_keys(self, pane: str) -> list:
        return self._store.keys(pane)

    @property
    def right_active(self) -> bool:
        """Whether the move-right operation has anything to move."""
        return not self.disabled and bool(self._store.keys(LEFT))

    @property
    def left_active(self) -> bool:
        """Whether the move-left operation has anything to move."""
        return not self.disabled and not self.one_way and bool(self._store.keys(RIGHT))

    def list_side(self, pane: str) -> str:
        """Screen side of ``pane`` under the current layout direction."""
        return rendered_side(pane, self.layout_direction)

    def selection_info(self, pane: str) -> dict[str, int]:
        """Counts for a pane's select-all label."""
        return {
            "selected_count": len(self._store.keys(pane)),
            "total_count": len(self.partition.items(pane)),
        }

    def enabled_keys(self, pane: str) -> list:
        """Keys in ``pane`` that are not disabled."""
        return SelectionOperators.enabled_keys(self.partition.items(pane))

    # --- Moves ---

    def move_to(self, direction: str) -> MoveResult | None:
        """Move the selected, enabled items of the originating pane.

        Returns None when the control is disabled, or when moving left
        in one-way mode.
        """
        direction = validate_direction(direction)
        if self.disabled:
            return None
        if direction == LEFT and self.one_way:
            logger.debug("Move left ignored in one-way mode")
            return None
        result = MoveEngine.move_to(
            direction,
            self._store.source_selected_keys,
            self._store.target_selected_keys,
            self.data_source,
            self.target_keys,
            row_key=self.row_key,
        )
        self._apply(result)
        return result

    def move_to_right(self) -> MoveResult | None:
        return self.move_to(RIGHT)

    def move_to_left(self) -> MoveResult | None:
        return self.move_to(LEFT)

    def remove_items(self, keys: Iterable[Hashable]) -> MoveResult | None:
        """Drop ``keys`` from the target pane (one-way mode only)."""
        if self.disabled or not self.one_way:
            logger.debug("Remove ignored: control disabled or not one-way")
            return None
        result = MoveEngine.remove(keys, self.target_keys)
        self._apply(result)
        return result

    def _apply(self, result: MoveResult) -> None:
        # Selection clear is reported before the new target keys
        self._store.set_pane_selection(result.cleared_pane, [])
        self._store.notify(result.cleared_pane, [])
        if self.on_change is not None:
            self.on_change(
                list(result.new_target_keys), result.direction, list(result.moved_keys)
            )

    # --- Selection ---

    def select_item(self, direction: str, key: Hashable, checked: bool) -> list:
        """Check or uncheck one item; returns the pane's new selection."""
        direction = validate_direction(direction)
        if self.disabled:
            return self._store.keys(direction)
        holder = self._store.toggle_item(direction, key, checked)
        self._store.notify(direction, holder)
        return holder

    def select_all(
        self, direction: str, keys: Iterable[Hashable], check_all: bool
    ) -> list:
        """Union (check_all) or subtract the visible ``keys`` of a pane."""
        direction = validate_direction(direction)
        if self.disabled:
            return self._store.keys(direction)
        keys = list(keys)
        holder = self._store.set_pane_selection(
            direction,
            lambda prev: SelectionOperators.select_all(prev, keys, check_all),
        )
        self._store.notify(direction, holder)
        return holder

    def invert_selection(self, direction: str, keys: Iterable[Hashable]) -> list:
        """Flip the checked state of the visible ``keys`` of a pane."""
        direction = validate_direction(direction)
        if self.disabled:
            return self._store.keys(direction)
        keys = list(keys)
        holder = self._store.set_pane_selection(
            direction, lambda prev: SelectionOperators.invert(prev, keys)
        )
        self._store.notify(direction, holder)
        return holder

    # --- Pass-through events ---

    def handle_search(self, direction: str, text: str) -> None:
        direction = validate_direction(direction)
        if self.on_search is not None:
            self.on_search(direction, text)

    def handle_clear(self, direction: str) -> None:
        self.handle_search(direction, "")

    def handle_scroll(self, direction: str, event: Any = None) -> None:
        direction = validate_direction(direction)
        if self.on_scroll is not None:
            self.on_scroll(direction, event)

    # --- Internals ---

    def _emit_select_change(self, source_keys: list, target_keys: list) -> None:
        if self.on_select_change is not None:
            self.on_select_change(source_keys, target_keys)

    def _invalidate_partition(self, *events) -> None:
        self._partition = None

    def _sync_selection(self, *events) -> None:
        self._store.sync(self.selected_keys, self.target_keys)

    def __repr__(self) -> str:
        return (
            f"Transfer(items={len(self.data_source)}, "
            f"target={len(self.target_keys)}, {self._store!r})"
        )
