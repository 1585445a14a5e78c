"""SelectionStore: per-pane selected keys + callback registry."""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Iterable, Union

from ..core.direction import LEFT, RIGHT, validate_direction
from ..core.validation import normalize_keys
from ..engine.operators import SelectionOperators

logger = logging.getLogger(__name__)

SelectCallback = Callable[[list, list], Any]
KeysUpdater = Callable[[list], Iterable[Hashable]]


class SelectionStore:
    """Holds the selected keys of the source ("left") and target ("right") panes.

    The mode is fixed at construction. Passing ``selected_keys`` makes the
    store controlled: the external list is the source of truth and every
    new external value is re-split with :meth:`initialize`. Without it the
    store is uncontrolled and owns its state.

    In both modes writes land in the store immediately, so readers see the
    change within the same interaction. A controlled store expects the
    caller to overwrite that state on its next external update.
    """

    def __init__(
        self,
        selected_keys: Iterable[Hashable] | None = None,
        target_keys: Iterable[Hashable] | None = None,
    ) -> None:
        self._controlled = selected_keys is not None
        self._keys: dict[str, list] = {LEFT: [], RIGHT: []}
        self._callbacks: list[SelectCallback] = []
        self.initialize(selected_keys, target_keys)

    @property
    def controlled(self) -> bool:
        return self._controlled

    @property
    def source_selected_keys(self) -> list:
        return list(self._keys[LEFT])

    @property
    def target_selected_keys(self) -> list:
        return list(self._keys[RIGHT])

    def keys(self, pane: str) -> list:
        """Selected keys of ``pane`` (a copy)."""
        return list(self._keys[validate_direction(pane)])

    def initialize(
        self,
        selected_keys: Iterable[Hashable] | None,
        target_keys: Iterable[Hashable] | None,
    ) -> None:
        """Split a flat selection into the two panes by target membership."""
        selected = normalize_keys(selected_keys)
        in_target = set(normalize_keys(target_keys))
        self._keys = {
            LEFT: [key for key in selected if key not in in_target],
            RIGHT: [key for key in selected if key in in_target],
        }

    def sync(
        self,
        selected_keys: Iterable[Hashable] | None,
        target_keys: Iterable[Hashable] | None,
    ) -> bool:
        """Re-split a new external selection. No-op when uncontrolled.

        Returns True when the state was reset.
        """
        if not self._controlled:
            return False
        self.initialize(selected_keys, target_keys)
        logger.debug(
            "Selection resynced: %d source, %d target",
            len(self._keys[LEFT]), len(self._keys[RIGHT]),
        )
        return True

    def set_pane_selection(
        self,
        pane: str,
        keys: Union[Iterable[Hashable], KeysUpdater],
    ) -> list:
        """Replace the selection of one pane.

        ``keys`` is either the new keys or a function of the previous keys.
        The other pane is never touched. Returns the new selection.
        """
        pane = validate_direction(pane)
        if callable(keys):
            new_keys = list(keys(list(self._keys[pane])))
        else:
            new_keys = list(keys)
        self._keys[pane] = new_keys
        return list(new_keys)

    def toggle_item(self, pane: str, key: Hashable, checked: bool) -> list:
        """Add or remove ``key`` in ``pane``; a re-checked key moves to the end."""
        holder = SelectionOperators.toggle(
            self._keys[validate_direction(pane)], key, checked
        )
        return self.set_pane_selection(pane, holder)

    # --- Notifications ---

    def on_select(self, callback: SelectCallback) -> None:
        """Register a callback: fn(source_selected_keys, target_selected_keys)."""
        self._callbacks.append(callback)

    def notify(self, pane: str, holder: Iterable[Hashable]) -> None:
        """Report ``holder`` for ``pane`` with the other pane passed through."""
        pane = validate_direction(pane)
        holder = list(holder)
        if pane == LEFT:
            source, target = holder, list(self._keys[RIGHT])
        else:
            source, target = list(self._keys[LEFT]), holder
        for cb in self._callbacks:
            cb(list(source), list(target))

    def __repr__(self) -> str:
        mode = "controlled" if self._controlled else "uncontrolled"
        return (
            f"SelectionStore({mode}, source={len(self._keys[LEFT])}, "
            f"target={len(self._keys[RIGHT])})"
        )
