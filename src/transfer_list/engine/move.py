"""MoveEngine: compute target keys after moving selected items."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping

from ..core.direction import Direction, RIGHT, opposite, validate_direction
from ..core.key_map import RowKey, group_disabled_keys
from ..core.validation import normalize_keys

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move or remove.

    ``cleared_pane`` is the pane whose selection must be emptied before
    ``new_target_keys`` is reported.
    """

    new_target_keys: list
    direction: Direction
    moved_keys: list
    cleared_pane: Direction

    def to_dict(self) -> dict:
        return {
            "targetKeys": list(self.new_target_keys),
            "direction": self.direction,
            "movedKeys": list(self.moved_keys),
        }


class MoveEngine:
    """Pure move/remove computations. Never mutates its inputs."""

    @staticmethod
    def eligible_keys(
        keys: Iterable[Hashable],
        dataset: Iterable[Mapping[str, Any]] | None,
        row_key: RowKey | None = None,
    ) -> list:
        """Drop disabled keys; selection order is kept."""
        disabled = group_disabled_keys(normalize_keys(dataset), row_key)
        keys = normalize_keys(keys)
        eligible = [key for key in keys if key not in disabled]
        if len(eligible) != len(keys):
            logger.debug(
                "Skipped %d disabled item(s) in move", len(keys) - len(eligible)
            )
        return eligible

    @staticmethod
    def prepend_newest(moving_keys: list, target_keys: list) -> list:
        """Newest-first target ordering: moved keys go in front."""
        return list(moving_keys) + list(target_keys)

    @staticmethod
    def without(target_keys: list, removed_keys: Iterable[Hashable]) -> list:
        """``target_keys`` minus ``removed_keys``, order preserved."""
        removed = set(removed_keys)
        return [key for key in target_keys if key not in removed]

    @staticmethod
    def move_to(
        direction: str,
        source_selected_keys: Iterable[Hashable] | None,
        target_selected_keys: Iterable[Hashable] | None,
        dataset: Iterable[Mapping[str, Any]] | None,
        target_keys: Iterable[Hashable] | None,
        row_key: RowKey | None = None,
    ) -> MoveResult:
        """Move the originating pane's selection toward ``direction``.

        Moving right takes the source selection, moving left the target
        selection. Disabled items never move. An empty eligible set is a
        valid move that leaves the target keys unchanged.
        """
        direction = validate_direction(direction)
        target_keys = normalize_keys(target_keys)
        if direction == RIGHT:
            moving = source_selected_keys
        else:
            moving = target_selected_keys
        moving_keys = MoveEngine.eligible_keys(moving, dataset, row_key)

        if direction == RIGHT:
            new_target_keys = MoveEngine.prepend_newest(moving_keys, target_keys)
        else:
            new_target_keys = MoveEngine.without(target_keys, moving_keys)

        logger.debug("Moved %d key(s) %s", len(moving_keys), direction)
        return MoveResult(
            new_target_keys=new_target_keys,
            direction=direction,
            moved_keys=moving_keys,
            cleared_pane=opposite(direction),
        )

    @staticmethod
    def remove(
        removed_keys: Iterable[Hashable] | None,
        target_keys: Iterable[Hashable] | None,
    ) -> MoveResult:
        """One-way removal from the target pane, reported as a left move."""
        removed = normalize_keys(removed_keys)
        new_target_keys = MoveEngine.without(normalize_keys(target_keys), removed)
        logger.debug("Removed %d key(s) from target", len(removed))
        return MoveResult(
            new_target_keys=new_target_keys,
            direction="left",
            moved_keys=removed,
            cleared_pane=RIGHT,
        )
