"""Pane and direction vocabulary shared by every transfer component."""

from __future__ import annotations

from typing import Literal

Direction = Literal["left", "right"]

LEFT: Direction = "left"
RIGHT: Direction = "right"

# Logical panes. The source pane always feeds moves to the right.
SOURCE: Direction = LEFT
TARGET: Direction = RIGHT

VALID_DIRECTIONS = (LEFT, RIGHT)
VALID_LAYOUTS = ("ltr", "rtl")


def validate_direction(direction: str) -> Direction:
    """Return ``direction`` unchanged or raise for an unknown pane name."""
    if direction not in VALID_DIRECTIONS:
        raise ValueError(
            f"Unknown direction '{direction}'. Use one of {list(VALID_DIRECTIONS)}."
        )
    return direction  # type: ignore[return-value]


def opposite(direction: str) -> Direction:
    """The other pane."""
    return RIGHT if validate_direction(direction) == LEFT else LEFT


def rendered_side(pane: str, layout: str = "ltr") -> Direction:
    """Screen side a pane is drawn on.

    Right-to-left layouts mirror the panes; the logical pane identity
    (and therefore every selection and move rule) is unaffected.
    """
    pane = validate_direction(pane)
    if layout not in VALID_LAYOUTS:
        raise ValueError(
            f"Unknown layout direction '{layout}'. Use 'ltr' or 'rtl'."
        )
    if layout == "rtl":
        return opposite(pane)
    return pane
