from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "Coordinate",
    "Direction",
    "DIRECTIONS",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "direction_for_label",
]


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Grid cell (x = column, y = row). Equal and hashed by value."""

    x: int
    y: int

    def __add__(self, other: "Direction") -> "Coordinate":
        return Coordinate(self.x + other.dx, self.y + other.dy)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Direction:
    """Unit step together with the move label used in path strings."""

    dx: int
    dy: int
    label: str


UP = Direction(0, -1, "u")
DOWN = Direction(0, 1, "d")
LEFT = Direction(-1, 0, "l")
RIGHT = Direction(1, 0, "r")

# Enumeration order of children and the path alphabet both come from here.
DIRECTIONS: Tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)

_BY_LABEL = {d.label: d for d in DIRECTIONS}


def direction_for_label(label: str) -> Direction:
    """Look up a direction by its path label (case-insensitive, LURD style)."""
    try:
        return _BY_LABEL[label.lower()]
    except KeyError:
        raise ValueError(f"unknown move label: {label!r}") from None
