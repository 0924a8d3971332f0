from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .coords import Coordinate

TOK_WALL = "#"
TOK_FLOOR = " "


@dataclass(frozen=True, slots=True)
class Grid:
    """
    Static terrain of a level.

    rows[y][x] is either TOK_WALL or TOK_FLOOR. Boxes, goals and the player
    are not stored here, the grid is shared by every configuration of a puzzle.
    """

    rows: Tuple[str, ...]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        rows = tuple(rows)
        if not rows:
            raise ValueError("Empty grid")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("Grid rows must all have the same width")
        return cls(rows=tuple(
            "".join(TOK_WALL if ch == TOK_WALL else TOK_FLOOR for ch in r) for r in rows
        ))

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, c: Coordinate) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def is_wall(self, c: Coordinate) -> bool:
        """Outside the level is treated as a wall."""
        if not self.in_bounds(c):
            return True
        return self.rows[c.y][c.x] == TOK_WALL

    def is_floor(self, c: Coordinate) -> bool:
        return self.in_bounds(c) and self.rows[c.y][c.x] != TOK_WALL

    def cells(self) -> Iterator[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)
