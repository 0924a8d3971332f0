from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .coords import Coordinate
from .grid import Grid

__all__ = [
    "State",
    "GoalSet",
    "Heuristic",
    "Fingerprint",
    "count_goals",
]

GoalSet = FrozenSet[Coordinate]
Fingerprint = Tuple[Coordinate, Tuple[Coordinate, ...]]

# estimate(grid, width, height, goals, boxes, goals_satisfied, path, player) -> cost
Heuristic = Callable[
    [Grid, int, int, GoalSet, Sequence[Coordinate], int, str, Coordinate], float
]


def count_goals(boxes: Iterable[Coordinate], goals: GoalSet) -> int:
    """Number of boxes standing on a goal cell."""
    return sum(1 for b in boxes if b in goals)


@dataclass(slots=True)
class State:
    """
    One configuration of the puzzle.

    grid and goals are shared with every other configuration of the level;
    boxes and path belong to this configuration only. Nothing is changed after
    construction except the visited marker.
    """

    grid: Grid
    player: Coordinate
    boxes: List[Coordinate]
    goals: GoalSet
    path: str = ""
    goals_satisfied: int = 0
    heuristic_value: float = 0.0
    visited: bool = False
    heuristic: Optional[Heuristic] = field(default=None, compare=False, repr=False)

    @classmethod
    def root(
        cls,
        grid: Grid,
        player: Coordinate,
        boxes: Iterable[Coordinate],
        goals: Iterable[Coordinate],
        heuristic: Optional[Heuristic] = None,
    ) -> "State":
        """Build the starting configuration of a level."""
        goal_set = frozenset(goals)
        box_list = list(boxes)
        satisfied = count_goals(box_list, goal_set)
        h = 0.0
        if heuristic is not None:
            h = float(heuristic(grid, grid.width, grid.height, goal_set,
                                box_list, satisfied, "", player))
        return cls(grid=grid, player=player, boxes=box_list, goals=goal_set,
                   path="", goals_satisfied=satisfied, heuristic_value=h,
                   heuristic=heuristic)

    # ---- shortcuts
    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    # ---- lookups
    def box_at(self, x: int, y: int) -> Optional[Coordinate]:
        """The box standing on (x, y), or None."""
        for b in self.boxes:
            if b.x == x and b.y == y:
                return b
        return None

    def has_box(self, c: Coordinate) -> bool:
        return self.box_at(c.x, c.y) is not None

    def is_goal_cell(self, c: Coordinate) -> bool:
        return c in self.goals

    def count_goals(self, goals: Optional[Iterable[Coordinate]] = None) -> int:
        if goals is None:
            return count_goals(self.boxes, self.goals)
        return count_goals(self.boxes, frozenset(goals))

    def is_solved(self) -> bool:
        """All boxes are on goals."""
        return self.goals_satisfied == len(self.boxes)

    # ---- driver bookkeeping
    def mark_visited(self) -> None:
        self.visited = True

    def fingerprint(self) -> Fingerprint:
        """Player plus boxes in canonical (row-major) order."""
        return (self.player, tuple(sorted(self.boxes, key=lambda b: (b.y, b.x))))

    # ---- transitions
    def children(self, goals: Optional[GoalSet] = None, **kwargs) -> List["State"]:
        from .moves import successors
        return successors(self, goals, **kwargs)
