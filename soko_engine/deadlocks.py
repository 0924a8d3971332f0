from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Iterable

from .coords import Coordinate, UP, DOWN, LEFT, RIGHT
from .grid import Grid

if TYPE_CHECKING:
    from .state import GoalSet, State

# (destination, grid, goals) -> True if a box placed there can never reach a goal
DeadlockPredicate = Callable[[Coordinate, Grid, "GoalSet"], bool]


# --- individual deadlock rules ----------------------------------------------

def is_corner_deadlock(dest: Coordinate, grid: Grid, goals: Iterable[Coordinate]) -> bool:
    """Box (not on goal) in a corner of two walls/outside the level."""
    if dest in goals:
        return False

    def wall(d) -> bool:
        return grid.is_wall(dest + d)

    up, down, left, right = wall(UP), wall(DOWN), wall(LEFT), wall(RIGHT)
    return (up and left) or (up and right) or (down and left) or (down and right)


def never_deadlocked(dest: Coordinate, grid: Grid, goals: Iterable[Coordinate]) -> bool:
    """Disables pruning."""
    return False


def any_deadlock(*predicates: DeadlockPredicate) -> DeadlockPredicate:
    """Combine several rules; the destination is dead if any rule says so."""
    def combined(dest: Coordinate, grid: Grid, goals) -> bool:
        return any(p(dest, grid, goals) for p in predicates)
    return combined


# --- whole-configuration check ----------------------------------------------

def has_corner_deadlock(state: "State", predicate: DeadlockPredicate = is_corner_deadlock) -> bool:
    """True if any box of the configuration is already dead."""
    return any(predicate(b, state.grid, state.goals) for b in state.boxes)
