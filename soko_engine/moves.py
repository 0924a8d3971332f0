from __future__ import annotations
import enum
from typing import Iterable, List, Optional

from .coords import Coordinate, Direction, DIRECTIONS, direction_for_label
from .deadlocks import DeadlockPredicate, is_corner_deadlock
from .state import GoalSet, Heuristic, State, count_goals


class Evaluation(enum.Enum):
    """Which box collection the heuristic sees for a plain (non-push) move.

    POST_MOVE: the child's own boxes, for pushes and moves alike.
    PRE_MOVE:  plain moves are scored on the parent's box list; pushes always
               use the child's boxes. Same content, different object.
    """
    POST_MOVE = "post"
    PRE_MOVE = "pre"


def _make_child(
    parent: State,
    player: Coordinate,
    boxes: List[Coordinate],
    goals: GoalSet,
    direction: Direction,
    heuristic: Optional[Heuristic],
    scored_boxes: List[Coordinate],
) -> State:
    satisfied = count_goals(boxes, goals)
    path = parent.path + direction.label
    h = 0.0
    if heuristic is not None:
        grid = parent.grid
        # the heuristic sees the path up to (not including) this move
        h = float(heuristic(grid, grid.width, grid.height, goals,
                            scored_boxes, satisfied, parent.path, player))
    return State(
        grid=parent.grid,
        player=player,
        boxes=boxes,
        goals=goals,
        path=path,
        goals_satisfied=satisfied,
        heuristic_value=h,
        heuristic=parent.heuristic,
    )


def step(
    state: State,
    direction: Direction,
    goals: Optional[GoalSet] = None,
    heuristic: Optional[Heuristic] = None,
    deadlock: DeadlockPredicate = is_corner_deadlock,
    evaluation: Evaluation = Evaluation.POST_MOVE,
) -> Optional[State]:
    """Child reached by one action in `direction`, or None if illegal/pruned."""
    goals = state.goals if goals is None else frozenset(goals)
    heuristic = state.heuristic if heuristic is None else heuristic
    grid = state.grid

    target = state.player + direction
    if grid.is_wall(target):
        return None

    if not state.has_box(target):
        boxes = list(state.boxes)
        scored = state.boxes if evaluation is Evaluation.PRE_MOVE else boxes
        return _make_child(state, target, boxes, goals, direction, heuristic, scored)

    # push
    dest = target + direction
    if grid.is_wall(dest) or state.has_box(dest):
        return None
    if dest not in goals and deadlock(dest, grid, goals):
        return None
    boxes = [dest if b == target else b for b in state.boxes]
    return _make_child(state, target, boxes, goals, direction, heuristic, boxes)


def successors(
    state: State,
    goals: Optional[GoalSet] = None,
    heuristic: Optional[Heuristic] = None,
    deadlock: DeadlockPredicate = is_corner_deadlock,
    evaluation: Evaluation = Evaluation.POST_MOVE,
) -> List[State]:
    """Generates every configuration one player action away.

    Directions are tried in the fixed order up, down, left, right. A direction
    gives no child when the player would walk into a wall or off the grid, or
    when it pushes a box into a wall, another box, or a dead corner that is not
    a goal. Each child gets its own box list and its path extended by the
    direction label.
    """
    succs: List[State] = []
    for d in DIRECTIONS:
        child = step(state, d, goals, heuristic, deadlock, evaluation)
        if child is not None:
            succs.append(child)
    return succs


def is_push(parent: State, child: State) -> bool:
    return parent.boxes != child.boxes


def apply_path(
    state: State,
    path: Iterable[str],
    deadlock: DeadlockPredicate = is_corner_deadlock,
) -> List[State]:
    """Replay a udlr path from `state`; stops at the first illegal move.

    Returns the visited configurations, starting with `state` itself.
    """
    out = [state]
    cur = state
    for label in path:
        nxt = step(cur, direction_for_label(label), deadlock=deadlock)
        if nxt is None:
            break
        out.append(nxt)
        cur = nxt
    return out
