from __future__ import annotations
from typing import List, Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment

from soko_engine.coords import Coordinate
from soko_engine.grid import Grid
from soko_engine.state import GoalSet

# Weights for h_goal_weighted: BOX_MOVE per step between a box and its nearest
# goal, EMPTY_MOVE once per box not yet on a goal, GOAL_MOVE for a placed box.
EMPTY_MOVE = 15
BOX_MOVE = 3
GOAL_MOVE = 0


# ---- helpers

def manhattan(a: Coordinate, b: Coordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def _sorted(cells) -> List[Coordinate]:
    return sorted(cells, key=lambda c: (c.y, c.x))


# ---- classical heuristics
# All share the call shape
#   h(grid, width, height, goals, boxes, goals_satisfied, path, player) -> float

def h_zero(grid: Grid, width: int, height: int, goals: GoalSet,
           boxes: Sequence[Coordinate], goals_satisfied: int, path: str,
           player: Coordinate) -> float:
    return 0.0


def h_manhattan(grid: Grid, width: int, height: int, goals: GoalSet,
                boxes: Sequence[Coordinate], goals_satisfied: int, path: str,
                player: Coordinate) -> float:
    """Sum over boxes of the distance to the nearest goal."""
    if not goals:
        return 0.0
    return float(sum(min(manhattan(b, g) for g in goals) for b in boxes))


def h_manhattan_hungarian(grid: Grid, width: int, height: int, goals: GoalSet,
                          boxes: Sequence[Coordinate], goals_satisfied: int,
                          path: str, player: Coordinate) -> float:
    """Cost = optimal matching of boxes → goals by Manhattan distance.
    Walls are not considered (this is a valid lower bound)."""
    if not boxes or not goals:
        return 0.0
    bs = _sorted(boxes)
    gs = _sorted(goals)
    C = np.empty((len(bs), len(gs)), dtype=np.int32)
    for i, b in enumerate(bs):
        for j, g in enumerate(gs):
            C[i, j] = manhattan(b, g)
    r, c = linear_sum_assignment(C)
    return float(C[r, c].sum())


def h_goal_weighted(grid: Grid, width: int, height: int, goals: GoalSet,
                    boxes: Sequence[Coordinate], goals_satisfied: int, path: str,
                    player: Coordinate) -> float:
    """Weighted Manhattan sum plus the player's distance to the closest open box.

    Not admissible; meant for greedy ordering.
    """
    if not goals:
        return 0.0
    total = 0
    open_boxes = []
    for b in boxes:
        if b in goals:
            total += GOAL_MOVE
            continue
        open_boxes.append(b)
        total += BOX_MOVE * min(manhattan(b, g) for g in goals)
    if open_boxes:
        total += EMPTY_MOVE * (len(boxes) - goals_satisfied)
        total += min(manhattan(player, b) for b in open_boxes)
    return float(total)
