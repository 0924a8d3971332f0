import pytest

from soko_engine.coords import Coordinate as C
from soko_engine.grid import Grid
from heuristics.classic import (
    h_zero, h_manhattan, h_manhattan_hungarian, h_goal_weighted,
    manhattan, EMPTY_MOVE, BOX_MOVE,
)
from heuristics.selector import get_heuristic

GRID = Grid.from_rows(["#######"] + ["#     #"] * 4 + ["#######"])


def _call(h, boxes, goals, player=C(1, 1), path=""):
    goals = frozenset(goals)
    satisfied = sum(1 for b in boxes if b in goals)
    return h(GRID, GRID.width, GRID.height, goals, boxes, satisfied, path, player)


def test_manhattan_helper():
    assert manhattan(C(1, 1), C(4, 3)) == 5


def test_zero():
    assert _call(h_zero, [C(2, 2)], [C(4, 4)]) == 0.0


def test_manhattan_nearest_goal_sum():
    # both boxes are closest to the same goal
    boxes = [C(1, 1), C(2, 1)]
    goals = [C(1, 2), C(5, 4)]
    assert _call(h_manhattan, boxes, goals) == 1 + 2


def test_hungarian_assigns_distinct_goals():
    boxes = [C(1, 1), C(2, 1)]
    goals = [C(1, 2), C(5, 4)]
    # (1,1)->(1,2)=1 + (2,1)->(5,4)=6 beats (1,1)->(5,4)=7 + (2,1)->(1,2)=2
    assert _call(h_manhattan_hungarian, boxes, goals) == 7.0
    assert _call(h_manhattan_hungarian, boxes, goals) >= _call(h_manhattan, boxes, goals)


def test_hungarian_more_goals_than_boxes():
    assert _call(h_manhattan_hungarian, [C(3, 3)], [C(1, 1), C(3, 4)]) == 1.0


def test_empty_inputs():
    for h in (h_manhattan, h_manhattan_hungarian, h_goal_weighted):
        assert _call(h, [], []) == 0.0


def test_goal_weighted():
    assert _call(h_goal_weighted, [C(2, 2)], [C(2, 2)]) == 0.0
    # one open box two steps from its goal, player three steps from the box
    value = _call(h_goal_weighted, [C(2, 2)], [C(4, 2)], player=C(1, 4))
    assert value == BOX_MOVE * 2 + EMPTY_MOVE + 3


def test_deterministic():
    boxes = [C(1, 1), C(4, 3), C(2, 2)]
    goals = [C(5, 4), C(1, 4), C(3, 1)]
    for h in (h_manhattan, h_manhattan_hungarian, h_goal_weighted):
        assert _call(h, boxes, goals) == _call(h, list(boxes), goals)


def test_selector():
    assert get_heuristic("Hungarian") is h_manhattan_hungarian
    assert get_heuristic("zero") is h_zero
    with pytest.raises(ValueError):
        get_heuristic("gnn")
