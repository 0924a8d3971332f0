import logging

import pytest

from soko_engine.parser import parse_level_str
from soko_engine.moves import apply_path
from search.best_first import best_first, SearchResult
from search.config import SearchConfig
from search.priority_queue import PriorityQueue
from search.transposition import Transposition

LVL = """
#####
#.@ #
# $ #
# . #
#####
"""

TWO_BOXES = """
#######
#     #
# $$  #
# @ ..#
#     #
#######
"""


def test_solve_simple():
    s = parse_level_str(LVL)
    res = best_first(s)
    assert res.success is True
    assert res.path == "d"
    assert res.solution_len == 1
    assert res.final.is_solved()


@pytest.mark.parametrize("mode", ["greedy", "astar"])
@pytest.mark.parametrize("heuristic", ["zero", "manhattan", "hungarian", "weighted"])
def test_solutions_replay(mode, heuristic):
    s = parse_level_str(TWO_BOXES)
    res = best_first(s, SearchConfig(mode=mode, heuristic=heuristic, node_limit=50000))
    assert res.success
    states = apply_path(s, res.path)
    assert len(states) == len(res.path) + 1
    assert states[-1].is_solved()


def test_astar_zero_is_shortest():
    s = parse_level_str(TWO_BOXES)
    res = best_first(s, SearchConfig(mode="astar", heuristic="zero"))
    greedy = best_first(s, SearchConfig(mode="greedy", heuristic="weighted"))
    assert res.success and greedy.success
    assert res.solution_len <= greedy.solution_len


def test_already_solved_start():
    s = parse_level_str("#####\n#*@ #\n#####")
    res = best_first(s)
    assert res.success and res.path == "" and res.nodes == 0


def test_dead_start_is_rejected():
    s = parse_level_str("#####\n#$ .#\n# @ #\n#####")
    res = best_first(s)
    assert res.success is False
    assert res.nodes == 0
    assert res.as_dict()["solution_len"] == -1


def test_unsolvable_exhausts_frontier():
    # the goal sits in a room the player and box can never reach
    lvl = """
#######
#  $ @#
#######
#.    #
#######
"""
    s = parse_level_str(lvl)
    res = best_first(s)
    assert res.success is False
    assert res.nodes > 0


def test_node_limit(caplog):
    s = parse_level_str(TWO_BOXES)
    with caplog.at_level(logging.INFO, logger="search.best_first"):
        res = best_first(s, SearchConfig(heuristic="zero", mode="astar", node_limit=3))
    assert res.success is False
    assert res.nodes == 3
    assert "Node limit" in caplog.text


def test_explicit_heuristic_wins():
    s = parse_level_str(LVL)
    calls = []

    def h(*args):
        calls.append(args)
        return 0.0

    res = best_first(s, heuristic=h)
    assert res.success
    assert calls


@pytest.mark.parametrize("kwargs", [
    {"mode": "dfs"},
    {"time_limit_s": -1.0},
    {"node_limit": -5},
    {"log_every": -1},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_result_dict():
    r = SearchResult(success=True, nodes=4, runtime=0.5, path="udl")
    assert r.as_dict() == {"success": True, "nodes": 4, "runtime": 0.5,
                           "solution_len": 3, "path": "udl"}


def test_priority_queue_is_fifo_on_ties():
    q = PriorityQueue()
    q.push(1.0, "a")
    q.push(0.5, "b")
    q.push(1.0, "c")
    assert len(q) == 3
    assert q.pop() == "b"
    assert q.pop_with_priority() == (1.0, "a")
    assert q.pop() == "c"
    assert not q


def test_transposition_keeps_best_g():
    s = parse_level_str(LVL)
    t = Transposition()
    assert t.seen_better(s, 3) is False
    assert s in t
    assert t.seen_better(s, 5) is True
    assert t.seen_better(s, 1) is False
    # same player and boxes reached via a different path
    there_and_back = apply_path(s, "lr")[-1]
    assert there_and_back is not s
    assert t.seen_better(there_and_back, 2) is True
    assert len(t) == 1


def test_transposition_flags_stale_entries():
    s = parse_level_str(LVL)
    t = Transposition()
    long_way = apply_path(s, "lrlr")[-1]
    assert t.seen_better(long_way, len(long_way.path)) is False
    assert not t.is_stale(long_way)
    t.seen_better(s, 0)
    assert t.is_stale(long_way)
    assert not t.is_stale(s)


def test_root_scored_with_search_heuristic():
    s = parse_level_str(LVL)
    calls = []

    def h(grid, width, height, goals, boxes, goals_satisfied, path, player):
        calls.append((path, player))
        return 0.0

    best_first(s, heuristic=h)
    assert calls[0] == ("", s.player)
