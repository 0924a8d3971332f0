from __future__ import annotations

from heuristics.classic import h_zero, h_manhattan, h_manhattan_hungarian, h_goal_weighted
from soko_engine.state import Heuristic

HEURISTICS = {
    "zero": h_zero,
    "manhattan": h_manhattan,
    "hungarian": h_manhattan_hungarian,
    "weighted": h_goal_weighted,
}


def get_heuristic(name: str) -> Heuristic:
    name = name.lower()
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic: {name}") from None
