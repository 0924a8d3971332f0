from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

from soko_engine.deadlocks import has_corner_deadlock, is_corner_deadlock, never_deadlocked
from soko_engine.moves import successors
from soko_engine.state import Heuristic, State
from heuristics.selector import get_heuristic
from .config import SearchConfig
from .priority_queue import PriorityQueue
from .transposition import Transposition

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    success: bool
    nodes: int
    runtime: float
    path: str = ""
    final: Optional[State] = None

    @property
    def solution_len(self) -> int:
        return len(self.path) if self.success else -1

    def as_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "nodes": self.nodes,
            "runtime": self.runtime,
            "solution_len": self.solution_len,
            "path": self.path,
        }


def _priority(g: int, h: float, mode: str) -> float:
    if mode == "astar":
        return g + h
    return h


def _score_root(start: State, heuristic: Heuristic) -> float:
    """The loader may have scored the root with another heuristic."""
    grid = start.grid
    return float(heuristic(grid, grid.width, grid.height, start.goals, start.boxes,
                           start.goals_satisfied, start.path, start.player))


def best_first(
    start: State,
    config: Optional[SearchConfig] = None,
    heuristic: Optional[Heuristic] = None,
) -> SearchResult:
    """Greedy best-first or A* over single player moves.

    Duplicates are suppressed through a fingerprint table; the solution is the
    udlr path string of the first solved configuration popped.
    """
    config = config or SearchConfig()
    if heuristic is None:
        heuristic = get_heuristic(config.heuristic)
    deadlock = is_corner_deadlock if config.prune_deadlocks else never_deadlocked

    t0 = time.time()
    logger.info("Starting %s search: %dx%d, %d boxes, heuristic=%s",
                config.mode, start.width, start.height, len(start.boxes), config.heuristic)

    if config.prune_deadlocks and has_corner_deadlock(start):
        logger.info("Start configuration is already deadlocked")
        return SearchResult(success=False, nodes=0, runtime=time.time() - t0)

    openq = PriorityQueue()
    trans = Transposition()
    trans.seen_better(start, len(start.path))
    openq.push(_priority(len(start.path), _score_root(start, heuristic), config.mode), start)

    expanded = 0
    found: Optional[State] = None

    while openq:
        if config.time_limit_s is not None and (time.time() - t0) > config.time_limit_s:
            logger.info("Time limit %.2fs reached after %d expansions", config.time_limit_s, expanded)
            break
        s: State = openq.pop()
        if s.is_solved():
            found = s
            break
        if trans.is_stale(s):
            continue
        s.mark_visited()
        expanded += 1
        if config.node_limit is not None and expanded >= config.node_limit:
            logger.info("Node limit %d reached", config.node_limit)
            break
        if config.log_every and expanded % config.log_every == 0:
            logger.debug("expanded=%d open=%d seen=%d depth=%d h=%.1f",
                         expanded, len(openq), len(trans), len(s.path), s.heuristic_value)

        for ns in successors(s, heuristic=heuristic, deadlock=deadlock,
                             evaluation=config.evaluation):
            if trans.seen_better(ns, len(ns.path)):
                continue
            openq.push(_priority(len(ns.path), ns.heuristic_value, config.mode), ns)

    runtime = time.time() - t0
    if found is None:
        logger.info("No solution: nodes=%d runtime=%.3fs", expanded, runtime)
        return SearchResult(success=False, nodes=expanded, runtime=runtime)
    logger.info("Solved: %d moves, nodes=%d runtime=%.3fs", len(found.path), expanded, runtime)
    return SearchResult(success=True, nodes=expanded, runtime=runtime,
                        path=found.path, final=found)
