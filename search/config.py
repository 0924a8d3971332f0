from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from soko_engine.moves import Evaluation

MODES = ("greedy", "astar")


@dataclass
class SearchConfig:
    mode: str = "greedy"            # greedy: order by h; astar: order by g + h
    heuristic: str = "manhattan"    # name understood by heuristics.selector
    time_limit_s: Optional[float] = None
    node_limit: Optional[int] = None
    prune_deadlocks: bool = True
    evaluation: Evaluation = Evaluation.POST_MOVE
    log_every: int = 10000          # progress line every N expansions (0 = off)

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"unknown search mode: {self.mode} (expected one of {MODES})")
        if self.time_limit_s is not None and self.time_limit_s < 0:
            raise ValueError("time_limit_s must be >= 0")
        if self.node_limit is not None and self.node_limit < 0:
            raise ValueError("node_limit must be >= 0")
        if self.log_every < 0:
            raise ValueError("log_every must be >= 0")
