from __future__ import annotations
import argparse
import logging

from soko_engine.levels.resolve import load_level_by_id
from soko_engine.moves import Evaluation, apply_path
from soko_engine.render import describe, render_ascii
from heuristics.selector import HEURISTICS, get_heuristic
from search.best_first import best_first
from search.config import MODES, SearchConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve one Sokoban level")
    p.add_argument("level_id", help="Level id like 'path/to/pack.txt#idx'.")
    p.add_argument("--h", type=str, default="manhattan", choices=sorted(HEURISTICS), help="heuristic")
    p.add_argument("--mode", type=str, default="greedy", choices=MODES)
    p.add_argument("--time_limit", type=float, default=10.0)
    p.add_argument("--node_limit", type=int, default=200000)
    p.add_argument("--no_dl", action="store_true", help="disable corner deadlock pruning")
    p.add_argument("--pre_move_eval", action="store_true",
                   help="score plain moves on the parent's box list")
    p.add_argument("--show", action="store_true", help="print every step of the solution")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def config_from_args(args: argparse.Namespace) -> SearchConfig:
    return SearchConfig(
        mode=args.mode,
        heuristic=args.h,
        time_limit_s=args.time_limit,
        node_limit=args.node_limit,
        prune_deadlocks=not args.no_dl,
        evaluation=Evaluation.PRE_MOVE if args.pre_move_eval else Evaluation.POST_MOVE,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = config_from_args(args)
    s = load_level_by_id(args.level_id, get_heuristic(cfg.heuristic))
    print(describe(s))

    res = best_first(s, cfg)
    print("Result:", res.as_dict())
    if res.success and args.show:
        for i, st in enumerate(apply_path(s, res.path)):
            print(f"\n-- step {i} --\n{render_ascii(st)}")
    return 0 if res.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
