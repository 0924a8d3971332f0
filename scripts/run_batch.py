from __future__ import annotations
import argparse, csv, os, time
import logging
from typing import Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from soko_engine.levels.resolve import load_level_by_id
from heuristics.selector import HEURISTICS, get_heuristic
from search.best_first import best_first
from search.config import MODES, SearchConfig

logger = logging.getLogger(__name__)

FIELDS = ["level_id", "heuristic", "mode", "success", "nodes", "runtime", "solution_len", "path", "error"]


def _run_one(args_tuple) -> Dict[str, object]:
    level_id, cfg = args_tuple
    row: Dict[str, object] = {"level_id": level_id, "heuristic": cfg.heuristic, "mode": cfg.mode,
                              "success": False, "nodes": 0, "runtime": 0.0,
                              "solution_len": -1, "path": "", "error": ""}
    try:
        s = load_level_by_id(level_id, get_heuristic(cfg.heuristic))
    except (OSError, ValueError, IndexError) as e:
        row["error"] = str(e)
        return row
    row.update(best_first(s, cfg).as_dict())
    return row


def main(argv=None):
    p = argparse.ArgumentParser(description="Batch searches → CSV (flags, parallel)")
    p.add_argument("--list", required=True, help="file with one level id per line")
    p.add_argument("--h", default="manhattan", choices=sorted(HEURISTICS))
    p.add_argument("--mode", default="greedy", choices=MODES)
    p.add_argument("--no_dl", action="store_true", help="disable corner deadlock pruning")
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=10.0)
    p.add_argument("--node_limit", type=int, default=200000)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        level_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    cfg = SearchConfig(mode=args.mode, heuristic=args.h, time_limit_s=args.time_limit,
                       node_limit=args.node_limit, prune_deadlocks=not args.no_dl)
    jobs = args.jobs or cpu_count()
    payload = [(lid, cfg) for lid in level_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Solving", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Solving", unit="level"))

    for r in rows:
        if r["error"]:
            logger.warning("%s: %s", r["level_id"], r["error"])

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
