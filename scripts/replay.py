from __future__ import annotations
import argparse

from soko_engine.levels.resolve import load_level_by_id
from soko_engine.moves import apply_path
from soko_engine.render import describe


def main(argv=None):
    p = argparse.ArgumentParser(description="Replay a udlr path on a level and print each step")
    p.add_argument("level_id", help="Level id like 'path/to/pack.txt#idx'.")
    p.add_argument("path", help="Move string, e.g. 'uurdl' (LURD case is ignored)")
    args = p.parse_args(argv)

    s = load_level_by_id(args.level_id)
    states = apply_path(s, args.path)
    for st in states:
        print(describe(st))
        print()
    applied = len(states) - 1
    if applied < len(args.path):
        print(f"Stopped at move {applied}: '{args.path[applied]}' is illegal here")
        return 1
    print("solved" if states[-1].is_solved() else "not solved")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
