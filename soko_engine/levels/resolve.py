from __future__ import annotations
from typing import List, Optional, Tuple

from ..parser import parse_level_str
from ..state import Heuristic, State


def parse_level_id(level_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in level_id:
        return level_id, 0
    path, idx = level_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        raise ValueError(f"Bad level index in {level_id!r}") from None
    return path, k


def split_levels(text: str) -> List[str]:
    """Split a pack into levels separated by blank lines.

    Lines starting with ';' are comments (common in .sok/.txt packs).
    """
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith(";"):
            continue
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line.rstrip("\n"))
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def load_level_by_id(level_id: str, heuristic: Optional[Heuristic] = None) -> State:
    """Loads a SPECIFIC level file#idx even if the file contains dozens of levels."""
    path, wanted = parse_level_id(level_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_levels(content)
    if not blocks:
        raise ValueError(f"No levels found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_level_str(blocks[wanted], heuristic)
