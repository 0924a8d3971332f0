from typing import List, Optional

from .coords import Coordinate
from .grid import Grid, TOK_FLOOR
from .state import Heuristic, State

TOK_GOAL = "."
TOK_BOX = "$"
TOK_BOX_ON_GOAL = "*"
TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "+"


def parse_level_str(level_str: str, heuristic: Optional[Heuristic] = None) -> State:
    """Parses ASCII level into the root State.

    Supported characters:
      '#': wall
      '.': goal
      '$': box
      '*': box on goal
      '@': player
      '+': player on goal
    Anything else (including space) is floor.

    heuristic defaults to h_manhattan and is carried to every child.
    """
    lines = [line.rstrip("\n") for line in level_str.splitlines() if line.strip() != ""]
    if not lines:
        raise ValueError("Empty level")
    width = max(len(line) for line in lines)
    # align lines with floor on the right
    lines = [line.ljust(width, TOK_FLOOR) for line in lines]

    goals: List[Coordinate] = []
    boxes: List[Coordinate] = []
    player: Optional[Coordinate] = None

    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            c = Coordinate(x, y)
            if ch in (TOK_GOAL, TOK_BOX_ON_GOAL, TOK_PLAYER_ON_GOAL):
                goals.append(c)
            if ch in (TOK_BOX, TOK_BOX_ON_GOAL):
                boxes.append(c)
            if ch in (TOK_PLAYER, TOK_PLAYER_ON_GOAL):
                if player is not None:
                    raise ValueError(f"More than one player in level: {player} and {c}")
                player = c

    if player is None:
        raise ValueError("No player '@' or '+' found in level")
    if len(boxes) > len(goals):
        raise ValueError(f"Level has {len(boxes)} boxes but only {len(goals)} goals")

    grid = Grid.from_rows(lines)
    if heuristic is None:
        from heuristics.classic import h_manhattan
        heuristic = h_manhattan
    return build_root(grid, player, boxes, goals, heuristic)


def build_root(
    grid: Grid,
    player: Coordinate,
    boxes: List[Coordinate],
    goals: List[Coordinate],
    heuristic: Optional[Heuristic] = None,
) -> State:
    """Validates raw puzzle data and builds the root configuration."""
    if not grid.is_floor(player):
        raise ValueError(f"Player {player} is not on a floor cell")
    if len(set(boxes)) != len(boxes):
        raise ValueError("Duplicate box coordinates")
    for b in boxes:
        if not grid.is_floor(b):
            raise ValueError(f"Box {b} is not on a floor cell")
    for g in goals:
        if not grid.is_floor(g):
            raise ValueError(f"Goal {g} is not on a floor cell")
    if player in boxes:
        raise ValueError(f"Player {player} stands on a box")
    return State.root(grid, player, boxes, goals, heuristic)


def parse_level_file(path: str, heuristic: Optional[Heuristic] = None) -> State:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read(), heuristic)
