from .coords import Coordinate
from .state import State


def render_ascii(state: State) -> str:
    """ASCII visualization of the state."""
    out_lines = []
    for y in range(state.height):
        row_chars = []
        for x in range(state.width):
            c = Coordinate(x, y)
            if state.grid.is_wall(c):
                row_chars.append('#')
                continue
            has_goal = state.is_goal_cell(c)
            if c == state.player:
                row_chars.append('+' if has_goal else '@')
            elif state.box_at(x, y) is not None:
                row_chars.append('*' if has_goal else '$')
            else:
                row_chars.append('.' if has_goal else ' ')
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def describe(state: State) -> str:
    """Debug dump: path, counters, positions, heuristic and the board."""
    goals = sorted(state.goals, key=lambda g: (g.y, g.x))
    header = [
        f"Current path: {state.path}",
        f"Player position: ({state.player.x}, {state.player.y})",
        f"Goal count: {state.goals_satisfied}",
        f"Box positions: {state.boxes}",
        f"Goal positions: {goals}",
        f"Heuristic value: {state.heuristic_value:.2f}",
    ]
    return "\n".join(header) + "\n" + render_ascii(state)
