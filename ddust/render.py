"""Debug text rendering of a full game state."""

from typing import List

from ddust.engine import Color, GameState


def render_debug(state: GameState) -> str:
    """Render every card regardless of orientation or owner.

    Face-down board cells are bracketed, face-up ones padded with spaces.
    The deck is listed top first.
    """
    lines: List[str] = []
    for y, row in enumerate(state.board):
        cells = [f" {fc.card} " if fc.face_up else f"[{fc.card}]" for fc in row]
        prefix = "Board: " if y == 0 else "       "
        lines.append(prefix + " ".join(cells))
    lines.append("Deck (top first): " + " ".join(f"[{c}]" for c in reversed(state.deck)))
    lines.append("Cemetery (latest last): " + " ".join(f"[{c}]" for c in state.cemetery))
    for i, hand in enumerate(state.hands):
        color = "red" if state.colors[i] == Color.RED else "black"
        turn = " (to play)" if state.turn == i else ""
        cards = " ".join(f"[{c}]" for c in hand)
        lines.append(f"Player {i + 1} ({color}){turn}: {cards}")
    return "\n".join(lines)
