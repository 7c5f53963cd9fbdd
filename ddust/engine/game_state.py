"""Game state for ddust."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ddust.engine.card import Card, Color, FieldCard

BOARD_SIZE = 4
CARDS_IN_PLAY = 16  # numeral cards shared between deck, cemetery and hands


@dataclass(frozen=True)
class GameState:
    """Immutable ddust game state.

    Lists are never modified after the state is built; ``transition`` works
    on a ``clone()``.
    """

    board: List[List[FieldCard]]  # board[y][x]
    deck: List[Card]  # top is last
    cemetery: List[Card]  # most recent is last
    hands: Tuple[List[Card], List[Card]]
    turn: int
    colors: Tuple[Color, Color]

    def clone(self) -> "GameState":
        """Return a copy sharing no lists with this state."""
        return GameState(
            board=[list(row) for row in self.board],
            deck=list(self.deck),
            cemetery=list(self.cemetery),
            hands=(list(self.hands[0]), list(self.hands[1])),
            turn=self.turn,
            colors=(self.colors[0], self.colors[1]),
        )

    def other_player(self) -> int:
        return (self.turn + 1) % 2


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Face-down board cells are ``None``; the opponent's hand and the deck
    order are reduced to counts.
    """

    player: int
    my_color: Color
    my_hand: List[Card]
    board: List[List[Optional[Card]]]
    cemetery: List[Card]
    deck_size: int
    opponent_hand_size: int
    turn: int

    @classmethod
    def from_state(cls, state: GameState, player: int) -> "PlayerView":
        """Create a player view from full game state, hiding what the player cannot see."""
        board = [
            [fc.card if fc.face_up else None for fc in row]
            for row in state.board
        ]
        return cls(
            player=player,
            my_color=state.colors[player],
            my_hand=list(state.hands[player]),
            board=board,
            cemetery=list(state.cemetery),
            deck_size=len(state.deck),
            opponent_hand_size=len(state.hands[(player + 1) % 2]),
            turn=state.turn,
        )

    @property
    def is_my_turn(self) -> bool:
        return self.turn == self.player
