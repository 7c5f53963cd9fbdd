"""ddust rules: game setup and state transitions."""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ddust.engine.card import Card, Color
from ddust.engine.deck import create_board, create_deck
from ddust.engine.errors import IllegalActionError, SetupError, ValidationError
from ddust.engine.game_state import BOARD_SIZE, GameState
from ddust.engine.shape import get_shape
from ddust.engine.validation import is_int, validate_action, validate_state
from ddust.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlayCard:
    """Action: play a card from hand, centred on board cell (x, y)."""

    player: int
    card: Card
    x: int
    y: int


Action = PlayCard


def _draw(deck: List[Card]) -> Card:
    """Remove and return the top card of a deck."""
    if not deck:
        raise RuntimeError("draw from an empty deck")
    return deck.pop()


def init_game(
    first_player: int,
    colors: Sequence[Color],
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GameState:
    """Create initial game state: shuffled board and deck, 2 cards to the first player, 1 to the other."""
    if not is_int(first_player) or first_player not in (0, 1):
        raise SetupError(f"invalid first player: {first_player!r}")
    if len(colors) != 2:
        raise SetupError("exactly two colors are required")
    for color in colors:
        if color not in (Color.RED, Color.BLACK):
            raise SetupError(f"invalid color: {color!r}")
    if colors[0] == colors[1]:
        raise SetupError("players must have different colors")

    if rng is None:
        rng = random.Random(seed)
    board = create_board(rng=rng)
    deck = create_deck(rng=rng)

    second_player = (first_player + 1) % 2
    hands: List[List[Card]] = [[], []]
    hands[second_player].append(_draw(deck))
    hands[first_player].append(_draw(deck))
    hands[first_player].append(_draw(deck))

    state = GameState(
        board=board,
        deck=deck,
        cemetery=[],
        hands=(hands[0], hands[1]),
        turn=first_player,
        colors=(Color(colors[0]), Color(colors[1])),
    )
    logger.debug("new game: first player %d, colors %s", first_player, [c.value for c in state.colors])
    return state


def _find_in_hand(hand: Sequence[Card], card: Card) -> int:
    for i, c in enumerate(hand):
        if c == card:
            return i
    return -1


def transition(state: GameState, action: PlayCard) -> GameState:
    """Apply an action and return the new game state.

    Raises ``IllegalActionError`` if the state or the action is malformed,
    if it is not the acting player's turn, or if the player does not hold
    the card. ``state`` is left untouched in every case.
    """
    try:
        validate_state(state)
    except ValidationError as err:
        raise IllegalActionError(f"invalid state: {err}") from err
    try:
        validate_action(action)
    except ValidationError as err:
        raise IllegalActionError(f"invalid action: {err}") from err

    if action.player != state.turn:
        raise IllegalActionError(f"it's not player {action.player}'s turn")

    idx = _find_in_hand(state.hands[action.player], action.card)
    if idx < 0:
        raise IllegalActionError(f"player {action.player} does not have {action.card}")

    nxt = state.clone()

    # Turn over the card's footprint; cells off the board are skipped
    card = nxt.hands[action.player][idx]
    shape = get_shape(card)
    for dy in range(3):
        for dx in range(3):
            if not shape[dy][dx]:
                continue
            x, y = action.x + dx - 1, action.y + dy - 1
            if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
                continue
            nxt.board[y][x] = nxt.board[y][x].flipped()

    hand = nxt.hands[action.player]
    nxt.cemetery.append(card)
    del hand[idx]
    logger.debug("player %d played %s at (%d, %d)", action.player, card, action.x, action.y)

    turn = nxt.other_player()
    if nxt.deck:
        drawn = _draw(nxt.deck)
        nxt.hands[turn].append(drawn)
        logger.debug("player %d drew %s, %d left in deck", turn, drawn, len(nxt.deck))
    else:
        logger.warning("deck is empty: player %d starts the turn without drawing", turn)

    return GameState(
        board=nxt.board,
        deck=nxt.deck,
        cemetery=nxt.cemetery,
        hands=nxt.hands,
        turn=turn,
        colors=nxt.colors,
    )
