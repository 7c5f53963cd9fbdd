"""Structural and game-rule checks for cards, actions and states.

Every check returns ``None`` when its input is well-formed and raises
``ValidationError`` naming the first offending field otherwise. Inputs are
never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Set, Tuple

from ddust.engine.card import BOARD_NUMBERS, DECK_NUMBERS, SUITS, Card, Color, Suit
from ddust.engine.errors import ValidationError
from ddust.engine.game_state import BOARD_SIZE, CARDS_IN_PLAY, GameState

if TYPE_CHECKING:
    from ddust.engine.rules import PlayCard

_COLORS = (Color.RED, Color.BLACK)


def is_int(value: object) -> bool:
    """Whether a value is a real integer; bools and floats do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_card(card: Card) -> bool:
    """Whether a card has a known suit and a number that exists in the game."""
    if card.suit not in SUITS:
        return False
    n = card.number
    if not is_int(n):
        return False
    return 1 <= n <= 13 and not 6 <= n <= 10


def validate_card(card: Card) -> None:
    """Check that a card could exist in a ddust game."""
    if card.suit not in SUITS:
        raise ValidationError(f"invalid suit: {card.suit!r}", field="suit")
    if not is_valid_card(card):
        raise ValidationError(f"invalid number: {card.number!r}", field="number")


def _check_zone_card(card: Card, where: str, numbers: Tuple[int, ...]) -> None:
    try:
        validate_card(card)
    except ValidationError as err:
        raise ValidationError(f"invalid {where}'s card: {err}", field=where) from err
    if card.number not in numbers:
        raise ValidationError(
            f"invalid {where}'s card: {card} does not belong here", field=where
        )


def validate_action(action: PlayCard) -> None:
    """Check that an action is well-formed, independent of any state."""
    if not is_int(action.player) or action.player not in (0, 1):
        raise ValidationError(f"invalid player: {action.player!r}", field="player")
    try:
        validate_card(action.card)
    except ValidationError as err:
        raise ValidationError(f"invalid card: {err}", field="card") from err
    if action.card.number not in DECK_NUMBERS:
        raise ValidationError(f"invalid card: {action.card} cannot be played", field="card")
    for v in (action.x, action.y):
        if not is_int(v) or not 0 <= v < BOARD_SIZE:
            raise ValidationError(
                f"invalid coordinate: ({action.x!r}, {action.y!r})", field="coordinate"
            )


class _SeenCards:
    """Tracks (suit, number) pairs to catch duplicates across zones."""

    def __init__(self) -> None:
        self._seen: Set[Tuple[Suit, int]] = set()

    def add(self, card: Card, where: str) -> None:
        key = (Suit(card.suit), card.number)
        if key in self._seen:
            raise ValidationError(f"duplicate card {card} at {where}", field=where)
        self._seen.add(key)


def _check_pile(cards: Iterable[Card], name: str, seen: _SeenCards) -> None:
    for i, card in enumerate(cards):
        where = f"{name}[{i}]"
        _check_zone_card(card, where, DECK_NUMBERS)
        seen.add(card, where)


def validate_state(state: GameState) -> None:
    """Check every invariant of a game state."""
    seen = _SeenCards()

    # Board
    if len(state.board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in state.board):
        raise ValidationError("board must be 4x4", field="board")
    for y, row in enumerate(state.board):
        for x, fc in enumerate(row):
            where = f"board[{x}, {y}]"
            _check_zone_card(fc.card, where, BOARD_NUMBERS)
            seen.add(fc.card, where)

    _check_pile(state.deck, "deck", seen)
    _check_pile(state.cemetery, "cemetery", seen)

    # Turn
    if not is_int(state.turn) or state.turn not in (0, 1):
        raise ValidationError(f"invalid turn: {state.turn!r}", field="turn")

    # Hands
    if len(state.hands) != 2:
        raise ValidationError("there must be exactly two hands", field="hands")
    for i, hand in enumerate(state.hands):
        expected = 2 if i == state.turn else 1
        if len(hand) != expected:
            raise ValidationError(
                f"invalid number of cards in hands[{i}]: {len(hand)}, expected {expected}",
                field=f"hands[{i}]",
            )
        _check_pile(hand, f"hands[{i}]", seen)

    total = len(state.deck) + len(state.cemetery) + len(state.hands[0]) + len(state.hands[1])
    if total != CARDS_IN_PLAY:
        raise ValidationError(
            f"invalid number of cards: {total}, expected {CARDS_IN_PLAY}", field="cards"
        )

    # Colors
    if len(state.colors) != 2:
        raise ValidationError("there must be exactly two colors", field="colors")
    for i, color in enumerate(state.colors):
        if color not in _COLORS:
            raise ValidationError(f"invalid colors[{i}]: {color!r}", field=f"colors[{i}]")
    if state.colors[0] == state.colors[1]:
        raise ValidationError("both players have the same color", field="colors")
