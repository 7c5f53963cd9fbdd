"""Card, Suit and Color types for ddust."""

from dataclasses import dataclass, replace
from enum import Enum


class Suit(str, Enum):
    """Card suits."""

    HEART = "heart"
    SPADE = "spade"
    DIAMOND = "diamond"
    CLOVER = "clover"


class Color(str, Enum):
    """Card and player colors."""

    RED = "red"
    BLACK = "black"


SUITS = (Suit.HEART, Suit.SPADE, Suit.DIAMOND, Suit.CLOVER)

# Rank pools: face cards live on the board, numerals circulate through
# deck, hands and cemetery.
BOARD_NUMBERS = (1, 11, 12, 13)
DECK_NUMBERS = (2, 3, 4, 5)

SUIT_COLORS = {
    Suit.HEART: Color.RED,
    Suit.DIAMOND: Color.RED,
    Suit.SPADE: Color.BLACK,
    Suit.CLOVER: Color.BLACK,
}

_SUIT_SYMBOLS = {Suit.HEART: "h", Suit.SPADE: "s", Suit.DIAMOND: "d", Suit.CLOVER: "c"}
_NUMBER_SYMBOLS = {1: "A", 10: "0", 11: "J", 12: "Q", 13: "K"}


@dataclass(frozen=True)
class Card:
    """A playing card.

    Construction does not validate; use ``validate_card`` for that, so that
    malformed cards coming from outside can still be represented and rejected.
    """

    suit: Suit
    number: int

    @property
    def color(self) -> Color:
        return SUIT_COLORS[Suit(self.suit)]

    def __str__(self) -> str:
        suit = _SUIT_SYMBOLS[Suit(self.suit)] if self.suit in SUITS else "?"
        if isinstance(self.number, int) and 2 <= self.number <= 9:
            return f"{suit}{self.number}"
        return f"{suit}{_NUMBER_SYMBOLS.get(self.number, '?')}"


@dataclass(frozen=True)
class FieldCard:
    """A board cell: a card and which way up it lies."""

    card: Card
    face_up: bool = False

    def flipped(self) -> "FieldCard":
        """Return this cell turned over."""
        return replace(self, face_up=not self.face_up)
