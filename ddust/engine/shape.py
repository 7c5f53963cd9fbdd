"""Board footprints of hand cards."""

from typing import Dict, Tuple

from ddust.engine.card import DECK_NUMBERS, Card, Suit
from ddust.engine.validation import is_valid_card

Shape = Tuple[Tuple[bool, bool, bool], Tuple[bool, bool, bool], Tuple[bool, bool, bool]]

# Per suit: (pattern for 2 and 4, pattern for 3 and 5). Row 0 is the row
# above the target cell, column 0 the column to its left.
_PATTERNS: Dict[Suit, Tuple[Tuple[str, str, str], Tuple[str, str, str]]] = {
    Suit.HEART: (
        ("x.x",
         "xxx",
         "..."),
        ("...",
         "xxx",
         "x.x"),
    ),
    Suit.SPADE: (
        (".x.",
         ".x.",
         ".x."),
        ("...",
         "xxx",
         "..."),
    ),
    Suit.DIAMOND: (
        (".x.",
         "xxx",
         ".x."),
        ("x.x",
         ".x.",
         "x.x"),
    ),
    Suit.CLOVER: (
        (".x.",
         "xxx",
         "..."),
        ("...",
         "xxx",
         ".x."),
    ),
}


def _to_grid(rows: Tuple[str, str, str]) -> Shape:
    return tuple(tuple(ch == "x" for ch in row) for row in rows)  # type: ignore[return-value]


SHAPES: Dict[Suit, Tuple[Shape, Shape]] = {
    suit: (_to_grid(even), _to_grid(odd)) for suit, (even, odd) in _PATTERNS.items()
}

EMPTY_SHAPE: Shape = ((False, False, False), (False, False, False), (False, False, False))


def get_shape(card: Card) -> Shape:
    """Return the 3x3 area a card turns over; ``[1][1]`` is the target cell.

    Cards that are not playable from hand give an all-false grid.
    """
    if not is_valid_card(card) or card.number not in DECK_NUMBERS:
        return EMPTY_SHAPE
    return SHAPES[Suit(card.suit)][card.number % 2]
