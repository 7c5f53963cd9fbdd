"""Board and deck creation and shuffling."""

import random
from typing import List, Optional

from ddust.engine.card import BOARD_NUMBERS, DECK_NUMBERS, SUITS, Card, FieldCard
from ddust.engine.game_state import BOARD_SIZE


def _rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def create_board(
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[List[FieldCard]]:
    """Create the shuffled 4x4 board of face cards, all face down.

    Before shuffling row y holds suit y and column x holds the x-th board
    rank; the 16 cells are then permuted as one flat sequence.
    """
    r = _rng(rng, seed)
    cells = [
        FieldCard(card=Card(suit=suit, number=number), face_up=False)
        for suit in SUITS
        for number in BOARD_NUMBERS
    ]
    r.shuffle(cells)
    return [cells[y * BOARD_SIZE:(y + 1) * BOARD_SIZE] for y in range(BOARD_SIZE)]


def create_deck(
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[Card]:
    """Create the shuffled 16-card deck of numerals 2-5; the last card is on top."""
    r = _rng(rng, seed)
    cards: List[Card] = [
        Card(suit=suit, number=number)
        for suit in SUITS
        for number in DECK_NUMBERS
    ]
    r.shuffle(cards)
    return cards
