"""Unit tests for card shapes."""

import pytest
from ddust.engine import Card, Suit, get_shape


def _rows(card: Card) -> list[str]:
    return ["".join("x" if cell else "." for cell in row) for row in get_shape(card)]


@pytest.mark.parametrize("number", [2, 3, 4, 5])
@pytest.mark.parametrize("suit", list(Suit))
def test_playable_cards_have_a_shape(suit: Suit, number: int) -> None:
    shape = get_shape(Card(suit, number))
    assert len(shape) == 3
    assert all(len(row) == 3 for row in shape)
    assert any(cell for row in shape for cell in row)


@pytest.mark.parametrize(
    "card",
    [
        Card(Suit.HEART, 1),
        Card(Suit.SPADE, 11),
        Card(Suit.DIAMOND, 12),
        Card(Suit.CLOVER, 13),
        Card(Suit.HEART, 6),
        Card(Suit.HEART, 0),
        Card("joker", 2),  # type: ignore[arg-type]
    ],
)
def test_other_cards_have_no_shape(card: Card) -> None:
    assert not any(cell for row in get_shape(card) for cell in row)


def test_same_parity_same_shape() -> None:
    for suit in Suit:
        assert get_shape(Card(suit, 2)) == get_shape(Card(suit, 4))
        assert get_shape(Card(suit, 3)) == get_shape(Card(suit, 5))
        assert get_shape(Card(suit, 2)) != get_shape(Card(suit, 3))


@pytest.mark.parametrize(
    "card, rows",
    [
        (Card(Suit.HEART, 2), ["x.x", "xxx", "..."]),
        (Card(Suit.HEART, 3), ["...", "xxx", "x.x"]),
        (Card(Suit.SPADE, 4), [".x.", ".x.", ".x."]),
        (Card(Suit.SPADE, 5), ["...", "xxx", "..."]),
        (Card(Suit.DIAMOND, 2), [".x.", "xxx", ".x."]),
        (Card(Suit.DIAMOND, 3), ["x.x", ".x.", "x.x"]),
        (Card(Suit.CLOVER, 4), [".x.", "xxx", "..."]),
        (Card(Suit.CLOVER, 5), ["...", "xxx", ".x."]),
    ],
)
def test_shape_table(card: Card, rows: list[str]) -> None:
    assert _rows(card) == rows
