"""Game engine for ddust."""

from ddust.engine.card import Card, Color, FieldCard, Suit
from ddust.engine.deck import create_board, create_deck
from ddust.engine.errors import DdustError, IllegalActionError, SetupError, ValidationError
from ddust.engine.game_state import GameState, PlayerView
from ddust.engine.rules import (
    Action,
    PlayCard,
    init_game,
    transition,
)
from ddust.engine.shape import get_shape
from ddust.engine.validation import validate_action, validate_card, validate_state

__all__ = [
    "Card",
    "Color",
    "FieldCard",
    "Suit",
    "create_board",
    "create_deck",
    "DdustError",
    "IllegalActionError",
    "SetupError",
    "ValidationError",
    "GameState",
    "PlayerView",
    "Action",
    "PlayCard",
    "init_game",
    "transition",
    "get_shape",
    "validate_action",
    "validate_card",
    "validate_state",
]
