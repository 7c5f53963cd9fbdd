"""Exceptions raised by the ddust engine."""

from typing import Optional


class DdustError(ValueError):
    """Base class for rejected inputs."""


class ValidationError(DdustError):
    """A card, action or state is malformed.

    ``field`` names the offending part, e.g. ``"deck[3]"`` or ``"turn"``.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class IllegalActionError(DdustError):
    """An action cannot be applied to a state."""


class SetupError(DdustError):
    """A new game cannot be created with the given arguments."""
