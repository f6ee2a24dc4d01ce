"""State machine exceptions."""
from typing import Any


class UnexpectedToken(ValueError):
    """Raised when no rule in the current state matches the input token."""

    def __init__(self, state: Any, token: Any) -> None:
        super().__init__(state, token)
        self.state = state
        self.token = token

    def __str__(self) -> str:
        return f"Unexpected token {self.token!r} in state {self.state!r}"

    def __eq__(self, other):
        return (
            isinstance(other, UnexpectedToken) and
            (self.state, self.token) == (other.state, other.token)
        )

    def __hash__(self):
        return hash((UnexpectedToken, self.state, self.token))


class DuplicateLabel(ValueError):
    """Thrown when a strict builder sees the same label twice in a state."""


class InvalidDefinition(ValueError):
    """Represents a machine definition that cannot be built."""
