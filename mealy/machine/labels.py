"""Labels on transition arrows, matched against input tokens."""

import re
import collections.abc
from typing import Any, Union, NamedTuple


class Wildcard(NamedTuple):
    """A label matching any input token."""

    def matches(self, token: Any) -> bool:
        """Ignores the token and matches."""
        return True

    def __str__(self) -> str:
        return '*'


class Exact(NamedTuple):
    """
    A label wrapping a value which must cover the input token.

    Coverage is equality first. Failing that, a compiled pattern must fully
    match a string token, a class must be a type of the token, any other
    callable is a predicate called with the token, and a non-string
    container must contain the token.
    """
    value: Any

    def matches(self, token: Any) -> bool:
        """Whether this label's value covers `token`. Never raises."""
        value = self.value
        try:
            if value == token:
                return True

            if isinstance(value, re.Pattern):
                return (
                    isinstance(token, str) and
                    value.fullmatch(token) is not None
                )

            if isinstance(value, type):
                return isinstance(token, value)

            if callable(value):
                return bool(value(token))

            if (
                isinstance(value, collections.abc.Container) and
                not isinstance(value, (str, bytes))
            ):
                return token in value
        except (TypeError, ValueError, AttributeError):
            return False

        return False

    def __str__(self) -> str:
        if isinstance(self.value, re.Pattern):
            return f'/{self.value.pattern}/'
        if isinstance(self.value, type):
            return self.value.__name__
        if callable(self.value):
            return getattr(self.value, '__qualname__', repr(self.value))
        return repr(self.value)


Label = Union[Exact, Wildcard]

ANY = Wildcard()


def as_label(value: Any) -> Label:
    """Convert a raw value to a `Label`, passing labels through."""
    if isinstance(value, (Exact, Wildcard)):
        return value
    return Exact(value)


def matches(label: Label, token: Any) -> bool:
    """Test `label` against `token`."""
    return label.matches(token)
