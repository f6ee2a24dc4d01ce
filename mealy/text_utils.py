"""Shared text utilities."""
from typing import Sequence


def join_comma_or(items: Sequence[str]) -> str:
    """Join strings with commas and 'or'."""
    if not items:
        raise ValueError("No items to join")

    *rest, last = items

    if not rest:
        return last

    return f"{', '.join(rest)} or {last}"
