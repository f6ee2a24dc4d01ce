"""Tokenization of text, as a Mealy machine over unicode categories."""

import enum
import unicodedata
from typing import Any, Tuple, Iterable, Iterator, NamedTuple

from mealy.machine import MachineBuilder, run


@enum.unique
class TokenKind(enum.Enum):
    """Types of text token."""
    WORD = 'word'
    NUMBER = 'number'
    BRACKET = 'bracket'
    PUNCTUATION = 'punctuation'
    WHITESPACE = 'whitespace'


class Token(NamedTuple):
    """A single token, located as a (start, end) slice of the source."""

    kind: TokenKind
    value: Any
    location: Tuple[int, int]


class Category:
    """
    Matches `(index, character)` input tokens by unicode category.

    A character is contained if its category starts with any of `prefixes`,
    or if it is one of `chars`.
    """

    def __init__(self, *prefixes: str, chars: str = '') -> None:
        self.prefixes = prefixes
        self.chars = chars

    def __contains__(self, token: Any) -> bool:
        try:
            _, character = token
        except (TypeError, ValueError):
            return False
        if character in self.chars:
            return True
        return unicodedata.category(character).startswith(self.prefixes)

    def __repr__(self) -> str:
        parts = list(self.prefixes)
        if self.chars:
            parts.append(repr(self.chars))
        return f"Category({', '.join(parts)})"


WORD_START = Category('L', 'Pc', 'Nl', 'No')
WORD_CONTINUE = Category('L', 'Pc', 'Nl', 'No', 'Nd', 'M')
DIGITS = Category('Nd')
BRACKETS = Category('Ps', 'Pe')
PUNCTUATION = Category('P', 'S')
WHITESPACE = Category('Z', chars='\t\n\r\x0b\x0c')

START = 'start'
ALL_STATES = [START] + list(TokenKind)


class _Scan:
    """Context for one tokenization: the source and the current token."""

    def __init__(self, src: str) -> None:
        self.src = src
        self.kind = None
        self.start = 0

    def close(self, end: int) -> Token:
        return Token(
            kind=self.kind,
            value=self.src[self.start:end],
            location=(self.start, end),
        )


def _begin_token(scan, emit, token, from_state, to_state):
    index, _ = token
    if scan.kind is not None:
        emit(scan.close(index))
    scan.kind = to_state
    scan.start = index


def _end_of_input(scan, emit):
    if scan.kind is not None:
        emit(scan.close(len(scan.src)))


def _build_tokenizer():
    builder = MachineBuilder('tokenizer')
    builder.initial_state(START)

    # Runs which carry on in their own state go first, so they win.
    builder.read(TokenKind.WORD, on=WORD_CONTINUE)
    builder.read(TokenKind.NUMBER, on=DIGITS)
    builder.read(TokenKind.WHITESPACE, on=WHITESPACE)

    # Each bracket is a token of its own, and brackets are also punctuation.
    builder.transition(
        ALL_STATES,
        TokenKind.BRACKET,
        on=BRACKETS,
        action=_begin_token,
    )
    builder.read(TokenKind.PUNCTUATION, on=PUNCTUATION)

    for kind, category in (
        (TokenKind.WORD, WORD_START),
        (TokenKind.NUMBER, DIGITS),
        (TokenKind.PUNCTUATION, PUNCTUATION),
        (TokenKind.WHITESPACE, WHITESPACE),
    ):
        builder.transition(
            [x for x in ALL_STATES if x != kind],
            kind,
            on=category,
            action=_begin_token,
        )

    builder.finish(_end_of_input)
    return builder.build()


TOKENIZER = _build_tokenizer()


def raw_tokenize(src: str) -> Iterator[Token]:
    """
    Split the string `src` into an iterable of undigested `Token`s.

    The raw tokens, whitespace included, completely reproduce the input.
    Raises `UnexpectedToken` carrying the `(index, character)` pair of any
    character no token may contain, such as control characters.
    """
    return run(TOKENIZER, enumerate(src), context=_Scan(src))


def tokenize(src: str) -> Iterable[Token]:
    """Split `src` into tokens, skipping whitespace and reading numbers."""
    for token in raw_tokenize(src):
        if token.kind == TokenKind.WHITESPACE:
            continue

        if token.kind == TokenKind.NUMBER:
            yield token._replace(value=int(token.value))
        else:
            yield token
