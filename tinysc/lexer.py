"""Splitting program text into tokens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .values import ScError

MAX_SOURCE_LENGTH = 0xFFFF

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_SPECIAL = frozenset("()")


class TokenKind(Enum):
    """Kinds of token the lexer emits."""

    END = "\x01"
    LPAREN = "("
    RPAREN = ")"
    IDENT = "I"
    NUM = "N"
    REAL = "R"
    BOOL = "B"
    STRING = "S"


@dataclass(frozen=True)
class Token:
    """A token with its kind, its offset in the source and its text."""

    kind: TokenKind
    pos: int
    text: str = ""


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens, always ending with an END token."""
    if len(source) > MAX_SOURCE_LENGTH:
        raise ScError(f"Program longer than {MAX_SOURCE_LENGTH} characters!")
    return list(_scan(source))


def _skip_digits(source: str, i: int) -> int:
    while i < len(source) and source[i] in _DIGITS:
        i += 1
    return i


def _scan(source: str) -> Iterator[Token]:
    n = len(source)
    i = 0
    while i < n:
        c = source[i]
        if c in _SPACE:
            i += 1
        elif c in _SPECIAL:
            kind = TokenKind.LPAREN if c == "(" else TokenKind.RPAREN
            yield Token(kind, i, c)
            i += 1
        elif c in _DIGITS:
            start = i
            kind = TokenKind.NUM
            i = _skip_digits(source, i)
            if i + 1 < n and source[i] == "." and source[i + 1] in _DIGITS:
                kind = TokenKind.REAL
                i = _skip_digits(source, i + 1)
            yield Token(kind, start, source[start:i])
            # The character that ends a number is consumed unless it is a paren.
            if i < n and source[i] not in _SPECIAL:
                i += 1
        elif c == "#":
            if i + 1 < n and source[i + 1] in "tf":
                yield Token(TokenKind.BOOL, i + 1, source[i + 1])
                i += 2
            else:
                raise ScError("Expected #t or #f!")
        elif c == '"':
            start = i + 1
            end = source.find('"', start)
            if end < 0:
                raise ScError("Unterminated string!")
            yield Token(TokenKind.STRING, start, source[start:end])
            i = end + 1
        else:
            start = i
            while i < n and source[i] not in _SPACE and source[i] not in _SPECIAL:
                i += 1
            yield Token(TokenKind.IDENT, start, source[start:i])
    yield Token(TokenKind.END, n, "")