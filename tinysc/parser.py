"""Building a syntax tree from tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from .lexer import Token, TokenKind, tokenize
from .values import ScError


class NodeKind(IntEnum):
    """Kinds of syntax tree node."""

    EXPR = 1
    IDENT = 2
    NUM = 3
    REAL = 4
    BOOL = 5
    STRING = 6


_ATOM_KINDS = {
    TokenKind.IDENT: NodeKind.IDENT,
    TokenKind.NUM: NodeKind.NUM,
    TokenKind.REAL: NodeKind.REAL,
    TokenKind.BOOL: NodeKind.BOOL,
    TokenKind.STRING: NodeKind.STRING,
}


@dataclass(frozen=True)
class Atom:
    """A literal or identifier with its source text."""

    kind: NodeKind
    text: str
    pos: int


@dataclass(frozen=True)
class Expr:
    """A call: a head identifier applied to argument nodes."""

    head: str
    args: tuple[Node, ...]
    pos: int
    kind: NodeKind = field(default=NodeKind.EXPR, init=False)


Node = Union[Atom, Expr]


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        tok = self._tokens[self._index]
        self._index += 1
        return tok

    def expr(self) -> Expr:
        self._advance()  # the opening paren
        head = self._peek()
        if head.kind is not TokenKind.IDENT:
            raise ScError("Expected identifier!")
        self._advance()
        args: list[Node] = []
        while self._peek().kind is not TokenKind.RPAREN:
            current = self._peek()
            if current.kind is TokenKind.END:
                raise ScError("Expected )")
            if current.kind is TokenKind.LPAREN:
                args.append(self.expr())
            else:
                self._advance()
                args.append(Atom(_ATOM_KINDS[current.kind], current.text, current.pos))
        self._advance()  # the closing paren
        return Expr(head.text, tuple(args), head.pos)


def parse(tokens: Iterable[Token]) -> Expr:
    """Parse the first expression in ``tokens``; anything after it is ignored."""
    toks = list(tokens)
    if not toks or toks[0].kind is not TokenKind.LPAREN:
        raise ScError("Expected '('!")
    if toks[-1].kind is not TokenKind.END:
        last = toks[-1]
        toks.append(Token(TokenKind.END, last.pos + len(last.text), ""))
    return _Parser(toks).expr()


def parse_source(source: str) -> Expr:
    """Tokenize and parse program text."""
    return parse(tokenize(source))