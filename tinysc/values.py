"""Runtime values produced by the interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ScError(Exception):
    """Raised when a program cannot be tokenized, parsed or evaluated."""


class ValueType(IntEnum):
    """The kinds of value a program can produce."""

    NOTHING = 0
    NUM = 1
    REAL = 2
    BOOL = 3
    STRING = 4
    LIST = 5
    LAMBDA = 6


@dataclass(frozen=True)
class Lambda:
    """A user-defined function: parameter names and an unevaluated body node."""

    params: tuple[str, ...]
    body: Any


@dataclass(frozen=True)
class Value:
    """A tagged runtime value.

    ``data`` holds an ``int`` for NUM, a ``float`` for REAL, a ``bool`` for
    BOOL, a ``str`` for STRING, a non-empty tuple of values for LIST, a
    :class:`Lambda` for LAMBDA and ``None`` for NOTHING.
    """

    type: ValueType = ValueType.NOTHING
    data: Any = None

    def as_number(self) -> int | float:
        """Return the numeric content; NOTHING counts as zero."""
        if self.type is ValueType.NUM:
            return int(self.data)
        if self.type is ValueType.REAL:
            return float(self.data)
        if self.type is ValueType.NOTHING:
            return 0
        raise ScError(f"Expected a number, got {self.type.name.lower()}!")

    @staticmethod
    def nothing() -> Value:
        """The empty value."""
        return Value(ValueType.NOTHING, None)

    @staticmethod
    def of_bool(flag: bool) -> Value:
        """A boolean value."""
        return Value(ValueType.BOOL, bool(flag))