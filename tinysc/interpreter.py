"""Evaluating parsed programs."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from .parser import Atom, Expr, Node, NodeKind, parse_source
from .values import Lambda, ScError, Value, ValueType


class Environment:
    """A stack of frames; the bottom frame holds the globals.

    Lookups search from the innermost frame outwards. Inside one frame the
    first binding of a name wins, so later bindings of the same name are
    shadowed by earlier ones.
    """

    def __init__(self) -> None:
        self._frames: list[dict[str, Value]] = [{}]

    @property
    def depth(self) -> int:
        """Number of frames, globals included."""
        return len(self._frames)

    def push_frame(self) -> None:
        """Open a new innermost frame."""
        self._frames.append({})

    def pop_frame(self) -> None:
        """Drop the innermost frame; the global frame is never dropped."""
        if len(self._frames) > 1:
            self._frames.pop()

    def lookup(self, name: str) -> Value | None:
        """Return the value bound to ``name``, or ``None`` if it is unbound."""
        for frame in reversed(self._frames):
            if name in frame:
                return frame[name]
        return None

    def define_global(self, name: str, value: Value) -> None:
        """Bind ``name`` in the global frame unless it is already bound there."""
        self._frames[0].setdefault(name, value)

    def bind(self, name: str, value: Value) -> None:
        """Bind ``name`` in the innermost frame unless it is already bound there."""
        self._frames[-1].setdefault(name, value)


_Routine = Callable[[Sequence[Any]], Value]


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise ScError("Division by zero!")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _real_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Interpreter:
    """Evaluates programs; each call to :meth:`evaluate` starts afresh."""

    def __init__(self) -> None:
        self._env = Environment()
        # Order matters: a call head selects the first builtin it is a prefix of.
        self._builtins: tuple[tuple[str, bool, _Routine], ...] = (
            ("+", False, self._plus),
            ("-", False, self._minus),
            ("*", False, self._mult),
            ("/", False, self._divide),
            ("len", False, self._len),
            ("list", False, self._list),
            ("cons", False, self._cons),
            ("car", False, self._car),
            ("cdr", False, self._cdr),
            ("begin", False, self._begin),
            ("define", True, self._define),
            ("lambda", True, self._lambda),
        )

    def evaluate(self, source: str) -> Value:
        """Parse and evaluate ``source``, returning the value of its first expression."""
        tree = parse_source(source)
        self._env = Environment()
        try:
            return self._eval(tree)
        except RecursionError:
            raise ScError("Recursion too deep!") from None

    def _find_builtin(self, head: str) -> tuple[str, bool, _Routine] | None:
        return next((b for b in self._builtins if b[0].startswith(head)), None)

    def _eval(self, node: Node) -> Value:
        if isinstance(node, Expr):
            return self._eval_expr(node)
        return self._atom_value(node)

    def _eval_expr(self, expr: Expr) -> Value:
        builtin = self._find_builtin(expr.head)
        if builtin is None:
            target = self._env.lookup(expr.head)
            if target is None:
                return Value.nothing()
            args = [self._eval(arg) for arg in expr.args]
            return self._apply(expr.head, target, args)
        _, lazy, run = builtin
        if lazy:
            return run(list(expr.args))
        return run([self._eval(arg) for arg in expr.args])

    def _apply(self, name: str, target: Value, args: list[Value]) -> Value:
        if target.type is not ValueType.LAMBDA:
            raise ScError(f"'{name}' is not a function!")
        func: Lambda = target.data
        if len(func.params) != len(args):
            return Value.nothing()
        self._env.push_frame()
        try:
            for param, arg in zip(func.params, args):
                self._env.bind(param, arg)
            return self._eval(func.body)
        finally:
            self._env.pop_frame()

    def _atom_value(self, atom: Atom) -> Value:
        if atom.kind is NodeKind.NUM:
            return Value(ValueType.NUM, int(atom.text))
        if atom.kind is NodeKind.REAL:
            return Value(ValueType.REAL, float(atom.text))
        if atom.kind is NodeKind.BOOL:
            return Value.of_bool(atom.text == "t")
        if atom.kind is NodeKind.STRING:
            return Value(ValueType.STRING, atom.text)
        found = self._env.lookup(atom.text)
        return found if found is not None else Value.nothing()

    # arithmetic

    @staticmethod
    def _numbers(args: Sequence[Value]) -> tuple[bool, list[int | float]]:
        real = any(arg.type is ValueType.REAL for arg in args)
        nums = [arg.as_number() for arg in args]
        if real:
            nums = [float(n) for n in nums]
        return real, nums

    @staticmethod
    def _number(real: bool, n: int | float) -> Value:
        return Value(ValueType.REAL, float(n)) if real else Value(ValueType.NUM, int(n))

    def _plus(self, args: Sequence[Value]) -> Value:
        real, nums = self._numbers(args)
        return self._number(real, sum(nums, 0.0 if real else 0))

    def _fold(self, args: Sequence[Value], op: Callable[[Any, Any], Any]) -> Value:
        real, nums = self._numbers(args)
        if not nums:
            return self._number(real, 0)
        result = nums[0]
        for n in nums[1:]:
            result = op(result, n)
        return self._number(real, result)

    def _minus(self, args: Sequence[Value]) -> Value:
        return self._fold(args, lambda a, b: a - b)

    def _mult(self, args: Sequence[Value]) -> Value:
        return self._fold(args, lambda a, b: a * b)

    def _divide(self, args: Sequence[Value]) -> Value:
        real = any(arg.type is ValueType.REAL for arg in args)
        return self._fold(args, _real_div if real else _int_div)

    # strings and lists

    @staticmethod
    def _len(args: Sequence[Value]) -> Value:
        if len(args) != 1 or args[0].type is not ValueType.STRING:
            return Value.nothing()
        return Value(ValueType.NUM, len(args[0].data))

    @staticmethod
    def _list(args: Sequence[Value]) -> Value:
        if not args:
            return Value.nothing()
        return Value(ValueType.LIST, tuple(args))

    def _cons(self, args: Sequence[Value]) -> Value:
        if len(args) != 2:
            return Value.nothing()
        return self._list(args)

    @staticmethod
    def _car(args: Sequence[Value]) -> Value:
        if len(args) != 1 or args[0].type is not ValueType.LIST:
            return Value.nothing()
        return args[0].data[0]

    @staticmethod
    def _cdr(args: Sequence[Value]) -> Value:
        if len(args) != 1 or args[0].type is not ValueType.LIST:
            return Value.nothing()
        rest = args[0].data[1:]
        return Value(ValueType.LIST, rest) if rest else Value.nothing()

    @staticmethod
    def _begin(args: Sequence[Value]) -> Value:
        return args[-1] if args else Value.nothing()

    # special forms

    def _define(self, nodes: Sequence[Node]) -> Value:
        if len(nodes) != 2:
            return Value.nothing()
        target, expr = nodes
        if not isinstance(target, Atom):
            raise ScError("Expected a name to define!")
        self._env.define_global(target.text, self._eval(expr))
        return Value.of_bool(True)

    @staticmethod
    def _lambda(nodes: Sequence[Node]) -> Value:
        if len(nodes) != 2:
            return Value.nothing()
        params, body = nodes
        if not isinstance(params, Expr) or not all(isinstance(p, Atom) for p in params.args):
            raise ScError("Expected a parameter list!")
        names = (params.head, *(p.text for p in params.args))
        return Value(ValueType.LAMBDA, Lambda(names, body))


def evaluate(source: str) -> Value:
    """Evaluate ``source`` with a fresh interpreter."""
    return Interpreter().evaluate(source)