"""Command line entry point: evaluate a program and print its value."""

from __future__ import annotations

import argparse
import sys

from .interpreter import evaluate
from .values import ScError, Value, ValueType

DEFAULT_PROGRAM = "(begin (define pow (lambda (x) (* x x))) (pow 8))"


def format_value(value: Value | None) -> str:
    """Render a value the way the command prints it."""
    if value is None or value.type is ValueType.NOTHING:
        return "nil"
    if value.type is ValueType.NUM:
        return str(value.data)
    if value.type is ValueType.REAL:
        return "%f" % value.data
    if value.type is ValueType.BOOL:
        return "#t" if value.data else "#f"
    if value.type is ValueType.STRING:
        return f'"{value.data}"'
    if value.type is ValueType.LIST:
        items = "".join(f"{format_value(item)} " for item in value.data)
        return f"({items}nil)"
    return ""


def main(argv: list[str] | None = None) -> int:
    """Evaluate a program (a built-in example by default) and print the result."""
    parser = argparse.ArgumentParser(prog="tinysc", description="Evaluate a small Lisp program.")
    parser.add_argument("program", nargs="?", default=DEFAULT_PROGRAM, help="program text")
    args = parser.parse_args(argv)
    try:
        result = evaluate(args.program)
    except ScError as exc:
        print(f"sc error: {exc}", file=sys.stderr)
        return 1
    print(format_value(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())