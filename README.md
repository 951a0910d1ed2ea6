# tinysc

A tiny interpreter for a small Scheme-like language. A program is one
parenthesised expression, and evaluating it produces one value. Anything after
the first expression is ignored, and a program may be at most 65535
characters long.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Language

Literals:

- integers: `42`
- reals: `3.5`
- booleans: `#t`, `#f`
- strings: `"hello"` (no escapes; the string ends at the next `"`)

Every expression is a call `(head arg ...)` whose head is an identifier. The
head picks the first built-in whose name starts with it, in the order of the
table below, so `(l "abc")` calls `len`. Otherwise the head is looked up as a
name bound with `define` or as a lambda parameter; an unknown name evaluates
to nil, and so does an identifier argument that is not bound.

| Name      | Meaning                                                               |
|-----------|-----------------------------------------------------------------------|
| `+ - * /` | arithmetic; any real argument makes the result real                   |
| `len`     | length of a string; nil for anything else                             |
| `list`    | list of its arguments; nil when there are none                        |
| `cons`    | two-element list; nil unless given exactly two arguments              |
| `car`     | first element of a list                                               |
| `cdr`     | rest of a list; nil when nothing is left                              |
| `begin`   | evaluate arguments in order, return the last                          |
| `define`  | bind a global name: `(define name expr)`, returns `#t`                |
| `lambda`  | make a function: `(lambda (x y) body)`                                |

Notes:

- Integer division truncates toward zero; dividing an integer by zero raises
  `ScError`. Real division by zero gives an infinity or NaN.
- `define` keeps the first binding of a name; later definitions of the same
  name have no effect.
- Calling a lambda with the wrong number of arguments gives nil. Calling a
  bound value that is not a lambda raises `ScError`.
- There are no conditionals or comparisons.

## Command line

```
tinysc
```

With no argument this evaluates the sample program
`(begin (define pow (lambda (x) (* x x))) (pow 8))` and prints `64`. Pass a
program as the single argument to evaluate that instead:

```
tinysc "(+ 1 2.5)"
```

prints `3.500000`. Lists print as `(1 2 nil)`, nil as `nil`, booleans as `#t`
and `#f`, strings in double quotes. On error the command writes
`sc error: <message>` to standard error and exits with status 1.

## Library use

```python
from tinysc.interpreter import Interpreter, evaluate
from tinysc.cli import format_value

value = evaluate("(+ 1 2 3)")
print(format_value(value))   # 6

interp = Interpreter()
print(format_value(interp.evaluate('(len "hello")')))   # 5
```

Each call to `Interpreter.evaluate` starts with fresh bindings. Results are
`tinysc.values.Value` objects carrying a `ValueType` and their data. Malformed
programs raise `tinysc.values.ScError`.

Lower-level pieces are available too: `tinysc.lexer.tokenize` turns source text
into tokens, `tinysc.parser.parse` and `tinysc.parser.parse_source` build the
expression tree, and `tinysc.interpreter.Environment` is the stack of binding
frames used during evaluation.

## What it does not do

There is no interactive prompt and no reading of programs from files: the
command takes the program text as an argument. Only the first expression of a
program is evaluated.