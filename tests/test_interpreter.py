import math

import pytest

from tinysc.interpreter import Environment, Interpreter, evaluate
from tinysc.values import ScError, Value, ValueType

DEFAULT_PROGRAM = "(begin (define pow (lambda (x) (* x x))) (pow 8))"


def test_default_program():
    assert evaluate(DEFAULT_PROGRAM) == Value(ValueType.NUM, 64)


def test_interpreter_evaluate_is_repeatable():
    interp = Interpreter()
    first = interp.evaluate(DEFAULT_PROGRAM)
    assert interp.evaluate(DEFAULT_PROGRAM) == first
    # definitions do not survive between runs
    assert interp.evaluate("(pow 8)") == Value.nothing()


def test_plus_is_commutative():
    assert evaluate("(+ 1 2)") == evaluate("(+ 2 1)")
    assert evaluate("(+ 1 2)") == evaluate("(+ 3)")


def test_single_argument_passes_through():
    assert evaluate("(- 7)") == Value(ValueType.NUM, 7)
    assert evaluate("(* 7)") == Value(ValueType.NUM, 7)


def test_empty_arithmetic_is_zero():
    assert evaluate("(+)") == Value(ValueType.NUM, 0)
    assert evaluate("(-)") == evaluate("(+)")


def test_real_contaminates():
    result = evaluate("(+ 1 2.5)")
    assert result.type is ValueType.REAL
    assert result == evaluate("(+ 2.5 1)")


def test_minus_inverts_plus():
    diff = evaluate("(- 10 3)")
    assert evaluate("(+ 3 7)").data - diff.data == 3


def test_integer_division_truncates_toward_zero():
    pos = evaluate("(/ 7 2)")
    neg = evaluate("(/ (- 0 7) 2)")
    assert neg.data == -pos.data
    assert pos.type is ValueType.NUM


def test_integer_division_by_zero():
    with pytest.raises(ScError):
        evaluate("(/ 1 0)")


def test_real_division_by_zero_is_infinite():
    result = evaluate("(/ 1.5 0)")
    assert math.isinf(result.data) and result.data > 0


def test_len():
    assert evaluate('(len "hello")') == Value(ValueType.NUM, len("hello"))
    assert evaluate("(len 5)") == Value.nothing()


def test_builtin_prefix_matching():
    assert evaluate('(l "abc")') == evaluate('(len "abc")')


def test_list_car_cdr():
    assert evaluate("(car (list 7 8))") == Value(ValueType.NUM, 7)
    assert evaluate("(cdr (list 7 8))") == Value(ValueType.LIST, (Value(ValueType.NUM, 8),))
    assert evaluate("(cdr (list 7))") == Value.nothing()
    assert evaluate("(list)") == Value.nothing()


def test_cons():
    assert evaluate("(cons 1 2)") == evaluate("(list 1 2)")
    assert evaluate("(cons 1 2 3)") == Value.nothing()


def test_car_of_non_list():
    assert evaluate("(car 1)") == Value.nothing()


def test_define_returns_true():
    assert evaluate("(define x 5)") == Value.of_bool(True)


def test_define_then_use():
    assert evaluate("(begin (define x 5) x)") == Value(ValueType.NUM, 5)


def test_first_definition_wins():
    assert evaluate("(begin (define x 1) (define x 2) x)") == Value(ValueType.NUM, 1)


def test_unknown_names_are_nothing():
    assert evaluate("(begin y)") == Value.nothing()
    assert evaluate("(foo 1 2)") == Value.nothing()


def test_multi_parameter_lambda():
    program = "(begin (define sub (lambda (a b) (- a b))) (sub 10 4))"
    assert evaluate(program) == evaluate("(- 10 4)")


def test_lambda_arity_mismatch():
    program = "(begin (define f (lambda (a b) a)) (f 1))"
    assert evaluate(program) == Value.nothing()


def test_dynamic_scope():
    program = "(begin (define f (lambda (y) x)) (define g (lambda (x) (f 0))) (g 9))"
    assert evaluate(program) == Value(ValueType.NUM, 9)


def test_calling_non_function_raises():
    with pytest.raises(ScError):
        evaluate("(begin (define x 5) (x 1))")


def test_bad_parameter_list_raises():
    with pytest.raises(ScError):
        evaluate("(lambda x x)")


def test_runaway_recursion_raises():
    with pytest.raises(ScError):
        evaluate("(begin (define f (lambda (x) (f x))) (f 1))")


def test_parse_errors_propagate():
    with pytest.raises(ScError):
        evaluate("1")
    with pytest.raises(ScError):
        evaluate("(+ 1 2")


def test_environment_global_frame_survives_pop():
    env = Environment()
    env.define_global("a", Value(ValueType.NUM, 1))
    env.pop_frame()
    assert env.depth == 1
    assert env.lookup("a") == Value(ValueType.NUM, 1)


def test_environment_innermost_shadows():
    env = Environment()
    env.define_global("a", Value(ValueType.NUM, 1))
    env.push_frame()
    env.bind("a", Value(ValueType.NUM, 2))
    assert env.lookup("a") == Value(ValueType.NUM, 2)
    env.pop_frame()
    assert env.lookup("a") == Value(ValueType.NUM, 1)
    assert env.lookup("missing") is None


def test_environment_bind_first_wins():
    env = Environment()
    env.push_frame()
    env.bind("a", Value(ValueType.NUM, 1))
    env.bind("a", Value(ValueType.NUM, 2))
    assert env.lookup("a") == Value(ValueType.NUM, 1)