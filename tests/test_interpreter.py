"""Tests for the tree-walking interpreter."""

import io
import sys

import pytest

from ast_nodes import *
from interpreter import Interpreter, interpret_program
from errors import (
    EvaluationTooDeepError,
    InvalidNumericInputError,
    ScriptRuntimeError,
    UndefinedVariableError,
)
from tests.utils import parse_text, run_text


def test_simple_arithmetic():
    out, env = run_text("x = 1 + 2")
    assert out == ""
    assert env["x"] == 3.0


def test_counting_loop_prints_zero_to_nine():
    src = """
    x = 0
    while x < 10 do
        print x
        x = x + 1
    end
    """
    out, env = run_text(src)
    assert out.splitlines() == [str(i) for i in range(10)]
    assert env["x"] == 10.0


def test_if_else_selects_branch():
    assert run_text("if 5 > 3 then print 1 else print 2 end")[0] == "1\n"
    assert run_text("if 2 > 3 then print 1 else print 2 end")[0] == "2\n"


def test_if_without_else_and_false_condition_does_nothing():
    out, env = run_text("if 2 > 3 then print 1 x = 1 end")
    assert out == ""
    assert "x" not in env


def test_precedence_and_parentheses():
    assert run_text("print (2 + 3) * 4")[0] == "20\n"
    assert run_text("print 2 + 3 * 4")[0] == "14\n"
    assert run_text("print 10 - 4 - 3")[0] == "3\n"


def test_comparisons_yield_one_or_zero():
    assert run_text("print 3 == 3")[0] == "1\n"
    assert run_text("print 3 == 4")[0] == "0\n"
    _, env = run_text("a = 5 > 3 b = 5 < 3 c = 2 >= 2 d = 3 <= 2")
    assert env == {"a": 1.0, "b": 0.0, "c": 1.0, "d": 0.0}


def test_fractional_output():
    out, _ = run_text("print 1 / 2 print 10 / 4 print 1 / 3")
    assert out.splitlines() == ["0.5", "2.5", "0.3333333333333333"]


def test_division_by_zero_follows_ieee():
    out, env = run_text("a = 1 / 0 b = 0 - 1 / 0 c = 0 / 0 print a print b print c")
    assert out.splitlines() == ["inf", "-inf", "NaN"]
    assert env["a"] == float("inf")


def test_negative_values_are_truthy():
    assert run_text("if 0 - 1 then print 1 else print 0 end")[0] == "1\n"
    assert run_text("if 0.5 - 0.5 then print 1 else print 0 end")[0] == "0\n"


def test_statements_run_in_source_order():
    out, env = run_text("x = 1 print x x = 2 print x y = x * 10 print y")
    assert out.splitlines() == ["1", "2", "20"]
    assert env == {"x": 2.0, "y": 20.0}


def test_while_condition_sees_updates_from_the_body():
    src = "n = 5 steps = 0 while n > 1 do n = n / 2 steps = steps + 1 end"
    _, env = run_text(src)
    assert env["steps"] == 3.0
    assert env["n"] == 0.625


def test_while_with_false_condition_never_runs():
    out, _ = run_text("while 0 do print 1 end print 2")
    assert out == "2\n"


def test_undefined_variable_fails():
    with pytest.raises(UndefinedVariableError) as exc_info:
        run_text("print y")
    assert exc_info.value.name == "y"
    assert isinstance(exc_info.value, RuntimeError)


def test_undefined_variable_is_not_treated_as_zero():
    with pytest.raises(UndefinedVariableError):
        run_text("x = x + 1")


def test_error_aborts_remaining_statements():
    out = io.StringIO()
    interp = Interpreter(stdin=io.StringIO(), stdout=out)
    with pytest.raises(UndefinedVariableError):
        interp.interpret(parse_text("print 1 print missing print 2"))
    assert out.getvalue() == "1\n"


def test_input_reads_one_line_per_statement():
    out, env = run_text("input a input b print a + b", stdin="7\n  2.5  \n")
    assert env["a"] == 7.0
    assert env["b"] == 2.5
    assert out == "9.5\n"


def test_input_accepts_float_spellings():
    _, env = run_text("input a input b", stdin="-3\n1e3\n")
    assert env == {"a": -3.0, "b": 1000.0}


def test_invalid_numeric_input_fails():
    with pytest.raises(InvalidNumericInputError) as exc_info:
        run_text("input x", stdin="abc\n")
    assert exc_info.value.raw == "abc"


def test_input_rejects_digit_separators_and_end_of_input():
    with pytest.raises(InvalidNumericInputError):
        run_text("input x", stdin="1_000\n")
    with pytest.raises(InvalidNumericInputError):
        run_text("input x", stdin="")


def test_statement_nodes_are_not_expressions():
    interp = Interpreter()
    with pytest.raises(ScriptRuntimeError):
        interp.evaluate(PrintNode(value=NumberLiteralNode(value=1.0)))


def test_environment_persists_across_interpret_calls():
    out = io.StringIO()
    interp = Interpreter(stdout=out)
    interp.interpret(parse_text("x = 41"))
    interp.interpret(parse_text("print x + 1"))
    assert out.getvalue() == "42\n"


def test_interpret_accepts_a_statement_sequence():
    env = interpret_program(list(parse_text("a = 2 b = a * a").statements))
    assert env == {"a": 2.0, "b": 4.0}


def test_default_streams_are_the_console(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n"))
    env = interpret_program(parse_text("input n print n * 2"))
    assert env["n"] == 4.0
    assert capsys.readouterr().out == "8\n"


def test_large_literals_print_their_decimal_spelling():
    out, _ = run_text("print 100000000000000000000000 print 10000000000000000000000000")
    assert out.splitlines() == ["100000000000000000000000", "10000000000000000000000000"]


def test_deeply_nested_evaluation_is_a_runtime_error():
    # A long left-associative chain parses iteratively but evaluates recursively.
    src = "print " + "1 + " * 5000 + "1"
    with pytest.raises(EvaluationTooDeepError):
        run_text(src)
