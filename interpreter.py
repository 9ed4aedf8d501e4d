"""Tree-walking interpreter for tinyscript programs.

The interpreter executes a parsed `ProgramNode` (or any sequence of statement
nodes) directly, statement by statement, against a single flat environment
mapping variable names to floats. It supports `AssignNode`, `PrintNode`,
`InputNode`, `IfNode` and `WhileNode` statements and the expressions
`NumberLiteralNode`, `VariableRefNode` and `BinaryOpNode`.

All values are floats. Comparisons yield `1.0` or `0.0`, and any value other
than `0.0` counts as true in `if`/`while` conditions. Division follows IEEE
semantics, so dividing by zero yields `inf`, `-inf` or `nan` instead of
raising.

`print` writes to, and `input` reads from, the streams given to the
constructor; they default to `sys.stdout`/`sys.stdin` at call time so tests
can swap them with `io.StringIO` or pytest's `capsys`.
"""

import math
import sys
from typing import Dict, Iterable, Optional, TextIO, Union
from ast_nodes import *
from errors import (
    EvaluationTooDeepError,
    InvalidNumericInputError,
    ScriptRuntimeError,
    UndefinedVariableError,
)
from number_format import format_number


def _truthy(value: float) -> bool:
    return value != 0.0


def _flag(condition: bool) -> float:
    return 1.0 if condition else 0.0


def _parse_number(line: str) -> float:
    text = line.strip()
    # float() also accepts digit-group underscores, which are not numbers here.
    if "_" in text:
        raise InvalidNumericInputError(text)
    try:
        return float(text)
    except ValueError:
        raise InvalidNumericInputError(text) from None


class Interpreter:
    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ):
        self.env: Dict[str, float] = {}
        self.stdin = stdin
        self.stdout = stdout

    def _read_line(self) -> str:
        stream = self.stdin if self.stdin is not None else sys.stdin
        return stream.readline()

    def _write_line(self, text: str) -> None:
        stream = self.stdout if self.stdout is not None else sys.stdout
        stream.write(text + "\n")

    def evaluate(self, node: ASTNode) -> float:
        """Evaluate an expression node to a number."""
        match node:
            case NumberLiteralNode(value=v):
                return float(v)
            case VariableRefNode(name=n):
                if n not in self.env:
                    raise UndefinedVariableError(n)
                return self.env[n]
            case BinaryOpNode(left=l, operator=op, right=r):
                lv = self.evaluate(l)
                rv = self.evaluate(r)
                match op:
                    case "+":
                        return lv + rv
                    case "-":
                        return lv - rv
                    case "*":
                        return lv * rv
                    case "/":
                        return _divide(lv, rv)
                    case ">":
                        return _flag(lv > rv)
                    case "<":
                        return _flag(lv < rv)
                    case ">=":
                        return _flag(lv >= rv)
                    case "<=":
                        return _flag(lv <= rv)
                    case "==":
                        return _flag(lv == rv)
                    case _:
                        raise ScriptRuntimeError(f"Unsupported binary operator: {op}")
            case _:
                raise ScriptRuntimeError(f"Not an expression: {node}")

    def execute(self, stmt: ASTNode) -> None:
        """Execute one statement node."""
        match stmt:
            case AssignNode(name=n, value=value):
                self.env[n] = self.evaluate(value)
            case PrintNode(value=value):
                self._write_line(format_number(self.evaluate(value)))
            case InputNode(name=n):
                self.env[n] = _parse_number(self._read_line())
            case IfNode(condition=cond, then_body=then_body, else_body=else_body):
                if _truthy(self.evaluate(cond)):
                    self.execute_body(then_body)
                else:
                    self.execute_body(else_body)
            case WhileNode(condition=cond, body=body):
                # The condition is re-evaluated against the current
                # environment before every pass.
                while _truthy(self.evaluate(cond)):
                    self.execute_body(body)
            case ProgramNode(statements=stmts):
                self.execute_body(stmts)
            case _:
                raise ScriptRuntimeError(f"Unhandled statement node: {stmt}")

    def execute_body(self, statements: Iterable[ASTNode]) -> None:
        for s in statements:
            self.execute(s)

    def interpret(self, program: Union[ProgramNode, Iterable[ASTNode]]) -> None:
        """Run a whole program, or a sequence of statements, in order."""
        if isinstance(program, ProgramNode):
            program = program.statements
        try:
            self.execute_body(program)
        except RecursionError:
            raise EvaluationTooDeepError() from None


def _divide(lv: float, rv: float) -> float:
    # Python raises on float division by zero; follow IEEE instead.
    if rv == 0.0:
        if lv == 0.0 or math.isnan(lv):
            return math.nan
        return math.copysign(math.inf, lv) * math.copysign(1.0, rv)
    return lv / rv


def interpret_program(
    program: Union[ProgramNode, Iterable[ASTNode]],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Dict[str, float]:
    """Interpret a program with a fresh interpreter and return its environment."""
    interpreter = Interpreter(stdin=stdin, stdout=stdout)
    interpreter.interpret(program)
    return interpreter.env
