"""Error types raised by the lexer, parser and interpreter.

Every failure in the pipeline is raised as a subclass of `ScriptError` so a
caller can report it and carry on (or exit) instead of crashing. Lexical and
syntactic errors are also `SyntaxError` subclasses, runtime errors are also
`RuntimeError` subclasses.

Hierarchy:
    ScriptError
        LexError: UnexpectedCharacterError, MalformedNumberError
        ParseError: ExpectedTokenError, ExpectedAssignmentError,
                    ExpectedVariableAfterInputError, UnexpectedTokenError,
                    NestingTooDeepError
        ScriptRuntimeError: UndefinedVariableError, InvalidNumericInputError,
                            EvaluationTooDeepError
"""

from __future__ import annotations
from tokens import Token


class ScriptError(Exception):
    """Base class for all errors raised while lexing, parsing or running."""


# Lexical errors


class LexError(ScriptError, SyntaxError):
    def __init__(self, message: str, position: int, line: int, column: int):
        super().__init__(
            f"Lexical error at line {line}, column {column}: {message}"
        )
        self.position = position
        self.line = line
        self.column = column


class UnexpectedCharacterError(LexError):
    def __init__(self, char: str, position: int, line: int = 1, column: int = 1):
        super().__init__(f"Unexpected character '{char}'", position, line, column)
        self.char = char


class MalformedNumberError(LexError):
    def __init__(self, text: str, position: int, line: int = 1, column: int = 1):
        super().__init__(f"Malformed number '{text}'", position, line, column)
        self.text = text


# Parse errors


class ParseError(ScriptError, SyntaxError):
    pass


class ExpectedTokenError(ParseError):
    def __init__(self, expected: Token, found: Token):
        super().__init__(f"Expected {expected.type}, got {_describe(found)}")
        self.expected = expected
        self.found = found


class ExpectedAssignmentError(ParseError):
    def __init__(self, found: Token):
        super().__init__(
            f"Expected '=' after identifier in statement, got {_describe(found)}"
        )
        self.found = found


class ExpectedVariableAfterInputError(ParseError):
    def __init__(self, found: object):
        super().__init__(f"Expected variable after input, got {found}")
        self.found = found


class UnexpectedTokenError(ParseError):
    def __init__(self, found: Token):
        super().__init__(f"Unexpected token: {_describe(found)}")
        self.found = found


def _describe(token: Token) -> str:
    if token.value is None:
        return str(token.type)
    return f"{token.type} '{token.lexeme}'"


# Runtime errors


class ScriptRuntimeError(ScriptError, RuntimeError):
    pass


class UndefinedVariableError(ScriptRuntimeError):
    def __init__(self, name: str):
        super().__init__(f"Undefined variable '{name}'")
        self.name = name


class InvalidNumericInputError(ScriptRuntimeError):
    def __init__(self, raw: str):
        super().__init__(f"Invalid numeric input: {raw!r}")
        self.raw = raw


# Nesting beyond the interpreter's recursion limit


class NestingTooDeepError(ParseError):
    def __init__(self):
        super().__init__("Program nested too deeply to parse")


class EvaluationTooDeepError(ScriptRuntimeError):
    def __init__(self):
        super().__init__("Program nested too deeply to evaluate")
