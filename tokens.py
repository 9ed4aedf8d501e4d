"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small immutable `Token` dataclass that holds a token type and
an optional payload. Only `NUMBER` (a float) and `IDENTIFIER` (the name) carry
a payload; every fixed operator, punctuation and keyword token compares equal
to any other token of the same type.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional
from number_format import format_number


class TokenType(Enum):
    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Parentheses
    LPAREN = auto()
    RPAREN = auto()

    # Assignment
    ASSIGN = auto()

    # Comparison operators
    EQ = auto()
    LT = auto()
    GT = auto()
    LTE = auto()
    GTE = auto()

    # Keywords
    PRINT = auto()
    INPUT = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    END = auto()
    WHILE = auto()
    DO = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "print": TokenType.PRINT,
    "input": TokenType.INPUT,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "end": TokenType.END,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
}

# Source spelling of every token without a payload.
LEXEMES: Dict[TokenType, str] = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.ASSIGN: "=",
    TokenType.EQ: "==",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.LTE: "<=",
    TokenType.GTE: ">=",
    TokenType.EOF: "",
    **{token_type: word for word, token_type in KEYWORDS.items()},
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str | float] = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type})"
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return LEXEMES[self.type]
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        return str(self.value)
