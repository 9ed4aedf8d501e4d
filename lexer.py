"""
Lexer for tinyscript.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`. Tokens are produced lazily, one per call to
    `get_next_token()`, so the parser can pull them on demand.
- It recognizes keywords (`print`, `input`, `if`, `then`, `else`, `end`,
    `while`, `do`), identifiers, numeric literals, single- and two-character
    operators (`==`, `<=`, `>=`) and parentheses, and skips whitespace.

Examples:
    Input:  "x = 0 while x < 10 do print x x = x + 1 end"
    Tokens: [IDENTIFIER('x'), ASSIGN, NUMBER(0.0), WHILE, IDENTIFIER('x'), LT, ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- `=`, `<` and `>` look one character ahead and always prefer the
    two-character form when the next character is `=`.
- Numbers consume a run of digits and dots, then convert the run with
    `float()`; a run such as `1.2.3` is rejected here with
    `MalformedNumberError`.
- Identifiers are scanned and then mapped to keywords using `KEYWORDS`.
- Once the input is exhausted every further call returns an EOF token.
"""

from __future__ import annotations
from typing import Iterable, Optional, List
from tokens import KEYWORDS, Token, TokenType
from errors import MalformedNumberError, UnexpectedCharacterError

WHITESPACE = " \t\n\r"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number; line and
        # column only feed error messages, tokens carry no position.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def number(self) -> float:
        """Parse a numeric literal made of digits and dots."""
        start, line, column = self.pos, self.line, self.column
        result = []

        while self.current_char is not None and (
            _is_digit(self.current_char) or self.current_char == "."
        ):
            result.append(self.current_char)
            self.advance()

        text = "".join(result)
        try:
            return float(text)
        except ValueError:
            raise MalformedNumberError(text, start, line, column) from None

    def identifier(self) -> str:
        """Parse an identifier or keyword."""
        result = [self.current_char]
        self.advance()

        # Only ASCII letters start an identifier; later characters may be any
        # Unicode letter, ASCII digit, or underscore.
        while self.current_char is not None and (
            self.current_char.isalpha()
            or _is_digit(self.current_char)
            or self.current_char == "_"
        ):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def _two_char(self, single: TokenType, double: TokenType) -> Token:
        """Lex `=`, `<` or `>`, preferring the form followed by `=`."""
        if self.peek_char() == "=":
            self.advance()
            self.advance()
            return Token(double)
        self.advance()
        return Token(single)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char in WHITESPACE:
                self.skip_whitespace()
                continue

            match self.current_char:
                case "+":
                    self.advance()
                    return Token(TokenType.PLUS)
                case "-":
                    self.advance()
                    return Token(TokenType.MINUS)
                case "*":
                    self.advance()
                    return Token(TokenType.STAR)
                case "/":
                    self.advance()
                    return Token(TokenType.SLASH)
                case "(":
                    self.advance()
                    return Token(TokenType.LPAREN)
                case ")":
                    self.advance()
                    return Token(TokenType.RPAREN)
                case "=":
                    return self._two_char(TokenType.ASSIGN, TokenType.EQ)
                case "<":
                    return self._two_char(TokenType.LT, TokenType.LTE)
                case ">":
                    return self._two_char(TokenType.GT, TokenType.GTE)

            if _is_digit(self.current_char):
                return Token(TokenType.NUMBER, self.number())

            if _is_letter(self.current_char):
                ident = self.identifier()
                if ident in KEYWORDS:
                    return Token(KEYWORDS[ident])
                return Token(TokenType.IDENTIFIER, ident)

            raise UnexpectedCharacterError(
                self.current_char, self.pos, self.line, self.column
            )

        return Token(TokenType.EOF)

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens, ending with a single EOF token."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens


def detokenize(tokens: Iterable[Token]) -> str:
    """Rebuild source text from tokens, one space between lexemes."""
    return " ".join(t.lexeme for t in tokens if t.type != TokenType.EOF)
