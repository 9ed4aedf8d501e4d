"""
Parser for tinyscript.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. Each grammar
    rule has one parsing method, and the parser keeps exactly one token of
    lookahead (`self.current_token`) pulled on demand from a `Lexer`. There
    is no backtracking.

Grammar (precedence low to high):

    Program   := Statement*
    Statement := Identifier '=' Expr
               | 'print' Expr
               | 'input' Identifier
               | 'if' Expr 'then' Statement* ('else' Statement*)? 'end'
               | 'while' Expr 'do' Statement* 'end'
    Expr      := Term (('+'|'-'|'>'|'<'|'>='|'<='|'==') Term)*
    Term      := Factor (('*'|'/') Factor)*
    Factor    := Number | Identifier | '(' Expr ')'

Key points:
- Additive and comparison operators share one precedence tier, so
    `1 + 2 > 2` parses as `(1 + 2) > 2` and `a < b < c` as `(a < b) < c`.
    Both tiers are left-associative.
- An identifier in statement position must be followed by `=`; there are no
    expression statements.
- `if`/`while` bodies are read statement by statement until their
    terminator; empty bodies are legal.

Examples:
    - `x = 1 + 2 * 3`
    - `if x > 3 then print x else print 0 end`
    - `while i < 10 do print i i = i + 1 end`
"""

from __future__ import annotations
from typing import List, Tuple
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *
from errors import (
    ExpectedAssignmentError,
    ExpectedTokenError,
    ExpectedVariableAfterInputError,
    NestingTooDeepError,
    UnexpectedTokenError,
)

EXPR_OPERATORS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.GT: ">",
    TokenType.LT: "<",
    TokenType.GTE: ">=",
    TokenType.LTE: "<=",
    TokenType.EQ: "==",
}

TERM_OPERATORS = {
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
}


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current_token = self.lexer.get_next_token()

    def eat(self, expected: Token) -> None:
        """Consume the current token if it equals `expected`, payload included."""
        if self.current_token != expected:
            raise ExpectedTokenError(expected, self.current_token)
        self.current_token = self.lexer.get_next_token()

    def at(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def parse_factor(self) -> ASTNode:
        """Parse a number, a variable reference or a parenthesized expression."""
        token = self.current_token

        match token.type:
            case TokenType.NUMBER:
                self.eat(token)
                return NumberLiteralNode(value=token.value)

            case TokenType.IDENTIFIER:
                self.eat(token)
                return VariableRefNode(name=token.value)

            case TokenType.LPAREN:
                self.eat(Token(TokenType.LPAREN))
                expr = self.parse_expr()
                self.eat(Token(TokenType.RPAREN))
                return expr

            case _:
                raise UnexpectedTokenError(token)

    def parse_term(self) -> ASTNode:
        left = self.parse_factor()

        while self.current_token.type in TERM_OPERATORS:
            operator = TERM_OPERATORS[self.current_token.type]
            self.eat(self.current_token)
            right = self.parse_factor()
            left = BinaryOpNode(left=left, operator=operator, right=right)

        return left

    def parse_expr(self) -> ASTNode:
        left = self.parse_term()

        while self.current_token.type in EXPR_OPERATORS:
            operator = EXPR_OPERATORS[self.current_token.type]
            self.eat(self.current_token)
            right = self.parse_term()
            left = BinaryOpNode(left=left, operator=operator, right=right)

        return left

    def parse_body(self, *terminators: TokenType) -> Tuple[ASTNode, ...]:
        """Parse statements until the current token is one of `terminators`."""
        statements: List[ASTNode] = []

        while self.current_token.type not in terminators:
            if self.at(TokenType.EOF):
                # Report the missing terminator rather than a stray EOF.
                raise ExpectedTokenError(Token(terminators[-1]), self.current_token)
            statements.append(self.parse_statement())

        return tuple(statements)

    def parse_assignment(self) -> AssignNode:
        """Parse assignment: identifier '=' expr"""
        name = self.current_token.value
        self.eat(self.current_token)
        if not self.at(TokenType.ASSIGN):
            raise ExpectedAssignmentError(self.current_token)
        self.eat(Token(TokenType.ASSIGN))
        return AssignNode(name=name, value=self.parse_expr())

    def parse_print(self) -> PrintNode:
        self.eat(Token(TokenType.PRINT))
        return PrintNode(value=self.parse_expr())

    def parse_input(self) -> InputNode:
        """Parse input statement: 'input' identifier"""
        self.eat(Token(TokenType.INPUT))
        target = self.parse_factor()
        if not isinstance(target, VariableRefNode):
            raise ExpectedVariableAfterInputError(target)
        return InputNode(name=target.name)

    def parse_if(self) -> IfNode:
        """Parse if statement: if expr then stmt* (else stmt*)? end"""
        self.eat(Token(TokenType.IF))
        condition = self.parse_expr()
        self.eat(Token(TokenType.THEN))

        then_body = self.parse_body(TokenType.ELSE, TokenType.END)

        else_body: Tuple[ASTNode, ...] = ()
        if self.at(TokenType.ELSE):
            self.eat(Token(TokenType.ELSE))
            else_body = self.parse_body(TokenType.END)

        self.eat(Token(TokenType.END))
        return IfNode(condition=condition, then_body=then_body, else_body=else_body)

    def parse_while(self) -> WhileNode:
        """Parse while statement: while expr do stmt* end"""
        self.eat(Token(TokenType.WHILE))
        condition = self.parse_expr()
        self.eat(Token(TokenType.DO))

        body = self.parse_body(TokenType.END)

        self.eat(Token(TokenType.END))
        return WhileNode(condition=condition, body=body)

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        match self.current_token.type:
            case TokenType.IDENTIFIER:
                return self.parse_assignment()
            case TokenType.PRINT:
                return self.parse_print()
            case TokenType.INPUT:
                return self.parse_input()
            case TokenType.IF:
                return self.parse_if()
            case TokenType.WHILE:
                return self.parse_while()
            case _:
                raise UnexpectedTokenError(self.current_token)

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        statements: List[ASTNode] = []

        try:
            while not self.at(TokenType.EOF):
                statements.append(self.parse_statement())
        except RecursionError:
            raise NestingTooDeepError() from None

        return ProgramNode(statements=tuple(statements))
