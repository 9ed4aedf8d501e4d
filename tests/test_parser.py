import pytest

from lexer import Lexer
from parser import Parser
from tokens import Token, TokenType
from ast_nodes import *
from errors import (
    ExpectedAssignmentError,
    ExpectedTokenError,
    ExpectedVariableAfterInputError,
    NestingTooDeepError,
    ParseError,
    UnexpectedTokenError,
)
from tests.utils import parse_text


def num(v):
    return NumberLiteralNode(value=float(v))


def var(name):
    return VariableRefNode(name=name)


def binop(left, op, right):
    return BinaryOpNode(left=left, operator=op, right=right)


def test_parser_parses_assignments_in_order():
    ast = parse_text("x = 5 x = x + 1")
    assert ast.type == NodeType.PROGRAM
    assert ast.statements == (
        AssignNode(name="x", value=num(5)),
        AssignNode(name="x", value=binop(var("x"), "+", num(1))),
    )


def test_empty_program():
    assert parse_text("").statements == ()


def test_multiplication_binds_tighter_than_addition():
    ast = parse_text("print 2 + 3 * 4")
    assert ast.statements[0] == PrintNode(
        value=binop(num(2), "+", binop(num(3), "*", num(4)))
    )


def test_parentheses_override_precedence():
    ast = parse_text("print (2 + 3) * 4")
    assert ast.statements[0] == PrintNode(
        value=binop(binop(num(2), "+", num(3)), "*", num(4))
    )


def test_operators_are_left_associative():
    ast = parse_text("x = 1 - 2 - 3 y = 8 / 4 / 2")
    assert ast.statements[0].value == binop(binop(num(1), "-", num(2)), "-", num(3))
    assert ast.statements[1].value == binop(binop(num(8), "/", num(4)), "/", num(2))


def test_comparisons_share_the_additive_tier():
    ast = parse_text("x = 1 + 2 > 2 y = a < b == c")
    assert ast.statements[0].value == binop(binop(num(1), "+", num(2)), ">", num(2))
    assert ast.statements[1].value == binop(
        binop(var("a"), "<", var("b")), "==", var("c")
    )


def test_input_statement():
    assert parse_text("input x").statements == (InputNode(name="x"),)


def test_input_accepts_parenthesized_variable():
    assert parse_text("input (x)").statements == (InputNode(name="x"),)


def test_if_with_else():
    ast = parse_text("if 5 > 3 then print 1 else print 2 end")
    stmt = ast.statements[0]
    assert isinstance(stmt, IfNode)
    assert stmt.condition == binop(num(5), ">", num(3))
    assert stmt.then_body == (PrintNode(value=num(1)),)
    assert stmt.else_body == (PrintNode(value=num(2)),)


def test_if_without_else_has_empty_else_body():
    stmt = parse_text("if x then y = 1 z = 2 end").statements[0]
    assert len(stmt.then_body) == 2
    assert stmt.else_body == ()


def test_empty_bodies_are_legal():
    ast = parse_text("if 1 then else end while 0 do end")
    assert ast.statements == (
        IfNode(condition=num(1)),
        WhileNode(condition=num(0)),
    )


def test_while_and_nesting():
    src = """
    while i < 3 do
        if i == 1 then
            print i
        end
        i = i + 1
    end
    """
    loop = parse_text(src).statements[0]
    assert isinstance(loop, WhileNode)
    assert loop.condition == binop(var("i"), "<", num(3))
    assert isinstance(loop.body[0], IfNode)
    assert loop.body[1] == AssignNode(name="i", value=binop(var("i"), "+", num(1)))


def test_identifier_must_be_followed_by_assignment():
    with pytest.raises(ExpectedAssignmentError) as exc_info:
        parse_text("x 5")
    assert exc_info.value.found == Token(TokenType.NUMBER, 5.0)

    with pytest.raises(ExpectedAssignmentError):
        parse_text("x")


def test_input_requires_a_variable():
    with pytest.raises(ExpectedVariableAfterInputError):
        parse_text("input 5")
    with pytest.raises(ExpectedVariableAfterInputError):
        parse_text("input (a + b)")


def test_missing_end_reports_expected_end():
    with pytest.raises(ExpectedTokenError) as exc_info:
        parse_text("if 1 then print 1")
    assert exc_info.value.expected == Token(TokenType.END)
    assert exc_info.value.found == Token(TokenType.EOF)

    with pytest.raises(ExpectedTokenError):
        parse_text("while 1 do print 1")


def test_missing_keyword_reports_expected_token():
    with pytest.raises(ExpectedTokenError) as exc_info:
        parse_text("while 1 print 1 end")
    assert exc_info.value.expected == Token(TokenType.DO)
    assert exc_info.value.found == Token(TokenType.PRINT)

    with pytest.raises(ExpectedTokenError) as exc_info:
        parse_text("print (1 + 2")
    assert exc_info.value.expected == Token(TokenType.RPAREN)


def test_unexpected_tokens():
    for src in ("print", "= 1", "end", "else print 1", "print * 2", "3 = x"):
        with pytest.raises(UnexpectedTokenError):
            parse_text(src)


def test_parse_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        parse_text("x +")
    with pytest.raises(ParseError):
        parse_text("print )")


def test_eat_compares_payloads():
    parser = Parser(Lexer("x = 1"))
    with pytest.raises(ExpectedTokenError):
        parser.eat(Token(TokenType.IDENTIFIER, "y"))
    parser.eat(Token(TokenType.IDENTIFIER, "x"))
    assert parser.current_token == Token(TokenType.ASSIGN)


def test_parser_pulls_one_token_at_construction():
    # The bad character is only reached once parsing advances that far.
    parser = Parser(Lexer("x = 1 $"))
    assert parser.current_token == Token(TokenType.IDENTIFIER, "x")


def test_deeply_nested_parentheses_are_a_parse_error():
    src = "print " + "(" * 1500 + "1" + ")" * 1500
    with pytest.raises(NestingTooDeepError):
        parse_text(src)
