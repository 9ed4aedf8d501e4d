import io

from lexer import Lexer
from parser import Parser
from interpreter import Interpreter


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into a ProgramNode."""
    return Parser(Lexer(text)).parse_program()


def run_text(text: str, stdin: str = ""):
    """Run a program with in-memory console streams.

    Returns `(output, env)`.
    """
    out = io.StringIO()
    interp = Interpreter(stdin=io.StringIO(stdin), stdout=out)
    interp.interpret(parse_text(text))
    return out.getvalue(), interp.env
