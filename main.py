from __future__ import annotations
import json
import sys
import traceback
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from interpreter import Interpreter
from errors import LexError, ParseError, ScriptError, ScriptRuntimeError

from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_RUNTIME_ERROR = 2


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse(text: str) -> ProgramNode:
    """Parse source text into a program AST, pulling tokens lazily."""
    return Parser(Lexer(text)).parse_program()


def report_error(error: ScriptError) -> None:
    if isinstance(error, LexError):
        kind = "Lexical"
    elif isinstance(error, ParseError):
        kind = "Syntax"
    else:
        kind = "Runtime"
    print(f"{kind} error: {error}", file=sys.stderr)


def run_source(
    text: str,
    *,
    interpreter: Optional[Interpreter] = None,
    print_tokens: bool = False,
    print_ast: bool = False,
    run: bool = True,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> int:
    """Process a single program: lex, parse and run it, optionally printing stages.

    Returns a process exit status. Errors are reported on stderr.
    """
    try:
        if print_tokens:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        ast = parse(text)
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(ast))

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(ast_to_json(ast), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=sys.stderr)

        if viz_path:
            try:
                rendered = write_and_render(ast, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {rendered}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}", file=sys.stderr)

        if run:
            (interpreter or Interpreter()).interpret(ast)

    except (LexError, ParseError) as e:
        report_error(e)
        return EXIT_SYNTAX_ERROR
    except ScriptRuntimeError as e:
        report_error(e)
        return EXIT_RUNTIME_ERROR
    return EXIT_OK


def interactive_mode(print_tokens: bool = False, print_ast: bool = False) -> None:
    """Run an interactive REPL; variables persist between entries."""
    print("\ntinyscript interactive mode (type 'quit' to exit)")
    print("=" * 80)

    interpreter = Interpreter()
    while True:
        try:
            text = input("\n>>> ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            run_source(
                text,
                interpreter=interpreter,
                print_tokens=print_tokens,
                print_ast=print_ast,
            )

        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\n\nExiting...")
            break
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            traceback.print_exc()


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Run a tinyscript program from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to run"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--no-run",
        dest="run",
        action="store_false",
        help="Stop after parsing (and any requested dumps)",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write a Graphviz rendering of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return EXIT_OK
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}", file=sys.stderr)
            return EXIT_SYNTAX_ERROR

        return run_source(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            run=args.run,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )

    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
