"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes one box labelled with its kind and payload
(`Assign x`, `BinaryOp +`, `Number 3`). Edges are labelled with the role of
the child (`left`, `right`, `value`, `cond`, `then[0]`, ...), so statement
order inside bodies stays readable.
"""

from typing import List, Tuple
from ast_nodes import *
from graphviz import Digraph
from number_format import format_number


def _node_label(node: ASTNode) -> str:
    match node:
        case NumberLiteralNode(value=v):
            return f"Number {format_number(v)}"
        case VariableRefNode(name=n):
            return f"Var {n}"
        case BinaryOpNode(operator=op):
            return f"BinaryOp {op}"
        case AssignNode(name=n):
            return f"Assign {n}"
        case PrintNode():
            return "Print"
        case InputNode(name=n):
            return f"Input {n}"
        case IfNode():
            return "If"
        case WhileNode():
            return "While"
        case ProgramNode():
            return "Program"
        case _:
            return type(node).__name__


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    """Return (edge label, child) pairs in evaluation order."""
    match node:
        case BinaryOpNode(left=l, right=r):
            return [("left", l), ("right", r)]
        case AssignNode(value=v) | PrintNode(value=v):
            return [("value", v)]
        case IfNode(condition=c, then_body=then_b, else_body=else_b):
            return (
                [("cond", c)]
                + [(f"then[{i}]", s) for i, s in enumerate(then_b)]
                + [(f"else[{i}]", s) for i, s in enumerate(else_b)]
            )
        case WhileNode(condition=c, body=body):
            return [("cond", c)] + [(f"body[{i}]", s) for i, s in enumerate(body)]
        case ProgramNode(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case _:
            return []


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontsize="10")

    # Node ids come from a pre-order counter; the AST is a tree so every
    # node is visited exactly once.
    counter = 0
    stack: List[Tuple[ASTNode, str, str]] = [(node, "", "")]
    while stack:
        current, parent_id, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        style = {}
        if isinstance(current, STATEMENT_NODES):
            style = {"style": "rounded"}
        dot.node(node_id, label=_node_label(current), **style)
        if parent_id:
            dot.edge(parent_id, node_id, label=edge_label)
        for label, child in reversed(_children(current)):
            stack.append((child, node_id, label))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file.
    """
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
