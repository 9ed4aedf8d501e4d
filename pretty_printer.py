"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string for debugging, and
`PrettyPrinter.print_surface(node)` which renders a node back into
tinyscript source.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(program_node)
"""

from __future__ import annotations
from ast_nodes import *
from number_format import format_number

# Binding strength of each operator; both tiers are left-associative.
PRECEDENCE = {
    "+": 1,
    "-": 1,
    ">": 1,
    "<": 1,
    ">=": 1,
    "<=": 1,
    "==": 1,
    "*": 2,
    "/": 2,
}


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}NumberLiteral({format_number(v)})")

            case VariableRefNode(name=n):
                lines.append(f"{indent_str}{prefix}VariableRef({n})")

            case BinaryOpNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case AssignNode(name=n, value=value):
                lines.append(f"{indent_str}{prefix}Assign({n})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case PrintNode(value=value):
                lines.append(f"{indent_str}{prefix}Print")
                lines.append(PrettyPrinter.print_ast(value, indent + 2))

            case InputNode(name=n):
                lines.append(f"{indent_str}{prefix}Input({n})")

            case IfNode(condition=cond, then_body=then_b, else_body=else_b):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                for i, stmt in enumerate(then_b):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"then[{i}]: "))
                for i, stmt in enumerate(else_b):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"else[{i}]: "))

            case WhileNode(condition=cond, body=body):
                lines.append(f"{indent_str}{prefix}While")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                for i, stmt in enumerate(body):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"body[{i}]: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode, indent: int = 0) -> str:
        """Return tinyscript source for a node.

        Statements are rendered one per line with bodies indented by two
        spaces. Operands are parenthesized only where the tree shape would
        otherwise be lost, so parsing the output gives back an equal AST.
        """
        pad = " " * indent

        def _body(stmts) -> list:
            return [PrettyPrinter.print_surface(s, indent + 2) for s in stmts]

        match node:
            case NumberLiteralNode(value=v):
                return format_number(v)
            case VariableRefNode(name=n):
                return n
            case BinaryOpNode(left=l, operator=op, right=r):
                tier = PRECEDENCE[op]
                left_s = PrettyPrinter.print_surface(l)
                right_s = PrettyPrinter.print_surface(r)
                if isinstance(l, BinaryOpNode) and PRECEDENCE[l.operator] < tier:
                    left_s = f"({left_s})"
                if isinstance(r, BinaryOpNode) and PRECEDENCE[r.operator] <= tier:
                    right_s = f"({right_s})"
                return f"{left_s} {op} {right_s}"
            case AssignNode(name=n, value=value):
                return f"{pad}{n} = {PrettyPrinter.print_surface(value)}"
            case PrintNode(value=value):
                return f"{pad}print {PrettyPrinter.print_surface(value)}"
            case InputNode(name=n):
                return f"{pad}input {n}"
            case IfNode(condition=cond, then_body=then_b, else_body=else_b):
                lines = [f"{pad}if {PrettyPrinter.print_surface(cond)} then"]
                lines.extend(_body(then_b))
                if else_b:
                    lines.append(f"{pad}else")
                    lines.extend(_body(else_b))
                lines.append(f"{pad}end")
                return "\n".join(lines)
            case WhileNode(condition=cond, body=body):
                lines = [f"{pad}while {PrettyPrinter.print_surface(cond)} do"]
                lines.extend(_body(body))
                lines.append(f"{pad}end")
                return "\n".join(lines)
            case ProgramNode(statements=stmts):
                return "\n".join(PrettyPrinter.print_surface(s, indent) for s in stmts)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
