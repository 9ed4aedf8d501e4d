"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type
and its fields; statement bodies become lists. Non-finite numbers are
written as the strings "inf", "-inf" and "NaN" so the output stays strict
JSON.
"""

import math
from typing import Any, Optional
from ast_nodes import *
from number_format import format_number


def _number(value: float) -> Any:
    if math.isfinite(value):
        return value
    return format_number(value)


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    # expressions
    if t == NodeType.NUMBER_LITERAL and isinstance(node, NumberLiteralNode):
        return {"node_type": "NumberLiteral", "value": _number(node.value)}
    if t == NodeType.VARIABLE_REF and isinstance(node, VariableRefNode):
        return {"node_type": "VariableRef", "name": node.name}
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {
            "node_type": "BinaryOp",
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    # statements
    if t == NodeType.ASSIGN and isinstance(node, AssignNode):
        return {
            "node_type": "Assign",
            "name": node.name,
            "value": ast_to_json(node.value),
        }
    if t == NodeType.PRINT and isinstance(node, PrintNode):
        return {"node_type": "Print", "value": ast_to_json(node.value)}
    if t == NodeType.INPUT and isinstance(node, InputNode):
        return {"node_type": "Input", "name": node.name}
    if t == NodeType.IF_STMT and isinstance(node, IfNode):
        return {
            "node_type": "If",
            "condition": ast_to_json(node.condition),
            "then": [ast_to_json(s) for s in node.then_body],
            "else": [ast_to_json(s) for s in node.else_body],
        }
    if t == NodeType.WHILE_STMT and isinstance(node, WhileNode):
        return {
            "node_type": "While",
            "condition": ast_to_json(node.condition),
            "body": [ast_to_json(s) for s in node.body],
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }

    raise TypeError(f"Cannot convert {type(node).__name__} to JSON")
