"""AST node definitions for tinyscript.

This module defines the concrete AST node dataclasses built by the parser and
walked by the interpreter. Each node is represented by a frozen dataclass that
carries the relevant information (an operator, child nodes, names). The
`NodeType` enum identifies node kinds and is used by the JSON exporter and
the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`).
- Nodes are immutable once built: dataclasses are frozen and statement
    bodies are tuples. Child nodes are owned by exactly one parent.
- Expression nodes (`NumberLiteralNode`, `VariableRefNode`, `BinaryOpNode`)
    and statement nodes (`AssignNode`, `PrintNode`, `InputNode`, `IfNode`,
    `WhileNode`) are plain dataclasses so the rest of the toolchain can
    pattern-match on the node class.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple


class NodeType(Enum):
    NUMBER_LITERAL = auto()
    VARIABLE_REF = auto()
    BINARY_OP = auto()
    ASSIGN = auto()
    PRINT = auto()
    INPUT = auto()
    IF_STMT = auto()
    WHILE_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


ARITHMETIC_OPERATORS = ("+", "-", "*", "/")
COMPARISON_OPERATORS = (">", "<", ">=", "<=", "==")


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


# Expression Nodes
@dataclass(frozen=True)
class NumberLiteralNode(ASTNode):
    type: NodeType = NodeType.NUMBER_LITERAL
    value: float = 0.0


@dataclass(frozen=True)
class VariableRefNode(ASTNode):
    type: NodeType = NodeType.VARIABLE_REF
    name: str = ""


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: NumberLiteralNode())
    operator: str = ""
    right: ASTNode = field(default_factory=lambda: NumberLiteralNode())


# Statement Nodes
@dataclass(frozen=True)
class AssignNode(ASTNode):
    type: NodeType = NodeType.ASSIGN
    name: str = ""
    value: ASTNode = field(default_factory=lambda: NumberLiteralNode())


@dataclass(frozen=True)
class PrintNode(ASTNode):
    type: NodeType = NodeType.PRINT
    value: ASTNode = field(default_factory=lambda: NumberLiteralNode())


@dataclass(frozen=True)
class InputNode(ASTNode):
    type: NodeType = NodeType.INPUT
    name: str = ""


@dataclass(frozen=True)
class IfNode(ASTNode):
    type: NodeType = NodeType.IF_STMT
    condition: ASTNode = field(default_factory=lambda: NumberLiteralNode())
    then_body: Tuple[ASTNode, ...] = ()
    # Empty when the source has no `else` clause.
    else_body: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class WhileNode(ASTNode):
    type: NodeType = NodeType.WHILE_STMT
    condition: ASTNode = field(default_factory=lambda: NumberLiteralNode())
    body: Tuple[ASTNode, ...] = ()


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: Tuple[ASTNode, ...] = ()


EXPRESSION_NODES = (NumberLiteralNode, VariableRefNode, BinaryOpNode)
STATEMENT_NODES = (AssignNode, PrintNode, InputNode, IfNode, WhileNode)
