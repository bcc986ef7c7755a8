from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, List, Union

@dataclass
class Node:
    line: int = 0
    column: int = 0

# ---------- Source tree (parser output) ----------
@dataclass
class NumberLiteral(Node):
    kind: ClassVar[str] = "NumberLiteral"
    value: str = ""

@dataclass
class StringLiteral(Node):
    kind: ClassVar[str] = "StringLiteral"
    value: str = ""

@dataclass
class CallExpression(Node):
    kind: ClassVar[str] = "CallExpression"
    name: str = ""
    params: List["SourceNode"] = field(default_factory=list)

@dataclass
class Program(Node):
    kind: ClassVar[str] = "Program"
    body: List["SourceNode"] = field(default_factory=list)

SourceNode = Union[CallExpression, NumberLiteral, StringLiteral]

# ---------- Output tree (transformer output) ----------
# Kept apart from the source tree: a call is a statement only at the top level.
@dataclass
class Identifier(Node):
    kind: ClassVar[str] = "Identifier"
    name: str = ""

@dataclass
class OutputNumberLiteral(Node):
    kind: ClassVar[str] = "NumberLiteral"
    value: str = ""

@dataclass
class OutputStringLiteral(Node):
    kind: ClassVar[str] = "StringLiteral"
    value: str = ""

@dataclass
class CallExpr(Node):
    kind: ClassVar[str] = "CallExpression"
    callee: Identifier = None
    arguments: List["OutputNode"] = field(default_factory=list)

@dataclass
class ExpressionStatement(Node):
    kind: ClassVar[str] = "ExpressionStatement"
    expression: CallExpr = None

@dataclass
class OutputProgram(Node):
    kind: ClassVar[str] = "Program"
    body: List["OutputNode"] = field(default_factory=list)

OutputNode = Union[ExpressionStatement, CallExpr, OutputNumberLiteral, OutputStringLiteral]
