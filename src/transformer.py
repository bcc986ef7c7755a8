from __future__ import annotations
from typing import Dict, List, Optional
from ast_nodes import (
    CallExpr, CallExpression, ExpressionStatement, Identifier, Node,
    OutputNode, OutputNumberLiteral, OutputProgram, OutputStringLiteral, Program,
)
from traverser import Visitor, VisitorMethods, traverse

class Transformer:
    """
    Builds the output tree from a source tree in a single traversal.

    Each source node that owns children gets a context link: the output list
    its children append into. Links live only for one transform() call.
    """

    def __init__(self):
        self.links: Dict[int, List[OutputNode]] = {}

    def link(self, node: Node, target: List[OutputNode]):
        self.links[id(node)] = target

    def context_of(self, parent: Optional[Node]) -> List[OutputNode]:
        # every non-root node is entered after its parent has set a link
        return self.links[id(parent)]

    def visitor(self) -> Visitor:
        return {
            "CallExpression": VisitorMethods(enter=self.enter_call),
            "NumberLiteral": VisitorMethods(enter=self.enter_number),
            "StringLiteral": VisitorMethods(enter=self.enter_string),
        }

    def transform(self, program: Program) -> OutputProgram:
        out = OutputProgram(line=program.line, column=program.column)
        self.links = {}
        self.link(program, out.body)
        try:
            traverse(program, self.visitor())
        finally:
            self.links = {}
        return out

    # -------- visitor hooks ----------
    def enter_call(self, node: CallExpression, parent: Optional[Node]):
        expr = CallExpr(
            callee=Identifier(name=node.name, line=node.line, column=node.column),
            arguments=[],
            line=node.line,
            column=node.column,
        )
        self.link(node, expr.arguments)

        if isinstance(parent, CallExpression):
            self.context_of(parent).append(expr)
        else:
            self.context_of(parent).append(
                ExpressionStatement(expression=expr, line=node.line, column=node.column))

    def enter_number(self, node, parent):
        self.context_of(parent).append(
            OutputNumberLiteral(value=node.value, line=node.line, column=node.column))

    def enter_string(self, node, parent):
        self.context_of(parent).append(
            OutputStringLiteral(value=node.value, line=node.line, column=node.column))

def transform(program: Program) -> OutputProgram:
    return Transformer().transform(program)
