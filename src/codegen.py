from __future__ import annotations
from typing import List, Tuple
from ast_nodes import (
    CallExpr, ExpressionStatement, Identifier, Node,
    OutputNumberLiteral, OutputProgram, OutputStringLiteral,
)
from errors import CodeGenError

class CallCodeGen:
    """
    Renders an output tree as conventional call syntax.

    The walk is post-order over an explicit stack: a node is rendered once
    all of its children have been rendered, so deeply nested calls do not
    hit the recursion limit.
    """

    def generate(self, node: Node) -> str:
        rendered: List[str] = []
        work: List[Tuple[Node, bool]] = [(node, False)]
        while work:
            current, ready = work.pop()
            children = self.children(current)
            if not ready:
                work.append((current, True))
                for child in reversed(children):
                    work.append((child, False))
                continue

            start = len(rendered) - len(children)
            parts = rendered[start:]
            del rendered[start:]
            rendered.append(self.render(current, parts))
        return rendered[0]

    def children(self, node: Node) -> List[Node]:
        if isinstance(node, OutputProgram):
            return node.body
        if isinstance(node, ExpressionStatement):
            return [node.expression]
        if isinstance(node, CallExpr):
            return [node.callee] + node.arguments
        if isinstance(node, (Identifier, OutputNumberLiteral, OutputStringLiteral)):
            return []
        raise CodeGenError(f"Cannot generate code for node of type {type(node).__name__}",
                           getattr(node, "line", -1), getattr(node, "column", -1))

    def render(self, node: Node, parts: List[str]) -> str:
        if isinstance(node, OutputProgram):
            return "\n".join(parts)

        if isinstance(node, ExpressionStatement):
            return parts[0] + ";"

        if isinstance(node, CallExpr):
            return f"{parts[0]}({', '.join(parts[1:])})"

        if isinstance(node, Identifier):
            return node.name

        if isinstance(node, OutputNumberLiteral):
            return node.value

        # embedded quotes are not escaped; the lexer has no escapes either
        return f'"{node.value}"'

def generate(node: Node) -> str:
    return CallCodeGen().generate(node)
