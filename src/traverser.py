from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
from ast_nodes import CallExpression, Node, NumberLiteral, Program, StringLiteral
from errors import TraversalError

Hook = Callable[[Node, Optional[Node]], None]

@dataclass
class VisitorMethods:
    enter: Optional[Hook] = None
    exit: Optional[Hook] = None

Visitor = Dict[str, VisitorMethods]

def _children(node: Node) -> List[Node]:
    if isinstance(node, Program):
        return node.body
    if isinstance(node, CallExpression):
        return node.params
    if isinstance(node, (NumberLiteral, StringLiteral)):
        return []
    raise TraversalError(f"Cannot traverse node of type {type(node).__name__}",
                         getattr(node, "line", -1), getattr(node, "column", -1))

def traverse(root: Program, visitor: Visitor) -> None:
    """
    Depth-first walk over a source tree.

    For every node, ``visitor[node.kind].enter(node, parent)`` runs before the
    children are visited and ``exit`` after them. Children are visited in
    source order; ``parent`` is None for the root.
    """

    # explicit work stack instead of recursion; each node is pushed once to
    # be entered and once more to be exited after its children
    stack: List[Tuple[Node, Optional[Node], bool]] = [(root, None, False)]
    while stack:
        node, parent, entered = stack.pop()
        if entered:
            methods = visitor.get(node.kind)
            if methods and methods.exit:
                methods.exit(node, parent)
            continue

        children = _children(node)
        methods = visitor.get(node.kind)
        if methods and methods.enter:
            methods.enter(node, parent)

        stack.append((node, parent, True))
        for child in reversed(children):
            stack.append((child, node, False))
