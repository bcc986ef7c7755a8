from __future__ import annotations
from codegen import generate
from lexer import tokenize
from parser import parse
from transformer import transform
from traverser import traverse

__all__ = ["compile", "tokenize", "parse", "traverse", "transform", "generate"]

def compile(source: str) -> str:
    """Compile s-expression calls, e.g. ``(add 2 3)``, into ``add(2, 3);``."""
    tokens = tokenize(source)
    program = parse(tokens)
    out = transform(program)
    return generate(out)
