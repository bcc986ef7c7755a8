from __future__ import annotations


class CompileError(Exception):
    kind = "CompileError"

    def __init__(self, message: str, line: int = -1, column: int = -1):
        super().__init__(f"{self.kind} at {line}:{column} - {message}")
        self.message = message
        self.line = line
        self.column = column


class LexError(CompileError):
    kind = "LexError"

    def __init__(self, char: str, offset: int, line: int = -1, column: int = -1, message: str = ""):
        if not message:
            message = f"Illegal character {char!r} at offset {offset}"
        super().__init__(message, line, column)
        self.char = char
        self.offset = offset


class ParseError(CompileError):
    kind = "ParseError"


class TraversalError(CompileError):
    kind = "TraversalError"


class CodeGenError(CompileError):
    kind = "CodeGenError"
