from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import ply.lex as lex

from errors import LexError


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    # positions are diagnostic only; two tokens are equal when type and value match
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    lexpos: int = field(default=0, compare=False)


class CallLexer:

    tokens = (
        'PAREN',
        'NUMBER',
        'STRING',
        'NAME',
    )

    # Ignored characters (newlines are handled by t_newline)
    t_ignore = ' \t\r\f\v'

    t_PAREN = r'[()]'

    def __init__(self):
        self.lexer = None

    #  line number tracking
    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)

    # Any other Unicode whitespace (NBSP, U+2028, ...) plus the BOM
    def t_space(self, t):
        r'(?:[^\S\n]|\ufeff)+'

    # No escape sequences: everything up to the next quote is the value
    def t_STRING(self, t):
        r'"[^"]*"'
        t.lexer.lineno += t.value.count('\n')
        t.value = t.value[1:-1]
        return t

    def t_NUMBER(self, t):
        r'[0-9]+'
        return t

    def t_NAME(self, t):
        r'[a-z]+'
        return t

    # Error handling
    def t_error(self, t):
        char = t.value[0]
        line = t.lexer.lineno
        column = _column(t.lexer.lexdata, t.lexpos)
        if char == '"':
            raise LexError(char, t.lexpos, line, column,
                           message=f"Unterminated string starting at offset {t.lexpos}")
        raise LexError(char, t.lexpos, line, column)

    def build(self, **kwargs):
        """Build the lexer"""
        self.lexer = lex.lex(module=self, **kwargs)
        return self.lexer

    def tokenize(self, data: str) -> List[Token]:
        if not self.lexer:
            self.build()

        self.lexer.lineno = 1
        self.lexer.input(data)
        tokens: List[Token] = []

        while True:
            tok = self.lexer.token()
            if not tok:
                break
            tokens.append(Token(
                type=tok.type,
                value=tok.value,
                line=tok.lineno,
                column=_column(data, tok.lexpos),
                lexpos=tok.lexpos,
            ))

        return tokens


def _column(data: str, lexpos: int) -> int:
    line_start = data.rfind('\n', 0, lexpos) + 1
    return lexpos - line_start + 1


def tokenize(data: str) -> List[Token]:
    return CallLexer().tokenize(data)


def print_tokens(tokens: List[Token]):
    if not tokens:
        print("No tokens found!")
        return

    print(f"{'Line':<6}| {'Column':<7}| {'Token':<10}| Value")
    print("-" * 60)

    for tok in tokens:
        value = tok.value
        if len(value) > 40:
            value = value[:37] + "..."
        # Display escape characters
        value = repr(value)[1:-1] if '\n' in value or '\t' in value else value

        print(f"{tok.line:<6}| {tok.column:<7}| {tok.type:<10}| {value}")
