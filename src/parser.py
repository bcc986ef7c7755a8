from __future__ import annotations
from typing import List, Optional
from ast_nodes import CallExpression, NumberLiteral, Program, SourceNode, StringLiteral
from errors import ParseError
from lexer import Token

class TokenStream:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.i = 0

    def peek(self, k: int = 0) -> Optional[Token]:
        j = self.i + k
        if j >= len(self.tokens):
            return None
        return self.tokens[j]

    def at_end(self) -> bool:
        return self.i >= len(self.tokens)

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.i += 1
        return tok

    def expect_any(self, what: str) -> Token:
        """Consume the next token whatever it is; fail only at end of input."""
        tok = self.advance()
        if tok is None:
            line, col = self.eof_loc()
            raise ParseError(f"Unexpected end of input, expected {what}", line, col)
        return tok

    def eof_loc(self):
        if not self.tokens:
            return 1, 1
        last = self.tokens[-1]
        return last.line, last.column

def _is_close(tok: Token) -> bool:
    return tok.type == "PAREN" and tok.value == ")"

class Parser:
    def __init__(self, tokens: List[Token]):
        self.ts = TokenStream(tokens)

    def parse_program(self) -> Program:
        prog = Program(line=1, column=1)
        # several top-level forms may follow each other, e.g. (add 2 3)(subtract 5 4)
        while not self.ts.at_end():
            prog.body.append(self.parse_expr())
        return prog

    def parse_expr(self) -> SourceNode:
        # calls still waiting for their ')' live on an explicit stack,
        # so nesting depth is not bounded by the recursion limit
        open_calls: List[CallExpression] = []
        while True:
            if open_calls:
                tok = self.ts.peek()
                if tok is None:
                    line, col = self.ts.eof_loc()
                    raise ParseError(f"Unexpected end of input, unclosed call '{open_calls[-1].name}'", line, col)
                if _is_close(tok):
                    self.ts.advance()
                    call = open_calls.pop()
                    if not open_calls:
                        return call
                    continue

            node = self.parse_operand()
            if open_calls:
                open_calls[-1].params.append(node)
            if isinstance(node, CallExpression):
                open_calls.append(node)
            elif not open_calls:
                return node

    def parse_operand(self) -> SourceNode:
        tok = self.ts.expect_any("an expression")

        if tok.type == "NUMBER":
            return NumberLiteral(value=tok.value, line=tok.line, column=tok.column)

        if tok.type == "STRING":
            return StringLiteral(value=tok.value, line=tok.line, column=tok.column)

        if tok.type == "PAREN" and tok.value == "(":
            return self.parse_call_head(tok)

        raise ParseError(f"Unexpected {tok.type} token {tok.value!r}", tok.line, tok.column)

    def parse_call_head(self, open_tok: Token) -> CallExpression:
        # the token after '(' is taken as the callee name as-is
        name_tok = self.ts.expect_any("a call name")
        return CallExpression(name=name_tok.value, line=open_tok.line, column=open_tok.column)

def parse(tokens: List[Token]) -> Program:
    return Parser(tokens).parse_program()
