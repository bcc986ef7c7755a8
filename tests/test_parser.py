import pytest
from ast_nodes import CallExpression, NumberLiteral, Program, StringLiteral
from errors import ParseError
from lexer import tokenize
from parser import parse


def shape(node):
    """Strip positions so trees can be compared by structure only."""
    if isinstance(node, Program):
        return ("Program", [shape(n) for n in node.body])
    if isinstance(node, CallExpression):
        return ("Call", node.name, [shape(n) for n in node.params])
    if isinstance(node, NumberLiteral):
        return ("Number", node.value)
    if isinstance(node, StringLiteral):
        return ("String", node.value)
    raise AssertionError(node)


def parse_src(src):
    return parse(tokenize(src))


class TestParse:
    def test_nested_call(self):
        assert shape(parse_src("(add 2 (subtract 4 2))")) == (
            "Program", [
                ("Call", "add", [
                    ("Number", "2"),
                    ("Call", "subtract", [("Number", "4"), ("Number", "2")]),
                ]),
            ],
        )

    def test_concatenated_top_level_forms(self):
        prog = parse_src("(add 2 3)(subtract 5 4)")
        assert [n.name for n in prog.body] == ["add", "subtract"]

    def test_string_argument(self):
        prog = parse_src('(concat "a" "b")')
        assert shape(prog.body[0]) == ("Call", "concat", [("String", "a"), ("String", "b")])

    def test_call_without_arguments(self):
        assert shape(parse_src("(now)")) == ("Program", [("Call", "now", [])])

    def test_bare_literal_at_top_level(self):
        assert shape(parse_src('1 "x"')) == ("Program", [("Number", "1"), ("String", "x")])

    def test_empty_program(self):
        assert parse_src("").body == []

    def test_call_name_is_not_validated(self):
        assert shape(parse_src("(1 2)")) == ("Program", [("Call", "1", [("Number", "2")])])

    def test_positions(self):
        call = parse_src("\n  (add 1)").body[0]
        assert (call.line, call.column) == (2, 3)

    def test_deterministic(self):
        assert parse_src("(a (b 1) 2)") == parse_src("(a (b 1) 2)")


class TestParseErrors:
    def test_unclosed_call(self):
        with pytest.raises(ParseError) as exc:
            parse_src("(add 2 3")
        assert "unclosed call 'add'" in exc.value.message

    def test_unclosed_nested_call(self):
        with pytest.raises(ParseError):
            parse_src("(add 2 (subtract 4 2)")

    def test_lone_open_paren(self):
        with pytest.raises(ParseError) as exc:
            parse_src("(")
        assert "end of input" in exc.value.message

    def test_stray_close_paren(self):
        with pytest.raises(ParseError) as exc:
            parse_src(")")
        assert (exc.value.line, exc.value.column) == (1, 1)

    def test_bare_name(self):
        with pytest.raises(ParseError):
            parse_src("add")

    def test_name_in_argument_position(self):
        with pytest.raises(ParseError) as exc:
            parse_src("(add x 1)")
        assert "NAME" in exc.value.message


def test_deep_nesting():
    depth = 3000
    prog = parse_src("(f " * depth + "1" + ")" * depth)
    node, seen = prog.body[0], 0
    while isinstance(node, CallExpression):
        seen += 1
        node = node.params[0]
    assert seen == depth
    assert node.value == "1"


def test_unclosed_reports_innermost_call():
    with pytest.raises(ParseError) as exc:
        parse_src("(outer (inner 1")
    assert "unclosed call 'inner'" in exc.value.message
