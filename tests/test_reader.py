import pytest

from lispy.errors import LispyReadError
from lispy.reader.ast import AstNode
from lispy.reader.reader import read
from lispy.types import Decimal, Error, ErrorKind, Integer, SExpr, Symbol
from lispy.types.value import INT_MAX, INT_MIN


@pytest.mark.parametrize(
    "tag,contents,expected",
    [
        ("expr|integer|regex", "42", Integer(42)),
        ("expr|integer|regex", "-7", Integer(-7)),
        ("expr|integer|regex", "9223372036854775807", Integer(INT_MAX)),
        ("expr|integer|regex", "-9223372036854775808", Integer(INT_MIN)),
        ("expr|integer|regex", "9223372036854775808", Error(ErrorKind.INVALID_NUMBER)),
        ("expr|integer|regex", "-9223372036854775809", Error(ErrorKind.INVALID_NUMBER)),
        ("expr|integer|regex", "12abc", Error(ErrorKind.INVALID_NUMBER)),
        ("expr|decimal|regex", "1.5", Decimal(1.5)),
        ("expr|decimal|regex", "-0.25", Decimal(-0.25)),
        ("expr|decimal|regex", "1" * 400 + ".0", Error(ErrorKind.INVALID_NUMBER)),
        ("expr|symbol|char", "+", Symbol("+")),
        ("expr|symbol|char", "%", Symbol("%")),
    ]
)
def test_read_leaf(tag, contents, expected):
    assert read(AstNode(tag, contents)) == expected


def test_read_root(parser):
    assert read(parser.parse("(+ 1 2)")) == SExpr([
        SExpr([Symbol("+"), Integer(1), Integer(2)]),
    ])


def test_read_root_without_parentheses(parser):
    assert read(parser.parse("* 2 1.5")) == SExpr([Symbol("*"), Integer(2), Decimal(1.5)])


def test_read_empty(parser):
    assert read(parser.parse("")) == SExpr([])
    assert read(parser.parse("()")) == SExpr([SExpr([])])


def test_bad_literal_is_embedded_not_raised(parser):
    value = read(parser.parse("(+ 1 99999999999999999999 2)"))
    assert value == SExpr([
        SExpr([Symbol("+"), Integer(1), Error("invalid number"), Integer(2)]),
    ])


def test_punctuation_and_anchors_are_skipped():
    node = AstNode("expr|sexpr|>", children=[
        AstNode("char", "{"),
        AstNode("expr|integer|regex", "3"),
        AstNode("regex", ""),
        AstNode("char", "}"),
    ])
    assert read(node) == SExpr([Integer(3)])


def test_children_are_fresh_values(parser):
    value = read(parser.parse("(1 1)"))
    inner = value[0]
    assert inner[0] == inner[1]
    assert inner[0] is not inner[1]


def test_unknown_tag_raises():
    with pytest.raises(LispyReadError):
        read(AstNode("string", '"hi"'))
