"""Reader: translates the parser's AstNode tree into runtime Values.

The reader never fails the translation because of a bad literal: a number
that cannot be represented becomes an Error value at that position and is
only noticed when the evaluator reaches it.
"""

from __future__ import annotations

import math

from lispy.errors import LispyReadError
from lispy.reader.ast import AstNode
from lispy.types.error_kind import ErrorKind
from lispy.types.value import (
    Value,
    fits_int64,
    make_decimal,
    make_error,
    make_integer,
    make_sexpr,
    make_symbol,
)

# Tokens the grammar keeps in the tree that carry no value
PUNCTUATION = frozenset({"(", ")", "{", "}"})


def read_integer(node: AstNode) -> Value:
    try:
        n = int(node.contents, 10)
    except ValueError:
        return make_error(ErrorKind.INVALID_NUMBER)
    if not fits_int64(n):
        return make_error(ErrorKind.INVALID_NUMBER)
    return make_integer(n)


def read_decimal(node: AstNode) -> Value:
    try:
        x = float(node.contents)
    except ValueError:
        return make_error(ErrorKind.INVALID_NUMBER)
    if not math.isfinite(x):
        return make_error(ErrorKind.INVALID_NUMBER)
    return make_decimal(x)


def is_artifact(node: AstNode) -> bool:
    return node.contents in PUNCTUATION or node.tag == "regex"


def read(node: AstNode) -> Value:
    if "integer" in node.tag:
        return read_integer(node)
    if "decimal" in node.tag:
        return read_decimal(node)
    if "symbol" in node.tag:
        return make_symbol(node.contents)

    if node.tag == ">" or "sexpr" in node.tag:
        x = make_sexpr()
        for child in node.children:
            if is_artifact(child):
                continue
            x.add(read(child))
        return x

    raise LispyReadError(f"Cannot read syntax node tagged {node.tag!r}")
