"""Reducer for Lispy values.

Atoms are already reduced. An s-expression is reduced bottom-up: every child
is reduced in place, left to right, then the sequence collapses to the first
Error among its children, to itself when empty, to its only child, or to the
result of applying its leading operator to the remaining children.
"""

from __future__ import annotations

import logging

from lispy.builtins import builtin_op
from lispy.types.error_kind import ErrorKind
from lispy.types.value import Error, SExpr, Symbol, Value, make_error

logger = logging.getLogger(__name__)


def evaluate(value: Value) -> Value:
    match value:
        case SExpr():
            return evaluate_sexpr(value)
    # --- Atoms return as-is ---
    return value


def evaluate_sexpr(v: SExpr) -> Value:
    # No short-circuit here: every child is reduced even after an error
    for i, cell in enumerate(v.cells):
        v.cells[i] = evaluate(cell)

    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            logger.debug("s-expression reduced to error %r", cell.message)
            return v.take(i)

    if len(v) == 0:
        return v
    if len(v) == 1:
        return v.take(0)

    head = v.pop(0)
    if not isinstance(head, Symbol):
        return make_error(ErrorKind.MALFORMED_EXPRESSION)
    return builtin_op(head.name, v)
