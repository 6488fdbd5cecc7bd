from __future__ import annotations

import logging
from typing import Callable, Iterable

from lispy.types.error_kind import ErrorKind
from lispy.types.value import (
    Decimal,
    Error,
    Integer,
    Value,
    fits_int64,
    is_number,
    make_decimal,
    make_error,
    make_integer,
)

logger = logging.getLogger(__name__)

# Each binary operator receives two numbers of the same kind; mixed kinds are
# rejected by the fold in builtin_op before the operator is called.
BinaryOp = Callable[[Value, Value], Value]


# -------------------------------
# Integer helpers (signed 64-bit semantics)
# -------------------------------
def int_result(n: int) -> Value:
    if not fits_int64(n):
        return make_error(ErrorKind.INTEGER_OVERFLOW)
    return make_integer(n)

def trunc_div(a: int, b: int) -> int:
    """Quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q

def trunc_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * trunc_div(a, b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(x: Value, y: Value) -> Value:
    if isinstance(x, Integer):
        return int_result(x.value + y.value)
    return make_decimal(x.value + y.value)

def sub(x: Value, y: Value) -> Value:
    if isinstance(x, Integer):
        return int_result(x.value - y.value)
    return make_decimal(x.value - y.value)

def mul(x: Value, y: Value) -> Value:
    if isinstance(x, Integer):
        return int_result(x.value * y.value)
    return make_decimal(x.value * y.value)

def div(x: Value, y: Value) -> Value:
    if y.value == 0:
        return make_error(ErrorKind.DIVISION_BY_ZERO)
    if isinstance(x, Integer):
        return int_result(trunc_div(x.value, y.value))
    return make_decimal(x.value / y.value)

def mod(x: Value, y: Value) -> Value:
    # Undefined over decimals whatever the operand values
    if isinstance(x, Decimal):
        return make_error(ErrorKind.INCOMPATIBLE_OPERATOR)
    if y.value == 0:
        return make_error(ErrorKind.DIVISION_BY_ZERO)
    return int_result(trunc_mod(x.value, y.value))

def negate(x: Value) -> Value:
    if isinstance(x, Integer):
        return int_result(-x.value)
    return make_decimal(-x.value)


OPERATORS: dict[str, BinaryOp] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
}


def builtin_op(op: str, args: Iterable[Value]) -> Value:
    """Apply the arithmetic operator `op` to already reduced `args`.

    Arguments are consumed front to back into an accumulator; the first
    Error produced stops the fold and is returned as the result.
    """
    args = list(args)
    logger.debug("builtin_op %r over %d argument(s)", op, len(args))

    for arg in args:
        if isinstance(arg, Error):
            return arg
    if not all(is_number(arg) for arg in args):
        return make_error(ErrorKind.NON_NUMBER)

    fn = OPERATORS.get(op)
    if fn is None:
        return make_error(ErrorKind.INVALID_OPERATOR)
    if not args:
        return make_error(ErrorKind.MISSING_ARGUMENT)

    if op == "-" and len(args) == 1:
        return negate(args[0])

    it = iter(args)
    acc = next(it)
    for y in it:
        if type(acc) is not type(y):
            return make_error(ErrorKind.MISMATCHED_TYPES)
        acc = fn(acc, y)
        if isinstance(acc, Error):
            return acc
    return acc
