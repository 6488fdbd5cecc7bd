from __future__ import annotations

import sys
from typing import TextIO

from lispy.types.value import Decimal, Error, Integer, SExpr, Symbol, Value

DECIMAL_FORMAT = "{:.6f}"


def expr_to_str(v: SExpr, open: str = "(", close: str = ")") -> str:
    """Children space separated inside the bracket pair."""
    return open + " ".join(to_str(cell, open, close) for cell in v) + close


def to_str(value: Value, open: str = "(", close: str = ")") -> str:
    match value:
        case Integer():
            return str(value.value)
        case Decimal():
            return DECIMAL_FORMAT.format(value.value)
        case Error():
            return f"error: {value.message}"
        case Symbol():
            return value.name
        case SExpr():
            return expr_to_str(value, open, close)
    raise TypeError(f"Cannot print {value!r}")


def print_value(value: Value, file: TextIO | None = None) -> None:
    (file or sys.stdout).write(to_str(value))


def println_value(value: Value, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    out.write(to_str(value))
    out.write("\n")
