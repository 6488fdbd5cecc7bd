"""Runtime values for Lispy.

A Value is exactly one of five variants:

    - Integer  -> exact whole number in the signed 64-bit range
    - Decimal  -> approximate real number (Python float)
    - Error    -> terminal diagnostic, only ever propagated and printed
    - Symbol   -> operator name / identifier token
    - SExpr    -> ordered sequence of child values

SExpr children are owned by exactly one parent: the Reader appends freshly
built values and the Reducer pops or takes them out, so the tree never shares
a node between two sequences. Dropping a parent releases its children.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Union

from lispy.types.error_kind import ErrorKind

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def fits_int64(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


class Integer:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Integer) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Integer, self.value))

    def __repr__(self):
        return f"Integer({self.value!r})"


class Decimal:
    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Decimal) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Decimal, self.value))

    def __repr__(self):
        return f"Decimal({self.value!r})"


class Error:
    __slots__ = ("message",)

    def __init__(self, message: str | ErrorKind):
        self.message = str(message)

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash((Error, self.message))

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return self.message


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Interned: operator names are compared on every dispatch
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SExpr:
    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[Value] = ()):
        self.cells: list[Value] = list(cells)

    def add(self, value: Value) -> SExpr:
        """Append `value` as the last child and return self (for chaining)."""
        self.cells.append(value)
        return self

    def pop(self, i: int = 0) -> Value:
        """Remove the child at `i` and hand it to the caller."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Keep the child at `i`, release every other child."""
        value = self.cells[i]
        self.cells.clear()
        return value

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __eq__(self, other) -> bool:
        return isinstance(other, SExpr) and self.cells == other.cells

    __hash__ = None  # mutable

    def __repr__(self):
        return f"SExpr({self.cells!r})"


Value = Union[Integer, Decimal, Error, Symbol, SExpr]

NUMBER_TYPES = (Integer, Decimal)


def is_number(value: Value) -> bool:
    return isinstance(value, NUMBER_TYPES)


# -------------------------------
# Constructors
# -------------------------------
def make_integer(n: int) -> Integer:
    return Integer(n)


def make_decimal(x: float) -> Decimal:
    return Decimal(x)


def make_error(message: str | ErrorKind) -> Error:
    return Error(message)


def make_symbol(name: str) -> Symbol:
    return Symbol(name)


def make_sexpr(cells: Iterable[Value] = ()) -> SExpr:
    return SExpr(cells)
