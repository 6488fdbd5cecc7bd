from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Diagnostic messages carried by Error values."""

    INVALID_NUMBER = "invalid number"
    MISMATCHED_TYPES = "mismatched types"
    NON_NUMBER = "cannot operate on non-number"
    DIVISION_BY_ZERO = "division by zero"
    INCOMPATIBLE_OPERATOR = "incompatible type for operator"
    MALFORMED_EXPRESSION = "s-expression does not start with symbol"
    INVALID_OPERATOR = "invalid operator"
    INTEGER_OVERFLOW = "integer overflow"
    MISSING_ARGUMENT = "operator requires an argument"

    def __str__(self):
        return self.value
