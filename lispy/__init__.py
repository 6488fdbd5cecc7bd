# Core type aliases for the Lispy data model.
# Runtime values are the five variant classes in lispy.types.value; the Reader
# builds them from the parser's AstNode tree and the Reducer rewrites them.
#
# Naming guidance:
# - AstNode: syntax tree produced by lispy.reader.parser (tag + contents + children).
# - Value:   runtime value, one of Integer, Decimal, Error, Symbol, SExpr.

from lispy.types.value import Value, Integer, Decimal, Error, Symbol, SExpr

__version__ = "0.8.0"

__all__ = [
    "Value",
    "Integer",
    "Decimal",
    "Error",
    "Symbol",
    "SExpr",
    "__version__",
]
