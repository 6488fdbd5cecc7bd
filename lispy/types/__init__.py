from lispy.types.error_kind import ErrorKind
from lispy.types.value import (
    Value,
    Integer,
    Decimal,
    Error,
    Symbol,
    SExpr,
    make_integer,
    make_decimal,
    make_error,
    make_symbol,
    make_sexpr,
    is_number,
)
