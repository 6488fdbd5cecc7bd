class LispyError(Exception):
    """ Base class for all Lispy host errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when the input does not match the grammar"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 1, column: int = 1):
        super().__init__(f"{filename}:{line}:{column}: error: {message}")
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column

class LispyReadError(LispyError):
    """ Raised when the reader meets a syntax tree node it cannot translate"""

# Language-level failures (division by zero, mismatched types, ...) are never
# raised: they are Error values, see lispy.types.error_kind.
