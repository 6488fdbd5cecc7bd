"""
  Lispy Lexer and Parser

Grammar (ordered choice, first match wins):

    decimal : /-?[0-9]+\\.[0-9]+/
    integer : /-?[0-9]+/
    symbol  : '+' | '-' | '*' | '/' | '%'
    sexpr   : '(' <expr>* ')'
    expr    : <decimal> | <integer> | <symbol> | <sexpr>
    root    : /^/ <expr>* /$/

The parser emits an AstNode tree laid out the way combinator-library parsers
print it:

    - root             -> tag ">", first/last child are "regex" anchors
    - integer literal  -> "expr|integer|regex"
    - decimal literal  -> "expr|decimal|regex"
    - operator         -> "expr|symbol|char"
    - ( ... )          -> "expr|sexpr|>", bracket children tagged "char"

Translating that tree into runtime values is the reader's job
(lispy.reader.reader), not the parser's.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError
from lispy.reader.ast import AstNode


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<decimal>-?[0-9]+\.[0-9]+)"  # must be tried before integer
    r"|(?P<integer>-?[0-9]+)"
    r"|(?P<symbol>[-+*/%])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r")"
)

LEAF_TAGS: dict[str, str] = {
    "decimal": "expr|decimal|regex",
    "integer": "expr|integer|regex",
    "symbol": "expr|symbol|char",
}

Token = tuple[str, str, int]


def line_and_column(source: str, pos: int) -> tuple[int, int]:
    """1-based (line, column) of offset `pos` in `source`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            line, column = line_and_column(source, pos)
            raise LispySyntaxError(
                f"unexpected {source[pos]!r}, expected number, operator or '('",
                filename, line, column,
            )
        for name in TOKEN_RE.groupindex:
            if m.group(name) is not None:
                yield name, m.group(name), m.start(name)
                break
        pos = m.end()


class TokenStream:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.tokens = lex(source, filename)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def error(self, message: str, pos: int) -> LispySyntaxError:
        line, column = line_and_column(self.source, pos)
        return LispySyntaxError(message, self.filename, line, column)

    def node(self, tag: str, contents: str, pos: int) -> AstNode:
        line, column = line_and_column(self.source, pos)
        return AstNode(tag, contents, line=line, column=column)

    def parse_expr(self) -> AstNode:
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            raise self.error("unexpected end of input, expected expression", pos)

        if tok_type in LEAF_TAGS:
            self.advance()
            return self.node(LEAF_TAGS[tok_type], tok_val, pos)

        if tok_type == "lparen":
            self.advance()
            sexpr = self.node("expr|sexpr|>", "", pos)
            sexpr.children.append(self.node("char", "(", pos))
            while True:
                next_type, _, next_pos = self.peek()
                if next_type is None:
                    raise self.error("unmatched '('", pos)
                if next_type == "rparen":
                    self.advance()
                    sexpr.children.append(self.node("char", ")", next_pos))
                    return sexpr
                sexpr.children.append(self.parse_expr())

        raise self.error(f"unexpected {tok_val!r}", pos)

    def parse_all(self) -> Iterator[AstNode]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


class Parser:
    """Parses one line of Lispy source into a root AstNode.

    Build one per process and hand it to the Interpreter.
    """

    def __init__(self, filename: str = "<stdin>"):
        self.filename = filename

    def parse(self, source: str, filename: str | None = None) -> AstNode:
        stream = TokenStream(source, filename or self.filename)
        root = AstNode(">", "")
        root.children.append(stream.node("regex", "", 0))
        root.children.extend(stream.parse_all())
        root.children.append(stream.node("regex", "", len(source)))
        return root
