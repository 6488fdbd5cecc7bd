from __future__ import annotations

import logging

from lispy.errors import LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.printer import to_str
from lispy.reader.ast import AstNode, count_nodes
from lispy.reader.parser import Parser
from lispy.reader.reader import read
from lispy.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing, reading, reducing and printing Lispy input.
    Holds the parser only: every call builds, reduces and drops its own
    value tree, so nothing carries over between inputs.
    """

    def __init__(self, parser: Parser | None = None):
        self.parser = parser or Parser()

    def parse(self, source: str) -> AstNode:
        return self.parser.parse(source)

    def read(self, source: str) -> Value:
        return read(self.parse(source))

    def eval(self, source: str) -> Value:
        return self.eval_tree(self.parse(source))

    def eval_tree(self, tree: AstNode) -> Value:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parsed %d syntax node(s)", count_nodes(tree))
        return evaluate(read(tree))

    def rep(self, source: str) -> str:
        return to_str(self.eval(source))

    def nesting_error(self) -> str:
        """Line to print when input nests deeper than the interpreter stack allows."""
        return str(LispySyntaxError("expression nested too deeply", self.parser.filename))

    def parse_and_interpret(self, source: str) -> str:
        """Like rep(), but a syntax error becomes the line to print."""
        try:
            return self.rep(source)
        except LispySyntaxError as ex:
            return str(ex)
        except RecursionError:
            return self.nesting_error()
