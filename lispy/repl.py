"""
Interactive shell for Lispy.

Reads one line at a time, evaluates it, and writes exactly one output line:
the rendered value, the rendered error value, or the syntax error. A bad
line never ends the session; `exit`, `quit` or end-of-input does.
"""

from __future__ import annotations

import atexit
import logging
import platform
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from lispy import __version__
from lispy.config import EXIT_COMMANDS
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import to_str

try:
    import readline
except ImportError:  # e.g. Windows: no line editing or history
    readline = None


logger = logging.getLogger(__name__)


def display_greeting(out: TextIO) -> None:
    out.write(f"lispy version: {__version__}\n")
    out.write(f"Python: {platform.python_version()}\n")
    out.write("Type 'exit' or press Ctrl-D to quit\n")


def setup_history(path: Optional[Path]) -> None:
    if readline is None or path is None:
        return
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass  # first session
    except OSError as ex:
        logger.warning("Cannot read history file %s: %s", path, ex)
    atexit.register(save_history, path)


def save_history(path: Path) -> None:
    try:
        readline.write_history_file(path)
    except OSError as ex:
        logger.warning("Cannot write history file %s: %s", path, ex)


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        *,
        prompt: str = "lispy> ",
        out: TextIO | None = None,
        input_fn: Callable[[str], str] = input,
        dump_ast: bool = False,
    ):
        self.interp = interpreter or Interpreter()
        self.prompt = prompt
        self.out = out or sys.stdout
        self.input_fn = input_fn
        self.dump_ast = dump_ast

    def interpret_line(self, line: str) -> str:
        try:
            tree = self.interp.parse(line)
            if self.dump_ast:
                self.out.write(tree.pretty() + "\n")
            return to_str(self.interp.eval_tree(tree))
        except LispySyntaxError as ex:
            return str(ex)
        except RecursionError:
            return self.interp.nesting_error()

    def run(self) -> int:
        while True:
            try:
                line = self.input_fn(self.prompt)
            except EOFError:
                self.out.write("\n")
                return 0
            except KeyboardInterrupt:
                self.out.write("\n")
                continue

            line = line.strip()
            if not line:
                continue
            if line in EXIT_COMMANDS:
                return 0
            self.out.write(self.interpret_line(line) + "\n")
