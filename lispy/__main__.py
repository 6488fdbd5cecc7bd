#!/usr/bin/env python3
"""
Command line entry point for Lispy.

Usage:
    python -m lispy                      # interactive shell
    python -m lispy -e "(+ 2 3)"         # evaluate and print, no shell
    python -m lispy --dump-ast           # shell, print each syntax tree first

Environment:
    LISPY_PROMPT        shell prompt (default "lispy> ")
    LISPY_HISTORY_FILE  readline history file, empty to disable
    LISPY_LOG_LEVEL     logging level for diagnostics on stderr
"""

import argparse
import logging
import sys

from lispy import __version__
from lispy.config import get_history_file, get_log_level, get_prompt
from lispy.interpreter import Interpreter
from lispy.reader.parser import Parser
from lispy.repl import Repl, display_greeting, setup_history


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m lispy',
        description='Lispy prefix-notation arithmetic evaluator',
    )
    parser.add_argument('--version', action='version', version=f'lispy {__version__}')
    parser.add_argument('-e', '--eval', action='append', metavar='EXPR', dest='exprs',
                        help='Evaluate EXPR, print the result and exit (can be repeated)')
    parser.add_argument('--no-banner', action='store_true',
                        help='Do not print the greeting when starting the shell')
    parser.add_argument('--dump-ast', action='store_true',
                        help='Print the syntax tree of each line before evaluating it')
    parser.add_argument('--log-level', metavar='LEVEL',
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    return parser


def main(argv=None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    try:
        level = get_log_level(args.log_level)
    except ValueError as e:
        arg_parser.error(str(e))
    logging.basicConfig(level=level, stream=sys.stderr,
                        format='%(levelname)s %(name)s: %(message)s')

    interp = Interpreter(Parser())

    if args.exprs:
        for expr in args.exprs:
            print(interp.parse_and_interpret(expr))
        return 0

    if not args.no_banner:
        display_greeting(sys.stdout)
    setup_history(get_history_file())
    return Repl(interp, prompt=get_prompt(), dump_ast=args.dump_ast).run()


if __name__ == '__main__':
    sys.exit(main())
