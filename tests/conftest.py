import pytest

from lispy.interpreter import Interpreter
from lispy.reader.parser import Parser


@pytest.fixture
def parser():
    return Parser()


@pytest.fixture
def interp(parser):
    """Interpreter sharing one parser, the way the shell builds it."""
    return Interpreter(parser)
