from lispy.reader.ast import AstNode
from lispy.reader.parser import lex, TokenStream, Parser
from lispy.reader.reader import read, read_integer, read_decimal
