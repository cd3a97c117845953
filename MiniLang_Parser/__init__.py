from .AST import *
from .Errors import *
from .Parser import Parser, TokenCursor, parse
from .Printer import AstPrinter, dump
from .Tokenizer import Lexer, Position, Token, tokenize
