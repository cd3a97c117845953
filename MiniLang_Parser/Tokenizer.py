import logging
from dataclasses import dataclass
from typing import NamedTuple

import ply.lex as lex
from ply.lex import TOKEN

from .Errors import (
    InvalidEscapeError,
    InvalidTokenError,
    UnknownCharacterError,
    UnterminatedStringError,
)

logger = logging.getLogger(__name__)

keywords = ('var', 'void', 'if', 'else', 'return')

tokens = [
   'KEYWORD',
   'IDENTIFIER',
   'OPERATION',
   'COMPARISON',
   'ASSIGN',
   'SPECIAL',
   'STRING',
   'INT',
]

escapes = {
   '\\' : '\\',
   '"'  : '"',
   'n'  : '\n',
   'r'  : '\r',
   't'  : '\t',
   'b'  : '\b',
   '$'  : '$',
}


class Position(NamedTuple):
    line: int
    column: int


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    position: Position


# String rules are tried after the function rules, longest pattern first,
# so '==' wins over '=' and '<=' over '<'.
t_COMPARISON = r'==|!=|<=|>='
t_OPERATION = r'[-+*/%<>]'
t_SPECIAL = r'[,{}();]'
t_ASSIGN = r'='

t_ignore = ' \t\r'

# whole word only, so "iffy" and "if$x" stay identifiers
keyword = r'(?:' + '|'.join(keywords) + r')(?![A-Za-z0-9_$])'


@TOKEN(keyword)
def t_KEYWORD(t):
    return t

def t_IDENTIFIER(t):
    r'[A-Za-z_$][A-Za-z0-9_$]*'
    return t

def t_INT(t):
    r'-?[0-9]+'
    return t

def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)
    t.lexer.line_start = t.lexpos + len(t.value)

def t_STRING(t):
    r'"(?:\\(?:.|\n)|[^"\\])*"'
    t.value = unescape(t)
    return t

def t_error(t):
    line = t.lexer.lineno
    column = find_column(t.lexer, t.lexpos)
    char = t.value[0]
    if char == '!':
        raise UnknownCharacterError(char, line, column)
    if char == '"':
        check_unterminated_string(t)
    raise InvalidTokenError(char, line, column)


def find_column(lexer, lexpos):
    # a newline inside a string literal does not start a new line
    return (lexpos - lexer.line_start) + 1


def check_escape(lexer, symbol, lexpos):
    if symbol not in escapes:
        raise InvalidEscapeError(symbol, lexer.lineno, find_column(lexer, lexpos))


def check_unterminated_string(t):
    # no closing quote follows; a bad escape on the way is still reported first
    data = t.lexer.lexdata
    i = t.lexpos + 1
    while i < len(data):
        if data[i] == '\\' and i + 1 < len(data):
            i += 1
            check_escape(t.lexer, data[i], i)
        i += 1
    raise UnterminatedStringError(t.lexer.lineno, find_column(t.lexer, t.lexpos))


def unescape(t):
    raw = t.value
    chars = ['"']
    i = 1
    while i < len(raw) - 1:
        char = raw[i]
        if char == '\\':
            i += 1
            symbol = raw[i]
            check_escape(t.lexer, symbol, t.lexpos + i)
            char = escapes[symbol]
        chars.append(char)
        i += 1
    chars.append('"')
    return ''.join(chars)


_master = lex.lex(errorlog=logger)


class Lexer:
    """Lazy token stream over a complete source string.

    Every call to ``iter()`` starts again from the beginning of the source.
    """

    def __init__(self, source):
        self.source = source

    def __iter__(self):
        lexer = _master.clone()
        lexer.lineno = 1
        lexer.line_start = 0
        lexer.input(self.source)
        for tok in lexer:
            yield Token(tok.type, tok.value, Position(tok.lineno, find_column(lexer, tok.lexpos)))


def tokenize(source):
    return list(Lexer(source))
