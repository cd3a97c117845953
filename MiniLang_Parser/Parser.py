import logging
import re

from .AST import *
from .Errors import (
    ExpectedStatementError,
    ParserError,
    ParserSyntaxError,
    UnexpectedEOFError,
    UnexpectedTokenAfterIdentifierError,
)
from .Printer import dump
from .Tokenizer import Lexer

logger = logging.getLogger(__name__)

EQUALITY_OPS = ('==', '!=', '>=', '<=')
COMPARISON_OR_ASSIGN_OPS = ('<', '>', '=')
ADD_SUB_OPS = ('+', '-')
MUL_DIV_MOD_OPS = ('*', '/', '%')

INT_LITERAL = re.compile(r'-?[0-9]+')


class TokenCursor:
    """Two-token window over a token stream.

    A cursor never changes once built. ``advance`` pulls the next token the
    first time it is called and hands back the same successor afterwards.
    """

    def __init__(self, current_token, next_token, stream):
        self.current_token = current_token
        self.next_token = next_token
        self._stream = stream
        self._successor = None

    def __repr__(self):
        return f"TokenCursor({self.current_token!r}, {self.next_token!r})"

    @classmethod
    def start(cls, tokens):
        stream = iter(tokens)
        current_token = next(stream, None)
        return cls(current_token, next(stream, None), stream)

    def advance(self):
        if self._successor is None:
            self._successor = TokenCursor(self.next_token, next(self._stream, None), self._stream)
        return self._successor


class Parser:
    def __init__(self, source):
        tokens = Lexer(source) if isinstance(source, str) else source
        self.cursor = TokenCursor.start(tokens)
        self.program = None

    @property
    def current(self):
        return self.cursor.current_token

    @property
    def next(self):
        return self.cursor.next_token

    def advance(self):
        self.cursor = self.cursor.advance()

    def at(self, text):
        return self.current is not None and self.current.text == text

    def accept(self, target):
        if not self.at(target):
            raise ParserSyntaxError(target, self.current)
        self.advance()

    def expect_identifier(self):
        tok = self.current
        if tok is None or tok.kind != 'IDENTIFIER':
            raise ParserSyntaxError('identifier', tok)
        self.advance()
        return Identifier(tok.text)

    def parse(self):
        self.program = self.parse_program()
        return self.program

    def to_string(self):
        if self.program is None:
            raise ParserError("Program wasn't parsed")
        return dump(self.program)

    # ---------- TOP LEVEL ----------
    def parse_program(self):
        items = []
        while self.current is not None:
            # 'int' lexes as an identifier, so type tags are matched by text here
            if self.current.text in ('void', 'int'):
                item = self.parse_function_declaration()
            elif self.current.text == 'if':
                item = self.parse_if_statement()
            elif self.current.text == '{':
                item = self.parse_block()
            else:
                item = self.parse_sentence()
                if item is None:
                    continue
            logger.debug("parsed top-level %s", type(item).__name__)
            items.append(item)
        if self.current is not None:
            raise UnexpectedEOFError(self.current)
        return Program(tuple(items))

    # ---------- STATEMENTS ----------
    def parse_block(self):
        self.accept('{')
        statements = []
        while self.current is not None and not self.at('}'):
            if self.at(';'):
                self.advance()
            elif self.at('{'):
                statements.append(self.parse_block())
            else:
                statements.append(self.parse_sentence())
        self.accept('}')
        return Block(tuple(statements))

    def parse_sentence(self):
        """Parse one statement, or return None when there is nothing to parse.

        None means the caller sits on a '{' (and must parse the block itself)
        or only statement separators were left before the end of input.
        """
        while self.at(';'):
            self.advance()
        tok = self.current
        if tok is None or tok.text == '{':
            return None
        if tok.kind == 'KEYWORD':
            if tok.text == 'return':
                return self.parse_return_statement()
            if tok.text == 'if':
                return self.parse_if_statement()
            # any other keyword is taken as a type tag
            return self.parse_function_declaration()
        if tok.kind == 'IDENTIFIER':
            return self.parse_statement_start_with_identifier()
        raise ExpectedStatementError(tok)

    def parse_statement_start_with_identifier(self):
        target = Identifier(self.current.text)
        following = self.next
        if following is not None and following.kind == 'ASSIGN':
            self.advance()
            return self.parse_assignment(target)
        if following is not None and following.kind == 'OPERATION':
            return self.parse_expression()
        if following is not None and following.text == '(':
            return self.parse_func_call()
        raise UnexpectedTokenAfterIdentifierError(following)

    def parse_assignment(self, target):
        if self.current is None or self.current.kind != 'ASSIGN':
            raise ParserSyntaxError('=', self.current)
        self.advance()
        if self.next is not None and self.next.text == '(':
            return Assignment(target, self.parse_func_call())
        return Assignment(target, self.parse_expression())

    def parse_if_statement(self):
        self.accept('if')
        self.accept('(')
        condition = self.parse_expression()
        self.accept(')')
        then_block = self.parse_block()
        else_block = None
        if self.at('else'):
            self.advance()
            else_block = self.parse_block()
        return IfStatement(condition, then_block, else_block)

    def parse_function_declaration(self):
        return_type = self.current.text
        self.advance()
        name = self.expect_identifier()
        self.accept('(')
        params = []
        if not self.at(')'):
            params.append(self.expect_identifier())
            while self.at(','):
                self.advance()
                params.append(self.expect_identifier())
        self.accept(')')
        body = self.parse_block()
        return FuncDeclaration(return_type, name, tuple(params), body)

    def parse_return_statement(self):
        self.accept('return')
        expression = self.parse_expression()
        self.accept(';')
        return ReturnStatement(expression)

    def parse_func_call(self):
        name = self.expect_identifier()
        self.accept('(')
        args = []
        if not self.at(')'):
            args.append(self.parse_expression())
            while self.at(','):
                self.advance()
                args.append(self.parse_expression())
        self.accept(')')
        return FuncCall(name, tuple(args))

    # =============== EXPRESSION GRAMMAR ===============
    # Loosest first. '<', '>' and a bare '=' share a level below the
    # equality operators and above '+'/'-'.
    def parse_expression(self):
        return self.parse_equality_expr()

    def parse_equality_expr(self):
        return self.parse_binary_operation(EQUALITY_OPS, self.parse_comparison_or_assign_expr)

    def parse_comparison_or_assign_expr(self):
        return self.parse_binary_operation(COMPARISON_OR_ASSIGN_OPS, self.parse_add_sub_expr)

    def parse_add_sub_expr(self):
        return self.parse_binary_operation(ADD_SUB_OPS, self.parse_mul_div_mod_expr)

    def parse_mul_div_mod_expr(self):
        return self.parse_binary_operation(MUL_DIV_MOD_OPS, self.parse_primary_expr)

    def parse_binary_operation(self, operators, parse_operand):
        left = parse_operand()
        while self.current is not None and self.current.text in operators:
            op = self.current.text
            self.advance()
            left = BinaryOp(left, op, parse_operand())
        return left

    def parse_primary_expr(self):
        tok = self.current
        if tok is None:
            raise ParserSyntaxError('expression', tok)
        if tok.text == '(':
            self.advance()
            expr = self.parse_expression()
            self.accept(')')
            return expr
        self.advance()
        if INT_LITERAL.fullmatch(tok.text):
            return IntLiteral(int(tok.text))
        if tok.kind == 'IDENTIFIER':
            return Identifier(tok.text)
        return StringLiteral(tok.text)
    # =============== END EXPRESSION GRAMMAR ===============


def parse(source):
    return Parser(source).parse()
