class MiniLangError(Exception):
    pass


# -------- LEXER ERRORS --------
class LexerError(MiniLangError):
    def __init__(self, message, line, column):
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, col {column}")


class UnterminatedStringError(LexerError):
    def __init__(self, line, column):
        super().__init__("Unterminated string literal", line, column)


class InvalidEscapeError(LexerError):
    def __init__(self, symbol, line, column):
        self.symbol = symbol
        super().__init__(f"Incorrect escaped symbol: \\{symbol}", line, column)


class UnknownCharacterError(LexerError):
    def __init__(self, character, line, column):
        self.character = character
        super().__init__(f"Unknown character '{character}'", line, column)


class InvalidTokenError(LexerError):
    def __init__(self, character, line, column):
        self.character = character
        super().__init__(f"Incorrect token '{character}'", line, column)


# -------- PARSER ERRORS --------
class ParserError(MiniLangError):
    def __init__(self, message, token=None):
        self.token = token
        super().__init__(message)


def _text_or_null(token):
    return token.text if token is not None else "null"


class ParserSyntaxError(ParserError):
    """Raised when the current token does not match the expected literal."""

    def __init__(self, expected, token):
        self.expected = expected
        self.found = _text_or_null(token)
        super().__init__(f"Incorrect syntax: expected {expected}, found: {self.found}", token)


class UnexpectedEOFError(ParserError):
    def __init__(self, token):
        super().__init__(f"Unexpected token: {token.kind}. Expected EOF.", token)


class ExpectedStatementError(ParserError):
    def __init__(self, token):
        got = token.kind if token is not None else "null"
        super().__init__(f"Expected identifier for sentence but got {got}", token)


class UnexpectedTokenAfterIdentifierError(ParserError):
    def __init__(self, token):
        super().__init__(f"Unexpected token {_text_or_null(token)} after identifier.", token)
