from dataclasses import dataclass

from yaliir.tokens import Token, TokenType


@dataclass(frozen=True)
class Diagnostic:
    """A lexical or syntax error reported at a source line."""
    line: int
    where: str
    message: str

    @staticmethod
    def at_token(token: Token, message: str) -> 'Diagnostic':
        if token.type == TokenType.EOF:
            return Diagnostic(token.line, ' at end', message)
        return Diagnostic(token.line, f" at '{token.lexeme}'", message)

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ParseError(Exception):
    """Internal exception used to unwind the parser to a statement boundary."""


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message

    @property
    def line(self) -> int:
        return self.token.line

    def __str__(self) -> str:
        return f"{self.message}\n[line {self.token.line}]"


class UnsupportedFeatureError(LoxRuntimeError):
    """Raised when evaluation reaches a parsed but unimplemented construct."""
    def __init__(self, token: Token, feature: str):
        super().__init__(token, f"{feature} is not supported.")
        self.feature = feature
