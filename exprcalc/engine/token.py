"""Tokens produced by the lexer. A token is just its kind and the literal text it was built from."""

from dataclasses import dataclass, field
from enum import Enum


class TokenType(Enum):
    """Kinds of tokens. Each value is the string used to refer to the kind in error messages."""
    PLUS = "+"
    MINUS = "-"
    DIVIDE = "/"
    MULTIPLY = "*"
    MODULO = "%"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    NUMBER = "number"
    TEXT = "text"
    FUNCTION = "function"
    COMMA = ","
    END = "end of expression"


OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
}

PUNCTUATION = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    ",": TokenType.COMMA,
}


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: str
    position: int = field(default=0, compare=False)  # only used for error messages

    def __repr__(self):
        return f"Token({self.kind.name}, '{self.text}')"
