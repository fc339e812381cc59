"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers and literals
    IDENT = auto()  # letters and underscores only
    INT = auto()  # ASCII digit run

    # Operators
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    BANG = auto()  # !
    EQ = auto()  # ==
    NOT_EQ = auto()  # !=
    LT = auto()  # <
    GT = auto()  # >

    # Delimiters
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Keywords (only produced by lookup_ident)
    FUNCTION = auto()  # fn
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token: its kind and the exact source text."""

    kind: TokenType
    text: str


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(text: str) -> TokenType:
    """Return the keyword kind for text, or IDENT."""
    return KEYWORDS.get(text, TokenType.IDENT)


def is_letter(ch: str) -> bool:
    """Return True if ch is an ASCII letter or underscore."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    return ch in (" ", "\t", "\n", "\r")


def locate(source: str, offset: int) -> Position:
    """Convert a 0-based offset into a line/column Position."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)
