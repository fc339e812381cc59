"""Monkey scanner: converts source text into tokens, one per request."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from monkeylex.errors import IllegalCharacterError
from monkeylex.tokens import (
    Token,
    TokenType,
    is_digit,
    is_letter,
    is_whitespace,
    locate,
    lookup_ident,
)

# Past-end-of-input marker; never equal to a real character
_SENTINEL = ""

_SINGLE_CHAR: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


@runtime_checkable
class Lexer(Protocol):
    """Anything a parser can pull tokens from."""

    def next_token(self) -> Token: ...


class Scanner:
    """Scan Monkey source text, producing one token per next_token() call.

    The scanner owns a cursor over the input and mutates it in place. It is
    not thread-safe; one scanner belongs to one caller loop.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0  # offset of the current character
        self._read_position = 0  # offset of the next unread character
        self._ch = _SENTINEL
        self._token_start = 0
        self._read_char()

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def read_position(self) -> int:
        return self._read_position

    @property
    def current(self) -> str:
        """The character under the cursor, or "" once input is exhausted."""
        return self._ch

    @property
    def token_start(self) -> int:
        """Offset where the most recently returned token begins."""
        return self._token_start

    def next_token(self) -> Token:
        """Classify and return the next token, advancing past it."""
        self._skip_whitespace()
        self._token_start = self._position
        ch = self._ch

        if ch == "=":
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(TokenType.EQ, "==")
            else:
                tok = Token(TokenType.ASSIGN, "=")
        elif ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(TokenType.NOT_EQ, "!=")
            else:
                tok = Token(TokenType.BANG, "!")
        elif ch in _SINGLE_CHAR:
            tok = Token(_SINGLE_CHAR[ch], ch)
        elif ch == _SENTINEL:
            return Token(TokenType.EOF, "")
        elif is_letter(ch):
            text = self._read_identifier()
            return Token(lookup_ident(text), text)
        elif is_digit(ch):
            return Token(TokenType.INT, self._read_number())
        else:
            tok = Token(TokenType.ILLEGAL, ch)

        self._read_char()
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._read_position >= len(self._source):
            self._ch = _SENTINEL
        else:
            self._ch = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        if self._read_position >= len(self._source):
            return _SENTINEL
        return self._source[self._read_position]

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    def _read_identifier(self) -> str:
        start = self._position
        while is_letter(self._ch):
            self._read_char()
        return self._source[start : self._position]

    def _read_number(self) -> str:
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        return self._source[start : self._position]


def tokenize(source: str) -> list[Token]:
    """Convenience function: scan source text and return the token list, EOF included."""
    return list(Scanner(source))


def scan(source: str) -> tuple[list[Token], list[IllegalCharacterError]]:
    """Scan source once, returning the token list and one diagnostic per illegal character."""
    scanner = Scanner(source)
    tokens: list[Token] = []
    errors: list[IllegalCharacterError] = []
    for tok in scanner:
        tokens.append(tok)
        if tok.kind == TokenType.ILLEGAL:
            pos = locate(source, scanner.token_start)
            errors.append(IllegalCharacterError(f"illegal character {tok.text!r}", pos, source))
    return tokens, errors


def check(source: str) -> list[IllegalCharacterError]:
    """Return one diagnostic per illegal character in source, in source order."""
    return scan(source)[1]
