"""Token kinds, token data structure, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from haven.span import Span


class TokenKind(Enum):
    # Punctuation
    PERIOD = "Period"  # .
    SLASH = "Slash"  # /
    EQUALS = "Equals"  # =
    SEMICOLON = "SemiColon"  # ;

    # Keywords
    LET = "Let"

    # Literals
    IDENTIFIER = "Identifier"
    STRING_LITERAL = "StringLiteral"
    INTEGER_LITERAL_BIN = "IntegerLiteralBin"  # 0b...
    INTEGER_LITERAL_OCT = "IntegerLiteralOct"  # 0o...
    INTEGER_LITERAL_HEX = "IntegerLiteralHex"  # 0x...
    INTEGER_LITERAL_DEC = "IntegerLiteralDec"
    FLOAT_LITERAL = "FloatLiteral"

    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexical unit.

    ``text`` is the matched source text, except that numeric literals drop
    their base prefix and ``_`` digit separators. ``newline_before`` is
    reserved for statement-terminator inference and is never set by the
    lexer yet.
    """

    kind: TokenKind
    span: Span
    text: str
    newline_before: bool = False

    def __str__(self) -> str:
        nl = ", nl=True" if self.newline_before else ""
        return f"Token{{{self.kind}, {self.span}, {self.text!r}{nl}}}"


_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")


def is_ident_start(ch: str) -> bool:
    """Return True if ch can start an identifier or keyword."""
    return ch in _ASCII_LETTERS or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier or keyword."""
    return ch in _ASCII_LETTERS or ch in _ASCII_DIGITS or ch == "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _ASCII_DIGITS


def is_alnum(ch: str) -> bool:
    """Return True if ch is an ASCII letter or digit."""
    return ch in _ASCII_LETTERS or ch in _ASCII_DIGITS
