"""Haven language front end: lexer, diagnostics, and parser boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from haven.diagnostics import Diagnostic
    from haven.tokens import Token

__version__ = "0.1.0"


def lex(source: str, filename: str = "<input>") -> tuple[list[Token], list[Diagnostic]]:
    """Tokenize source text, returning the tokens and any lexical diagnostics."""
    from haven.lexer import Lexer

    lexer = Lexer(source, filename)
    return lexer.tokenize(), lexer.reports
