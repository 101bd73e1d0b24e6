"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from haven.diagnostics import Diagnostic
from haven.lexer import Lexer
from haven.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = Lexer(source, "test.hv").tokenize()
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


@pytest.fixture
def lex_reports():
    """Return a helper that tokenizes source and returns (tokens without EOF, diagnostics)."""

    def _lex(source: str) -> tuple[list[Token], list[Diagnostic]]:
        lexer = Lexer(source, "test.hv")
        tokens = lexer.tokenize()
        return [t for t in tokens if t.kind != TokenKind.EOF], lexer.reports

    return _lex


@pytest.fixture
def kinds():
    """Return a helper that maps a token list to its kinds."""

    def _kinds(tokens: list[Token]) -> list[TokenKind]:
        return [t.kind for t in tokens]

    return _kinds
