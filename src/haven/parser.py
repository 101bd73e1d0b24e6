"""Haven parser: consumes the token stream and produces a syntax node.

The grammar currently recognizes a single string-literal atom. Parse
failures are fatal to the parse attempt: the first error is reported to the
shared diagnostic list and ``parse`` returns None.
"""

from __future__ import annotations

from haven.ast import Node, StringLiteral
from haven.diagnostics import Color, Diagnostic, DiagnosticKind, Label
from haven.tokens import Token, TokenKind


class ParseError(Exception):
    """Raised inside the parser; carries the diagnostic to report."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        self.diagnostic = diagnostic
        super().__init__(diagnostic.title)


class Parser:
    """Recursive descent parser over a lexed token list."""

    def __init__(self, tokens: list[Token], reports: list[Diagnostic] | None = None) -> None:
        if not tokens:
            raise ValueError("token stream must end with an EOF token")
        self._tokens = tokens
        self._pos = 0
        self.had_error = False
        self.reports: list[Diagnostic] = reports if reports is not None else []

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def current(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.kind != TokenKind.EOF and self._pos + 1 < len(self._tokens):
            self._pos += 1
        return tok

    def _report(self, diagnostic: Diagnostic) -> None:
        self.had_error = True
        self.reports.append(diagnostic)

    def consume(self, kind: TokenKind, message: str) -> Token:
        """Return the current token and advance if it is ``kind``, else raise."""
        tok = self.current
        if tok.kind == kind:
            return self._advance()
        label = Label(tok.span, message, Color.RED)
        if tok.kind == TokenKind.EOF:
            raise ParseError(
                Diagnostic(DiagnosticKind.CUSTOM, tok.span, "Unexpected EOF").with_label(label)
            )
        raise ParseError(
            Diagnostic(DiagnosticKind.UNEXPECTED_TOKEN, tok.span, f"got {tok.kind}").with_label(
                label
            )
        )

    def consume_line_end(self) -> None:
        """Accept a ';' (stepping over it) or end of input."""
        tok = self.current
        if tok.kind == TokenKind.SEMICOLON:
            self._advance()
            return
        if tok.kind == TokenKind.EOF:
            return
        raise ParseError(
            Diagnostic(
                DiagnosticKind.UNEXPECTED_TOKEN,
                tok.span,
                f"Expected end of line but got {tok.kind}",
            ).with_label(Label(tok.span, color=Color.RED))
        )

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def parse(self) -> Node | None:
        try:
            return self.parse_atom()
        except ParseError as exc:
            self._report(exc.diagnostic)
            return None

    def parse_atom(self) -> Node:
        tok = self.current
        if tok.kind == TokenKind.STRING_LITERAL:
            self._advance()
            return StringLiteral(tok.text, tok.span)
        if tok.kind == TokenKind.EOF:
            raise ParseError(Diagnostic(DiagnosticKind.CUSTOM, tok.span, "Unexpected EOF"))
        raise ParseError(
            Diagnostic(DiagnosticKind.UNEXPECTED_TOKEN, tok.span, str(tok.kind)).with_label(
                Label(tok.span, color=Color.RED)
            )
        )


def parse(tokens: list[Token], reports: list[Diagnostic] | None = None) -> Node | None:
    """Convenience function: parse a token list, reporting into ``reports``."""
    return Parser(tokens, reports).parse()
