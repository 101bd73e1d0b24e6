"""Haven lexer: converts source text into a token stream plus diagnostics."""

from __future__ import annotations

from enum import Enum

from haven.diagnostics import Color, Diagnostic, DiagnosticKind, Label
from haven.span import Span
from haven.tokens import (
    KEYWORDS,
    Token,
    TokenKind,
    is_alnum,
    is_digit,
    is_ident_char,
    is_ident_start,
)


class Base(Enum):
    BIN = ("Binary", "01", TokenKind.INTEGER_LITERAL_BIN)
    OCT = ("Octal", "01234567", TokenKind.INTEGER_LITERAL_OCT)
    DEC = ("Decimal", "0123456789", TokenKind.INTEGER_LITERAL_DEC)
    HEX = ("Hexadecimal", "0123456789abcdef", TokenKind.INTEGER_LITERAL_HEX)

    def __init__(self, title: str, digits: str, kind: TokenKind) -> None:
        self.title = title
        self.digits = frozenset(digits)
        self.kind = kind

    def accepts(self, ch: str) -> bool:
        return ch.lower() in self.digits


_PREFIXES = {"b": Base.BIN, "o": Base.OCT, "x": Base.HEX}


class Lexer:
    """Scan Haven source text into tokens, collecting every lexical error.

    ``reports`` is the diagnostic list shared with later stages; the lexer
    only appends to it. Scanning never stops early: a malformed lexeme is
    reported, dropped, and the main loop carries on.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        reports: list[Diagnostic] | None = None,
    ) -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self.tokens: list[Token] = []
        self.had_error = False
        self.reports: list[Diagnostic] = reports if reports is not None else []

    def tokenize(self) -> list[Token]:
        """Scan the full source and return the token list (always EOF-terminated)."""
        while self._pos < len(self._source):
            self._lex_next()
        self._emit(TokenKind.EOF, "", self._pos)
        return self.tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _span(self, start: int, end: int) -> Span:
        return Span(start, end, self._filename)

    def _span_at(self, index: int) -> Span:
        return Span.at(index, self._filename)

    def _span_from(self, start: int) -> Span:
        return Span(start, self._pos, self._filename)

    def _emit(self, kind: TokenKind, text: str, start: int, span: Span | None = None) -> Token:
        tok = Token(kind, span if span is not None else self._span_from(start), text)
        self.tokens.append(tok)
        return tok

    def _emit_simple(self, kind: TokenKind, length: int = 1) -> None:
        start = self._pos
        for _ in range(length):
            self._advance()
        self._emit(kind, self._source[start : self._pos], start)

    def _report(self, diagnostic: Diagnostic) -> None:
        self.reports.append(diagnostic)
        self.had_error = True

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()

        if ch.isspace():
            self._advance()
            return

        if is_ident_start(ch):
            self._lex_identifier()
            return

        if ch == "0" and self._peek(1) in _PREFIXES:
            self._lex_based_integer()
            return

        if is_digit(ch):
            self._lex_decimal()
            return

        if ch == ".":
            if is_digit(self._peek(1)):
                self._lex_fraction_only()
            else:
                self._emit_simple(TokenKind.PERIOD)
            return

        if ch == "/":
            if self._peek(1) == "/":
                self._skip_line_comment()
            elif self._peek(1) == "*":
                self._skip_block_comment()
            else:
                self._emit_simple(TokenKind.SLASH)
            return

        if ch == ";":
            self._emit_simple(TokenKind.SEMICOLON)
            return

        if ch == "=":
            self._emit_simple(TokenKind.EQUALS)
            return

        span = self._span_at(self._pos)
        self._report(
            Diagnostic(DiagnosticKind.UNEXPECTED_CHARACTER, span, repr(ch)).with_label(
                Label(span, "Not a valid character.", Color.RED)
            )
        )
        self._advance()

    # ------------------------------------------------------------------
    # Identifiers and keywords
    # ------------------------------------------------------------------

    def _lex_identifier(self) -> None:
        start = self._pos
        while self._pos < len(self._source) and is_ident_char(self._peek()):
            self._advance()
        text = self._source[start : self._pos]
        # Identifier spans end on the last character, not the cursor
        span = self._span(start, self._pos - 1)
        self._emit(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, start, span)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _lex_based_integer(self) -> None:
        start = self._pos
        base = _PREFIXES[self._peek(1)]
        self._advance()
        self._advance()
        digits = self._lex_integer(base, start)
        if digits is None:
            return
        self._emit(base.kind, digits, start)

    def _lex_decimal(self) -> None:
        start = self._pos
        whole = self._lex_integer(Base.DEC, start)
        if whole is None:
            return
        if self._peek() != ".":
            self._emit(TokenKind.INTEGER_LITERAL_DEC, whole, start)
            return
        self._advance()
        self._lex_fraction(whole + ".", start)

    def _lex_fraction_only(self) -> None:
        start = self._pos
        self._advance()  # consume '.'
        self._lex_fraction(".", start)

    def _lex_fraction(self, prefix: str, start: int) -> None:
        """Scan the digits after a decimal point and emit a float literal."""
        fraction = self._lex_integer(Base.DEC, start)
        if fraction is None:
            return
        if self._peek() == ".":
            self._report(
                Diagnostic(
                    DiagnosticKind.SYNTAX_ERROR, self._span_from(start), "Invalid Float Literal"
                ).with_label(
                    Label(self._span_at(self._pos), "Second fractional indicator", Color.RED)
                )
            )
            self._advance()  # resume after the second '.'
            return
        self._emit(TokenKind.FLOAT_LITERAL, prefix + fraction, start)

    def _lex_integer(self, base: Base, start: int) -> str | None:
        """Scan digits of ``base`` and return them without separators.

        Returns None after reporting an invalid digit; the cursor is left on
        the offending character so the main loop resumes from there.
        """
        digits = []
        while self._pos < len(self._source):
            ch = self._peek()
            if base.accepts(ch):
                digits.append(self._advance())
            elif ch == "_":
                self._advance()
            elif is_alnum(ch):
                literal = self._span_from(start)
                self._report(
                    Diagnostic(DiagnosticKind.SYNTAX_ERROR, literal, "Invalid Integer Literal")
                    .with_label(
                        Label(literal, f"{base.title} integer literal", Color.BRIGHT_BLUE, order=1)
                    )
                    .with_label(Label(self._span_at(self._pos), "Invalid character", Color.RED))
                    .with_debug_label(
                        Label(
                            self._span_at(self._pos),
                            f"scanning resumes at offset {self._pos}",
                            Color.YELLOW,
                            order=2,
                        )
                    )
                )
                return None
            else:
                break
        return "".join(digits)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        while self._pos < len(self._source) and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        """Skip a ``/* ... */`` comment; comments nest."""
        start = self._pos
        self._advance()
        self._advance()
        depth = 1
        while depth > 0:
            if self._pos >= len(self._source):
                self._report(
                    Diagnostic(
                        DiagnosticKind.SYNTAX_ERROR,
                        self._span_from(start),
                        "Unterminated Multi-Line Comment",
                    )
                    .with_label(Label(self._span(start, start + 1), "Comment started here"))
                    .with_debug_label(
                        Label(
                            self._span_at(self._pos),
                            f"{depth} comment(s) still open at end of input",
                            Color.YELLOW,
                        )
                    )
                )
                return
            ch = self._peek()
            if ch == "/" and self._peek(1) == "*":
                self._advance()
                self._advance()
                depth += 1
            elif ch == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                depth -= 1
            else:
                self._advance()


def tokenize(
    source: str,
    filename: str = "<input>",
    reports: list[Diagnostic] | None = None,
) -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return Lexer(source, filename, reports).tokenize()
