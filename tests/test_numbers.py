"""Test integer literals in every base, floats, and malformed numbers."""

import pytest

from haven.diagnostics import Color, DiagnosticKind
from haven.span import Span
from haven.tokens import TokenKind


class TestDecimal:
    def test_simple(self, lex, kinds):
        tokens = lex("123")
        assert kinds(tokens) == [TokenKind.INTEGER_LITERAL_DEC]
        assert tokens[0].text == "123"

    def test_span(self, lex):
        tokens = lex("123")
        assert tokens[0].span == Span(0, 3, "test.hv")

    def test_zero(self, lex, kinds):
        tokens = lex("0")
        assert kinds(tokens) == [TokenKind.INTEGER_LITERAL_DEC]
        assert tokens[0].text == "0"

    def test_separators_stripped(self, lex):
        tokens = lex("1_2_3")
        assert len(tokens) == 1
        assert tokens[0].text == "123"

    def test_trailing_separator(self, lex):
        assert lex("1_000_")[0].text == "1000"

    def test_followed_by_operator(self, lex, kinds):
        tokens = lex("5;")
        assert kinds(tokens) == [TokenKind.INTEGER_LITERAL_DEC, TokenKind.SEMICOLON]


class TestBasedIntegers:
    @pytest.mark.parametrize(
        "source,kind,text",
        [
            ("0b101", TokenKind.INTEGER_LITERAL_BIN, "101"),
            ("0o17", TokenKind.INTEGER_LITERAL_OCT, "17"),
            ("0x1F", TokenKind.INTEGER_LITERAL_HEX, "1F"),
            ("0xdead_BEEF", TokenKind.INTEGER_LITERAL_HEX, "deadBEEF"),
            ("0b1_0", TokenKind.INTEGER_LITERAL_BIN, "10"),
        ],
    )
    def test_prefix_not_in_text(self, lex, kinds, source, kind, text):
        tokens = lex(source)
        assert kinds(tokens) == [kind]
        assert tokens[0].text == text

    def test_span_includes_prefix(self, lex):
        tokens = lex("0x1F")
        assert tokens[0].span == Span(0, 4, "test.hv")


class TestFloats:
    def test_simple(self, lex, kinds):
        tokens = lex("12.5")
        assert kinds(tokens) == [TokenKind.FLOAT_LITERAL]
        assert tokens[0].text == "12.5"

    def test_leading_point(self, lex, kinds):
        tokens = lex(".5")
        assert kinds(tokens) == [TokenKind.FLOAT_LITERAL]
        assert tokens[0].text == ".5"

    def test_trailing_point(self, lex, kinds):
        tokens = lex("1.")
        assert kinds(tokens) == [TokenKind.FLOAT_LITERAL]
        assert tokens[0].text == "1."

    def test_separators_stripped(self, lex):
        assert lex("1_0.2_5")[0].text == "10.25"

    def test_period_without_digit(self, lex, kinds):
        assert kinds(lex(". 5")) == [TokenKind.PERIOD, TokenKind.INTEGER_LITERAL_DEC]

    def test_separate_literals(self, lex, kinds):
        tokens = lex("1 .5")
        assert kinds(tokens) == [TokenKind.INTEGER_LITERAL_DEC, TokenKind.FLOAT_LITERAL]


class TestInvalidIntegers:
    def test_bad_binary_digit(self, lex_reports, kinds):
        tokens, reports = lex_reports("0b012")
        assert len(reports) == 1
        assert reports[0].kind == DiagnosticKind.SYNTAX_ERROR
        assert reports[0].message == "Invalid Integer Literal"
        assert TokenKind.INTEGER_LITERAL_BIN not in kinds(tokens)

    def test_scanning_resumes_at_bad_character(self, lex_reports, kinds):
        tokens, _ = lex_reports("0b012")
        assert kinds(tokens) == [TokenKind.INTEGER_LITERAL_DEC]
        assert tokens[0].text == "2"

    def test_labels(self, lex_reports):
        _, reports = lex_reports("0b012")
        report = reports[0]
        assert report.span == Span(0, 4, "test.hv")
        literal, bad_char = report.labels
        assert literal.message == "Binary integer literal"
        assert literal.span == Span(0, 4, "test.hv")
        assert literal.color == Color.BRIGHT_BLUE
        assert literal.order == 1
        assert bad_char.message == "Invalid character"
        assert bad_char.span == Span(4, 4, "test.hv")
        assert bad_char.color == Color.RED
        assert bad_char.order == 0

    def test_debug_label(self, lex_reports):
        _, reports = lex_reports("0b012")
        (label,) = reports[0].debug_labels
        assert "offset 4" in label.message

    @pytest.mark.parametrize(
        "source,base",
        [
            ("0o78", "Octal"),
            ("0x1g", "Hexadecimal"),
            ("12a", "Decimal"),
            ("1.5x", "Decimal"),
        ],
    )
    def test_base_named_in_label(self, lex_reports, source, base):
        _, reports = lex_reports(source)
        assert len(reports) == 1
        assert reports[0].labels[0].message == f"{base} integer literal"

    def test_letter_after_hex_resumes_as_identifier(self, lex_reports, kinds):
        tokens, reports = lex_reports("0x1g")
        assert len(reports) == 1
        assert kinds(tokens) == [TokenKind.IDENTIFIER]
        assert tokens[0].text == "g"

    def test_uppercase_prefix_is_not_a_base(self, lex_reports):
        _, reports = lex_reports("0X1")
        assert len(reports) == 1
        assert reports[0].labels[0].message == "Decimal integer literal"


class TestInvalidFloats:
    def test_second_fractional_indicator(self, lex_reports, kinds):
        tokens, reports = lex_reports("12.5.6")
        assert len(reports) == 1
        report = reports[0]
        assert report.kind == DiagnosticKind.SYNTAX_ERROR
        assert report.message == "Invalid Float Literal"
        assert report.labels[0].message == "Second fractional indicator"
        assert report.labels[0].span == Span(4, 4, "test.hv")
        assert TokenKind.FLOAT_LITERAL not in kinds(tokens)

    def test_scanning_resumes_after_second_point(self, lex_reports, kinds):
        tokens, _ = lex_reports("12.5.6")
        assert kinds(tokens) == [TokenKind.INTEGER_LITERAL_DEC]
        assert tokens[0].text == "6"

    def test_leading_point_double_dot(self, lex_reports, kinds):
        tokens, reports = lex_reports(".5.6")
        assert len(reports) == 1
        assert TokenKind.FLOAT_LITERAL not in kinds(tokens)

    def test_primary_span_covers_literal(self, lex_reports):
        _, reports = lex_reports("x = 12.5.6")
        assert reports[0].span == Span(4, 8, "test.hv")
