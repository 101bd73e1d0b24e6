"""Structured diagnostics with labelled spans and plain-text rendering."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from enum import Enum
from typing import TextIO

from haven.span import Span, line_col


class ErrorLevel(Enum):
    SILENT = "silent"  # print nothing
    COMPACT = "compact"  # one line per diagnostic
    NORMAL = "normal"  # title, source snippet, labels
    DEBUG = "debug"  # NORMAL plus debug-only labels


class DiagnosticKind(Enum):
    SYNTAX_ERROR = "SyntaxError"
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    DID_YOU_MEAN = "DidYouMean"  # reserved
    CUSTOM = "Custom"


class Color(Enum):
    RED = "red"
    BRIGHT_BLUE = "bright_blue"
    YELLOW = "yellow"


# Underline character per label color in plain-text output
_MARKERS = {
    Color.RED: "^",
    Color.BRIGHT_BLUE: "-",
    Color.YELLOW: "~",
}


@dataclass(frozen=True, slots=True)
class Label:
    """A secondary span on a diagnostic.

    Labels starting on the same line render by ascending ``order``, then in
    insertion order.
    """

    span: Span
    message: str | None = None
    color: Color = Color.RED
    order: int = 0


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A leveled error value with a primary span and optional labels."""

    kind: DiagnosticKind
    span: Span
    message: str
    labels: tuple[Label, ...] = ()
    debug_labels: tuple[Label, ...] = ()
    note: str | None = None

    @property
    def title(self) -> str:
        if self.kind is DiagnosticKind.CUSTOM:
            return self.message
        return f"{self.kind.value}: {self.message}"

    def with_label(self, label: Label) -> Diagnostic:
        return replace(self, labels=self.labels + (label,))

    def with_debug_label(self, label: Label) -> Diagnostic:
        """Attach a label only shown at ErrorLevel.DEBUG."""
        return replace(self, debug_labels=self.debug_labels + (label,))

    def with_note(self, note: str) -> Diagnostic:
        return replace(self, note=note)

    def render(self, level: ErrorLevel, source: str) -> str:
        """Render against the source text this diagnostic's spans point into."""
        if level is ErrorLevel.SILENT:
            raise ValueError("cannot render a diagnostic at silent level")
        if level is ErrorLevel.COMPACT:
            return f"[{self.span}] Error: {self.title}"

        labels = list(self.labels)
        if level is ErrorLevel.DEBUG:
            labels.extend(self.debug_labels)
        return self._format(labels, source)

    def _format(self, labels: list[Label], source: str) -> str:
        lines = source.split("\n")
        line, col = line_col(source, self.span.start)

        placed = []
        for idx, label in enumerate(labels):
            label_line, label_col = line_col(source, label.span.start)
            placed.append((label_line, label.order, idx, label_col, label))
        placed.sort(key=lambda p: p[:3])

        last_line = max([line] + [p[0] for p in placed])
        gutter_width = len(str(last_line)) + 1
        blank_gutter = " " * gutter_width + "|"

        out = [
            f"error: {self.title}",
            f"{' ' * gutter_width}--> {self.span.source_id}:{line}:{col}",
        ]
        if placed:
            out.append(blank_gutter)

        shown_line = None
        for label_line, _, _, label_col, label in placed:
            source_line = _source_line(lines, label_line)
            if label_line != shown_line:
                out.append(f"{label_line:>{gutter_width - 1}} | {source_line}")
                shown_line = label_line

            # Underline the full span when on one line, otherwise to end of line
            end_line, end_col = line_col(source, label.span.end)
            if end_line == label_line:
                underline_len = max(1, end_col - label_col + 1)
            else:
                underline_len = max(1, len(source_line) - label_col + 1)

            pad = " " * (label_col - 1)
            underline = _MARKERS[label.color] * underline_len
            text = f"{blank_gutter} {pad}{underline}"
            if label.message:
                text += f" {label.message}"
            out.append(text)

        if self.note is not None:
            out.append(f"{' ' * gutter_width}= note: {self.note}")
        return "\n".join(out)


def _source_line(lines: list[str], line: int) -> str:
    if 0 < line <= len(lines):
        return lines[line - 1].rstrip("\r")
    return ""


def print_reports(
    reports: list[Diagnostic],
    level: ErrorLevel,
    source: str,
    *,
    file: TextIO = sys.stderr,
) -> int:
    """Print every report followed by a summary line; return the report count.

    Nothing is printed at ErrorLevel.SILENT, but the count is still returned.
    """
    count = len(reports)
    if level is ErrorLevel.SILENT:
        return count

    for report in reports:
        print(report.render(level, source), file=file)

    if count == 1:
        print("Emitted 1 error.", file=file)
    elif count > 1:
        print(f"Emitted {count} errors.", file=file)
    return count
