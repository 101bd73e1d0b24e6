"""Source spans and offset-to-position conversion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive character range ``[start, end]`` within one source."""

    start: int
    end: int
    source_id: str

    @classmethod
    def at(cls, index: int, source_id: str) -> Span:
        """Return a single-point span at ``index``."""
        return cls(index, index, source_id)

    def extend(self, other: Span) -> Span:
        """Return the smallest span enclosing both spans, keeping our source."""
        return Span(min(self.start, other.start), max(self.end, other.end), self.source_id)

    def __str__(self) -> str:
        return f"{self.source_id}:{self.start}:{self.end}"


def line_col(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a character offset in source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1
