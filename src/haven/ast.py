"""Syntax tree nodes produced by the Haven parser."""

from __future__ import annotations

from dataclasses import dataclass

from haven.span import Span


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str
    span: Span

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    value: int
    span: Span

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class FloatLiteral:
    value: float
    span: Span

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Add:
    """Binary addition ``lhs + rhs``."""

    lhs: Node
    rhs: Node
    span: Span

    def __str__(self) -> str:
        return f"{self.lhs} + {self.rhs}"


Node = StringLiteral | IntegerLiteral | FloatLiteral | Add
