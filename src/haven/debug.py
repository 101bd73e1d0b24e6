"""--debug dumps of the token stream and syntax tree to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from haven.ast import Add, FloatLiteral, IntegerLiteral, Node, StringLiteral
from haven.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one ``index: Token{...}`` line per token to *file*."""
    for i, token in enumerate(tokens):
        file.write(f"{i}: {token}\n")


def dump_ast(node: Node, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable syntax tree to *file*."""
    _dump_node(node, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_node(node: Node, depth: int, f: TextIO) -> None:
    if isinstance(node, StringLiteral):
        f.write(f"{_indent(depth)}StringLiteral({node.value!r}) @ {node.span}\n")
    elif isinstance(node, IntegerLiteral):
        f.write(f"{_indent(depth)}IntegerLiteral({node.value}) @ {node.span}\n")
    elif isinstance(node, FloatLiteral):
        f.write(f"{_indent(depth)}FloatLiteral({node.value}) @ {node.span}\n")
    elif isinstance(node, Add):
        f.write(f"{_indent(depth)}Add @ {node.span}\n")
        _dump_node(node.lhs, depth + 1, f)
        _dump_node(node.rhs, depth + 1, f)
