"""Minimal LSP server for Haven: lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from haven import __version__, lex
from haven.diagnostics import Diagnostic as HavenDiagnostic
from haven.span import Span, line_col

server = LanguageServer("haven-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_range(span: Span, source: str) -> Range:
    """Convert an inclusive character span to a 0-based, end-exclusive LSP range."""
    start_line, start_col = line_col(source, span.start)
    end_line, end_col = line_col(source, span.end + 1)
    return Range(
        start=Position(line=start_line - 1, character=start_col - 1),
        end=Position(line=end_line - 1, character=end_col - 1),
    )


def _to_lsp(report: HavenDiagnostic, source: str) -> Diagnostic:
    message = report.title
    details = [label.message for label in report.labels if label.message]
    if details:
        message += " (" + "; ".join(details) + ")"
    if report.note:
        message += f"\nnote: {report.note}"
    return Diagnostic(
        range=_to_range(report.span, source),
        message=message,
        severity=DiagnosticSeverity.Error,
        source="haven",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri

    _, reports = lex(source, filename)
    diagnostics = [_to_lsp(report, source) for report in reports]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
