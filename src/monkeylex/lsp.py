"""Minimal LSP server for Monkey source: illegal-character diagnostics only."""

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

from monkeylex import __version__
from monkeylex.lexer import check

server = LanguageServer(
    "monkeylex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_column(line_text: str, column: int) -> int:
    """Convert a 0-based code-point column into LSP UTF-16 code units."""
    return len(line_text[:column].encode("utf-16-le")) // 2


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per illegal character."""
    doc = ls.workspace.get_text_document(uri)
    lines = doc.source.split("\n")
    diagnostics: list[Diagnostic] = []

    for err in check(doc.source):
        line = err.position.line - 1
        line_text = lines[line]
        col = _utf16_column(line_text, err.position.column - 1)
        end = _utf16_column(line_text, err.position.column)
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=end),
                ),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source="monkeylex",
            )
        )

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
