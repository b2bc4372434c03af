from __future__ import annotations

"""
A pygls-based Language Server for Catt.

Features:
- Initialize/Shutdown/Exit (handled by pygls)
- Text synchronization (full) and an in-memory document store
- Diagnostics: pulled via textDocument/diagnostic and pushed on open/change
- Completion: keyword list filtered by the word before the cursor
- Hover: keyword descriptions for the word under the cursor

Note: Every diagnostic request re-scans the whole document; nothing is cached.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pygls.lsp.server import LanguageServer
from lsprotocol import types as lsp

from catt.report import produce_diagnostics
from catt_lsp import __version__, config
from catt_lsp.documents import DocumentStore
from catt_lsp.features import complete, hover
from catt_lsp.protocol import from_lsp_position, to_lsp_diagnostics, to_lsp_report

logger = logging.getLogger(__name__)


class CattLanguageServer(LanguageServer):
    CMD_NAME = "catt-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__, text_document_sync_kind=lsp.TextDocumentSyncKind.Full)
        self.documents = DocumentStore()


server = CattLanguageServer()


# --- Text sync ---
@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: CattLanguageServer, params: lsp.DidOpenTextDocumentParams):
    uri = params.text_document.uri
    logger.info("didOpen %s", uri)
    ls.documents.open(uri, params.text_document.text or "")
    _publish_diagnostics(ls, uri)


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: CattLanguageServer, params: lsp.DidChangeTextDocumentParams):
    uri = params.text_document.uri
    logger.info("didChange %s", uri)
    # Full sync: the last change carries the whole text.
    if params.content_changes:
        ls.documents.update(uri, params.content_changes[-1].text)
    _publish_diagnostics(ls, uri)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: CattLanguageServer, params: lsp.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    logger.info("didClose %s", uri)
    ls.documents.close(uri)
    ls.text_document_publish_diagnostics(lsp.PublishDiagnosticsParams(uri=uri, diagnostics=[]))


# --- Diagnostics ---
def _publish_diagnostics(ls: CattLanguageServer, uri: str) -> None:
    text = ls.documents.get(uri)
    if text is None:
        return
    diags: List[lsp.Diagnostic] = to_lsp_diagnostics(produce_diagnostics(text))
    ls.text_document_publish_diagnostics(lsp.PublishDiagnosticsParams(uri=uri, diagnostics=diags))


@server.feature(
    lsp.TEXT_DOCUMENT_DIAGNOSTIC,
    lsp.DiagnosticOptions(identifier="catt", inter_file_dependencies=False, workspace_diagnostics=False),
)
def document_diagnostic(ls: CattLanguageServer, params: lsp.DocumentDiagnosticParams):
    uri = params.text_document.uri
    logger.info("textDocument/diagnostic %s", uri)
    text = ls.documents.get(uri)
    if text is None:
        return lsp.RelatedFullDocumentDiagnosticReport(items=[])
    return to_lsp_report(produce_diagnostics(text))


# --- Completion ---
@server.feature(lsp.TEXT_DOCUMENT_COMPLETION)
def on_completion(ls: CattLanguageServer, params: lsp.CompletionParams) -> Optional[lsp.CompletionList]:
    uri = params.text_document.uri
    logger.info("textDocument/completion %s", uri)
    text = ls.documents.get(uri)
    if text is None:
        return None
    return complete(text, from_lsp_position(params.position))


# --- Hover ---
@server.feature(lsp.TEXT_DOCUMENT_HOVER)
def on_hover(ls: CattLanguageServer, params: lsp.HoverParams) -> Optional[lsp.Hover]:
    uri = params.text_document.uri
    logger.info("textDocument/hover %s", uri)
    text = ls.documents.get(uri)
    if text is None:
        return None
    return hover(text, from_lsp_position(params.position))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=CattLanguageServer.CMD_NAME, description="Catt language server")
    parser.add_argument("--tcp", action="store_true", help="serve over TCP instead of stdio")
    parser.add_argument("--host", help="TCP host (env CATT_LSP_HOST)")
    parser.add_argument("--port", help="TCP port (env CATT_LSP_PORT)")
    parser.add_argument("--log-file", help='log file, "-" for stderr (env CATT_LSP_LOG_FILE)')
    parser.add_argument("--log-level", help="log level (env CATT_LSP_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        level = config.parse_log_level(args.log_level) if args.log_level else config.get_log_level()
        if args.tcp:
            host = args.host or config.get_host()
            port = config.parse_port(args.port) if args.port else config.get_port()
    except ValueError as ex:
        parser.error(str(ex))

    if args.log_file:
        log_file = None if args.log_file == config.STDERR else Path(args.log_file)
    else:
        log_file = config.get_log_file()
    config.configure_logging(log_file, level)

    if args.tcp:
        logger.info("starting %s %s on %s:%d", CattLanguageServer.CMD_NAME, __version__, host, port)
        server.start_tcp(host, port)
    else:
        logger.info("starting %s %s on stdio", CattLanguageServer.CMD_NAME, __version__)
        server.start_io()


if __name__ == "__main__":
    main()
