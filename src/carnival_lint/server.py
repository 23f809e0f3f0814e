"""
Carnival language server.

Adapts the workspace entry points (open, save, change) and the quick fix and
completion providers to LSP through pygls.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from pygls.lsp.server import LanguageServer
from lsprotocol import types as lsp

from .diagnostics import Diagnostic
from .quickfix import fix_for
from .workspace import Workspace

logger = logging.getLogger(__name__)

SERVER_NAME = "carnival-lsp"
SERVER_VERSION = "0.1.0"
SOURCE = "carnival"

server = LanguageServer(
    SERVER_NAME, SERVER_VERSION,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)

workspace = Workspace()


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

_SEVERITY = {
    "error": lsp.DiagnosticSeverity.Error,
    "info": lsp.DiagnosticSeverity.Information,
}


def to_lsp_diagnostic(d: Diagnostic) -> lsp.Diagnostic:
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=d.line, character=d.col),
            end=lsp.Position(line=d.end_line, character=d.end_col),
        ),
        message=d.message,
        severity=_SEVERITY[d.severity],
        code=d.code,
        source=SOURCE,
    )


def from_lsp_diagnostic(d: lsp.Diagnostic) -> Diagnostic:
    """Rebuild a finding from what the client echoes back in code action requests."""
    severity = "info" if d.severity == lsp.DiagnosticSeverity.Information else "error"
    return Diagnostic(
        severity, d.message,
        d.range.start.line, d.range.start.character,
        d.range.end.line, d.range.end.character,
        code=d.code if isinstance(d.code, str) else None,
    )


def quick_fixes(uri: str, diagnostics: List[lsp.Diagnostic]) -> List[lsp.CodeAction]:
    actions: List[lsp.CodeAction] = []
    for ld in diagnostics:
        action = fix_for(from_lsp_diagnostic(ld))
        if action is None:
            continue
        pos = lsp.Position(line=action.edit.line, character=action.edit.col)
        edit = lsp.TextEdit(range=lsp.Range(start=pos, end=pos), new_text=action.edit.new_text)
        actions.append(lsp.CodeAction(
            title=action.title,
            kind=lsp.CodeActionKind.QuickFix,
            edit=lsp.WorkspaceEdit(changes={uri: [edit]}),
            diagnostics=[ld],
        ))
    return actions


def completion_items(uri: str, position: lsp.Position) -> List[lsp.CompletionItem]:
    return [
        lsp.CompletionItem(
            label=item.label,
            kind=lsp.CompletionItemKind.Keyword,
            insert_text=item.insert_text,
            detail=item.detail,
        )
        for item in workspace.completions(uri, position.line, position.character)
    ]


def _publish(uri: str, diags: Optional[List[Diagnostic]]) -> None:
    if diags is None:
        return
    logger.debug("publish %s: %d diagnostic(s)", uri, len(diags))
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=[to_lsp_diagnostic(d) for d in diags])
    )


def _apply_log_level(raw: Optional[str]) -> None:
    """Set the root logger level from a string like 'debug', 'warning', etc."""
    if not raw:
        return
    level = getattr(logging, raw.upper(), None)
    if isinstance(level, int):
        logging.getLogger().setLevel(level)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

@server.feature(lsp.INITIALIZE)
def on_initialize(params: lsp.InitializeParams):
    opts = getattr(params, 'initialization_options', None)
    raw_level = opts.get('logLevel') if isinstance(opts, dict) else getattr(opts, 'logLevel', None)
    _apply_log_level(raw_level)


# ---------------------------------------------------------------------------
# Text document synchronisation
# ---------------------------------------------------------------------------

@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: lsp.DidOpenTextDocumentParams):
    td = params.text_document
    _publish(td.uri, workspace.did_open(td.uri, td.text, td.language_id))


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: lsp.DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # full sync: the last change carries the whole document
    source = params.content_changes[-1].text
    _publish(uri, workspace.did_change(uri, source))


@server.feature(lsp.TEXT_DOCUMENT_DID_SAVE)
def did_save(params: lsp.DidSaveTextDocumentParams):
    uri = params.text_document.uri
    _publish(uri, workspace.did_save(uri, params.text))


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    workspace.did_close(params.text_document.uri)


# ---------------------------------------------------------------------------
# Quick fixes and completion
# ---------------------------------------------------------------------------

@server.feature(
    lsp.TEXT_DOCUMENT_CODE_ACTION,
    lsp.CodeActionOptions(code_action_kinds=[lsp.CodeActionKind.QuickFix]),
)
def code_action(params: lsp.CodeActionParams) -> List[lsp.CodeAction]:
    return quick_fixes(params.text_document.uri, params.context.diagnostics)


@server.feature(lsp.TEXT_DOCUMENT_COMPLETION)
def completion(params: lsp.CompletionParams) -> lsp.CompletionList:
    items = completion_items(params.text_document.uri, params.position)
    return lsp.CompletionList(is_incomplete=False, items=items)


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    server.start_io()


if __name__ == "__main__":
    main()
