# Conversions from catt core values to lsprotocol types.
from __future__ import annotations

from typing import List

from lsprotocol import types as lsp

from catt.diagnostics import Diagnostic
from catt.report import DiagnosticReport
from catt.types import Position, Range


def to_lsp_position(pos: Position) -> lsp.Position:
    return lsp.Position(line=pos.line, character=pos.character)


def from_lsp_position(pos: lsp.Position) -> Position:
    return Position(line=pos.line, character=pos.character)


def to_lsp_range(rng: Range) -> lsp.Range:
    return lsp.Range(start=to_lsp_position(rng.start), end=to_lsp_position(rng.end))


def to_lsp_diagnostic(diag: Diagnostic) -> lsp.Diagnostic:
    return lsp.Diagnostic(
        range=to_lsp_range(diag.range),
        message=diag.message,
        severity=diag.severity,
        source=diag.source,
        data=diag.data,
    )


def to_lsp_diagnostics(report: DiagnosticReport) -> List[lsp.Diagnostic]:
    return [to_lsp_diagnostic(d) for d in report.items]


def to_lsp_report(report: DiagnosticReport) -> lsp.RelatedFullDocumentDiagnosticReport:
    return lsp.RelatedFullDocumentDiagnosticReport(items=to_lsp_diagnostics(report))
