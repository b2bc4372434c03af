"""Catt language core.

Turns raw document text into editor diagnostics without evaluating anything:

- ``catt.lexer``: single-pass scanner producing positioned tokens.
- ``catt.validator``: heuristic syntax/semantic checks over the token list.
- ``catt.report``: wraps diagnostics into a full document report.

Each call re-scans the whole document; nothing is cached between calls.
"""

from catt.types import Position, Range, Token, TokenType
from catt.diagnostics import Diagnostic, DiagnosticSeverity, create_error
from catt.lexer import scan
from catt.validator import validate
from catt.report import DiagnosticReport, assemble_report, produce_diagnostics

__all__ = [
    "Position",
    "Range",
    "Token",
    "TokenType",
    "Diagnostic",
    "DiagnosticSeverity",
    "create_error",
    "scan",
    "validate",
    "DiagnosticReport",
    "assemble_report",
    "produce_diagnostics",
]
