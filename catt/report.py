from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from catt.diagnostics import Diagnostic
from catt.lexer import scan
from catt.validator import validate


@dataclass(frozen=True)
class DiagnosticReport:
    """A full document diagnostic report, ``{kind: "full", items: [...]}`` on the wire."""

    items: List[Diagnostic] = field(default_factory=list)
    kind: str = "full"

    def to_json(self) -> dict:
        return {"kind": self.kind, "items": [d.to_json() for d in self.items]}


def assemble_report(diagnostics: Sequence[Diagnostic]) -> DiagnosticReport:
    return DiagnosticReport(items=list(diagnostics))


def produce_diagnostics(text: str) -> DiagnosticReport:
    """Scan and validate the whole of ``text``."""
    return assemble_report(validate(scan(text)))
