from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from lsprotocol.types import DiagnosticSeverity

from catt.types import Range, Token

SOURCE = "Catt LSP"


@dataclass(frozen=True)
class Diagnostic:
    range: Range
    severity: DiagnosticSeverity
    message: str
    source: str = SOURCE
    data: Optional[Any] = None

    def to_json(self) -> dict:
        out = {
            "range": self.range.to_json(),
            "severity": int(self.severity),
            "source": self.source,
            "message": self.message,
        }
        if self.data is not None:
            out["data"] = self.data
        return out


def create_error(token: Token, message: str) -> Diagnostic:
    """Anchor an Error diagnostic on ``token``'s own span."""
    return Diagnostic(range=token.range, severity=DiagnosticSeverity.Error, message=message)
