from lsprotocol.types import DiagnosticSeverity

from catt.diagnostics import Diagnostic, create_error
from catt.lexer import scan
from catt.report import DiagnosticReport, assemble_report, produce_diagnostics
from catt.types import Position, Range


def test_scenario_a_empty_report():
    report = produce_diagnostics("var x = 5;")
    assert report.kind == "full"
    assert report.items == []
    assert report.to_json() == {"kind": "full", "items": []}


def test_scenario_b_wire_shape():
    assert produce_diagnostics("var x = y;").to_json() == {
        "kind": "full",
        "items": [
            {
                "range": {
                    "start": {"line": 0, "character": 8},
                    "end": {"line": 0, "character": 9},
                },
                "severity": 1,
                "source": "Catt LSP",
                "message": 'Undefined variable "y" in initialization',
            }
        ],
    }


def test_create_error_spans_token():
    (tok,) = scan("\n  meowln")
    d = create_error(tok, "boom")
    assert d.range == Range(Position(1, 2), Position(1, 8))
    assert d.severity == DiagnosticSeverity.Error
    assert d.source == "Catt LSP"
    assert d.data is None


def test_data_is_serialized_only_when_present():
    rng = Range(Position(0, 0), Position(0, 1))
    with_data = Diagnostic(range=rng, severity=DiagnosticSeverity.Error, message="m", data={"k": 1})
    without = Diagnostic(range=rng, severity=DiagnosticSeverity.Error, message="m")
    assert with_data.to_json()["data"] == {"k": 1}
    assert "data" not in without.to_json()


def test_assemble_report_copies_items():
    items = [create_error(t, "x") for t in scan("a b")]
    report = assemble_report(items)
    items.clear()
    assert isinstance(report, DiagnosticReport)
    assert len(report.items) == 2


def test_produce_diagnostics_is_deterministic():
    source = "var a = b;\nif (c) {\n  meow(d\n"
    assert produce_diagnostics(source) == produce_diagnostics(source)
