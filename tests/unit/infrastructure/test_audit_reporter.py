"""Unit tests for TerminalAuditReporter."""

import io
import json

from rich.console import Console

from type_name_linter.domain.entities import Severity
from type_name_linter.domain.rules import Violation
from type_name_linter.infrastructure.reporters import TerminalAuditReporter
from type_name_linter.use_cases.check_type_names import TypeNameAuditResult


def _reporter() -> tuple[TerminalAuditReporter, io.StringIO]:
    buffer = io.StringIO()
    return TerminalAuditReporter(Console(file=buffer, width=200, color_system=None)), buffer


def _result() -> TypeNameAuditResult:
    return TypeNameAuditResult(
        violations=[
            Violation(Severity.ERROR, 6, "Type name should start with an uppercase character: 'foo'", "type_name", "A.swift"),
            Violation(Severity.WARNING, 20, "Type name should be between 3 and 40 characters long: 'Ab'", "type_name", "A.swift"),
        ],
        files_checked=["A.swift"],
        files_failed={"B.swift": "sourcekitten exited with 1"},
    )


def test_table_lists_violations_and_summary() -> None:
    reporter, buffer = _reporter()
    reporter.report(_result())
    output = buffer.getvalue()
    assert "A.swift:6" in output
    assert "start with an uppercase character: 'foo'" in output
    assert "1 file(s) checked, 1 error(s), 1 warning(s), 1 file(s) skipped" in output


def test_clean_result_prints_only_summary() -> None:
    reporter, buffer = _reporter()
    reporter.report(TypeNameAuditResult(files_checked=["A.swift"]))
    output = buffer.getvalue()
    assert "Type Name Violations" not in output
    assert "0 error(s), 0 warning(s)" in output


def test_json_output_is_parseable() -> None:
    reporter, buffer = _reporter()
    reporter.report(_result(), format="json")
    payload = json.loads(buffer.getvalue())
    assert payload["violations"][0] == {
        "rule": "type_name",
        "severity": "error",
        "path": "A.swift",
        "byte_offset": 6,
        "reason": "Type name should start with an uppercase character: 'foo'",
    }
    assert payload["files_failed"] == {"B.swift": "sourcekitten exited with 1"}
