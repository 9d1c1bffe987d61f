"""Terminal and JSON reporters for type name audits."""

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from type_name_linter.domain.entities import Severity

if TYPE_CHECKING:
    from type_name_linter.use_cases.check_type_names import TypeNameAuditResult

_SEVERITY_STYLE = {Severity.ERROR: "bold red", Severity.WARNING: "yellow"}


class TerminalAuditReporter:
    """Renders an audit result as a rich table, or as JSON for tooling."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report(self, result: "TypeNameAuditResult", format: str = "terminal") -> None:
        if format == "json":
            self.report_json(result)
            return
        self.report_table(result)

    def report_json(self, result: "TypeNameAuditResult") -> None:
        payload = {
            "violations": [v.to_dict() for v in result.violations],
            "files_checked": result.files_checked,
            "files_failed": result.files_failed,
        }
        self.console.print(json.dumps(payload, indent=2), markup=False, highlight=False, emoji=False, soft_wrap=True)

    def report_table(self, result: "TypeNameAuditResult") -> None:
        if result.has_violations():
            table = Table(title="Type Name Violations")
            table.add_column("Severity")
            table.add_column("Location")
            table.add_column("Reason")
            for v in result.violations:
                style = _SEVERITY_STYLE[v.severity]
                table.add_row(f"[{style}]{v.severity.value}[/]", escape(v.location), escape(v.reason))
            self.console.print(table)
        errors = result.count(Severity.ERROR)
        warnings = result.count(Severity.WARNING)
        self.console.print(
            f"{len(result.files_checked)} file(s) checked, "
            f"{errors} error(s), {warnings} warning(s), {len(result.files_failed)} file(s) skipped"
        )
