"""CLI entry points for type-name-lint - Thin Controller using Typer."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from type_name_linter.domain.config import TypeNameConfiguration
from type_name_linter.domain.constants import BANNER, RULE_DESCRIPTION, RULE_IDENTIFIER, RULE_NAME
from type_name_linter.domain.entities import SwiftVersion
from type_name_linter.domain.errors import SourceKitError
from type_name_linter.domain.protocols import TelemetryPort
from type_name_linter.infrastructure.gateways.sourcekitten_gateway import SourceKittenGateway
from type_name_linter.infrastructure.reporters import TerminalAuditReporter
from type_name_linter.use_cases.check_type_names import CheckTypeNamesUseCase, TypeNameAuditResult

EXIT_CLEAN = 0
EXIT_WARNINGS = 1
EXIT_ERRORS = 2
EXIT_USAGE = 3


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    configuration: TypeNameConfiguration
    telemetry: TelemetryPort
    check_use_case: CheckTypeNamesUseCase
    sourcekit_gateway: SourceKittenGateway
    reporter: TerminalAuditReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def exit_code_for(result: TypeNameAuditResult) -> int:
        if result.has_errors() or (result.files_failed and not result.files_checked):
            return EXIT_ERRORS
        if result.has_violations():
            return EXIT_WARNINGS
        return EXIT_CLEAN

    @staticmethod
    def parse_swift_version(value: Optional[str]) -> Optional[SwiftVersion]:
        if value is None:
            return None
        try:
            return SwiftVersion.parse(value)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--swift-version") from e

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="type-name-lint",
            help=f"{BANNER}\n{RULE_DESCRIPTION}",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path = typer.Argument(Path("."), help="Swift file or directory to audit"),  # noqa: B008
            format: str = typer.Option("terminal", "--format", "-f", help="Output format: terminal or json"),
            swift_version: Optional[str] = typer.Option(
                None, "--swift-version", help="Swift language version of the sources, e.g. 4.0"
            ),
            structure: Optional[Path] = typer.Option(  # noqa: B008
                None, "--structure", help="Captured `sourcekitten structure` JSON for PATH"
            ),
            syntax: Optional[Path] = typer.Option(  # noqa: B008
                None, "--syntax", help="Captured `sourcekitten syntax` JSON for PATH"
            ),
        ) -> None:
            """Validate type, protocol and alias names in Swift sources."""
            if format not in ("terminal", "json"):
                raise typer.BadParameter("must be 'terminal' or 'json'", param_hint="--format")
            version = CLIAppFactory.parse_swift_version(swift_version)
            if format == "terminal":
                deps.telemetry.handshake()

            if structure is not None or syntax is not None:
                if structure is None or syntax is None:
                    deps.telemetry.error("--structure and --syntax must be given together")
                    raise typer.Exit(code=EXIT_USAGE)
                result = CLIAppFactory.check_captured(deps, path, structure, syntax, version)
            else:
                result = deps.check_use_case.execute(str(path), version)

            deps.reporter.report(result, format=format)
            raise typer.Exit(code=CLIAppFactory.exit_code_for(result))

        @app.command()
        def describe() -> None:
            """Show the rule description and the effective configuration."""
            payload = {
                "identifier": RULE_IDENTIFIER,
                "name": RULE_NAME,
                "description": RULE_DESCRIPTION,
                "configuration": deps.configuration.to_dict(),
            }
            typer.echo(json.dumps(payload, indent=2))

        return app

    @staticmethod
    def check_captured(
        deps: CLIDependencies,
        path: Path,
        structure: Path,
        syntax: Path,
        version: Optional[SwiftVersion],
    ) -> TypeNameAuditResult:
        """Validate one file from previously captured SourceKitten JSON."""
        use_case = deps.check_use_case
        result = TypeNameAuditResult()
        try:
            source_file = deps.sourcekit_gateway.load_captured(
                str(path), str(structure), str(syntax), use_case.resolve_swift_version(version)
            )
        except SourceKitError as e:
            deps.telemetry.warning(f"Skipping {path}: {e}")
            result.files_failed[str(path)] = str(e)
            return result
        result.violations.extend(use_case.check_source_file(source_file))
        result.files_checked.append(str(path))
        return result
