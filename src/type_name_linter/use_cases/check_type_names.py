"""Check Type Names Use Case - runs the type name rule over every Swift file under a path."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from type_name_linter.domain.entities import DEFAULT_SWIFT_VERSION, Severity, SourceFile, SwiftVersion
from type_name_linter.domain.errors import SourceKitError
from type_name_linter.domain.rules import Violation

if TYPE_CHECKING:
    from type_name_linter.domain.protocols import (
        FileSystemProtocol,
        SourceKitGatewayProtocol,
        TelemetryPort,
    )
    from type_name_linter.domain.rules.type_name import TypeNameRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeNameAuditResult:
    """Outcome of one audit run: violations in file order plus per-file bookkeeping."""

    violations: list[Violation] = field(default_factory=list)
    files_checked: list[str] = field(default_factory=list)
    files_failed: dict[str, str] = field(default_factory=dict)

    def has_violations(self) -> bool:
        return bool(self.violations)

    def has_errors(self) -> bool:
        return any(v.severity is Severity.ERROR for v in self.violations)

    def count(self, severity: Severity) -> int:
        return sum(1 for v in self.violations if v.severity is severity)


class CheckTypeNamesUseCase:
    """Discover Swift files, load each through SourceKit, validate, aggregate."""

    def __init__(
        self,
        rule: "TypeNameRule",
        filesystem: "FileSystemProtocol",
        sourcekit_gateway: "SourceKitGatewayProtocol",
        telemetry: "TelemetryPort",
    ) -> None:
        self.rule = rule
        self.filesystem = filesystem
        self.sourcekit_gateway = sourcekit_gateway
        self.telemetry = telemetry

    def resolve_swift_version(self, override: SwiftVersion | None = None) -> SwiftVersion:
        """CLI override, else [tool.type-name] swift_version, else the default."""
        if override is not None:
            return override
        return self.rule.configuration.swift_version or DEFAULT_SWIFT_VERSION

    def execute(self, target_path: str, swift_version: SwiftVersion | None = None) -> TypeNameAuditResult:
        version = self.resolve_swift_version(swift_version)
        paths = self.filesystem.find_swift_files(target_path, self.rule.configuration.exclude_paths)
        self.telemetry.step(f"Checking {len(paths)} Swift file(s) in {target_path} (Swift {version})")

        result = TypeNameAuditResult()
        for path in paths:
            try:
                source_file = self.sourcekit_gateway.load(path, version)
            except SourceKitError as e:
                logger.warning("Skipping %s: %s", path, e)
                self.telemetry.warning(f"Skipping {path}: {e}")
                result.files_failed[path] = str(e)
                continue
            result.violations.extend(self.check_source_file(source_file))
            result.files_checked.append(path)
        return result

    def check_source_file(self, source_file: SourceFile) -> list[Violation]:
        violations = [v.with_path(source_file.path) for v in self.rule.validate(source_file)]
        logger.debug("%s: %d violation(s)", source_file.path, len(violations))
        return violations
