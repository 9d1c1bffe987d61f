"""Domain models for rules and violations."""

from dataclasses import dataclass, replace

__all__ = [
    "Checkable",
    "Violation",
]

from typing import Protocol

from type_name_linter.domain.entities import Severity, SourceFile


@dataclass(frozen=True)
class Violation:
    """A rule violation with severity, byte location and reason."""

    severity: Severity
    byte_offset: int
    reason: str
    rule_identity: str
    path: str | None = None
    """Source file the offset refers to; set by the use case, not by rules."""

    def with_path(self, path: str) -> "Violation":
        return replace(self, path=path)

    @property
    def location(self) -> str:
        """path:byte_offset, or just the offset when no path is attached."""
        if self.path:
            return f"{self.path}:{self.byte_offset}"
        return str(self.byte_offset)

    def to_dict(self) -> dict[str, object]:
        return {
            "rule": self.rule_identity,
            "severity": self.severity.value,
            "path": self.path,
            "byte_offset": self.byte_offset,
            "reason": self.reason,
        }


class Checkable(Protocol):
    """One-and-done check: given a source file, return violations."""

    identifier: str
    description: str

    def validate(self, source_file: SourceFile) -> list[Violation]:
        """Interrogate a whole file for naming breaches."""
        ...
