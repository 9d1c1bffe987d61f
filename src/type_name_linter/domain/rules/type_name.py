"""Type name rule (type_name): naming convention for classes, structs, enums, protocols and aliases."""

import unicodedata
from collections.abc import Iterable, Iterator

from type_name_linter.domain.config import TypeNameConfiguration
from type_name_linter.domain.constants import RULE_DESCRIPTION, RULE_IDENTIFIER, RULE_NAME
from type_name_linter.domain.entities import (
    TYPE_KINDS,
    DeclarationSite,
    NameCandidate,
    Severity,
    SourceFile,
)
from type_name_linter.domain.rules import Checkable, Violation
from type_name_linter.domain.rules.alias_scanner import AliasDeclarationScanner
from type_name_linter.domain.rules.name_normalizer import NameNormalizer


class TypeNameRule(Checkable):
    """Rule for type_name: characters, initial case and length of type-like names."""

    identifier: str = RULE_IDENTIFIER
    name: str = RULE_NAME
    description: str = RULE_DESCRIPTION

    def __init__(
        self,
        configuration: TypeNameConfiguration | None = None,
        scanner: AliasDeclarationScanner | None = None,
        normalizer: NameNormalizer | None = None,
    ) -> None:
        self._configuration = configuration or TypeNameConfiguration()
        self._scanner = scanner or AliasDeclarationScanner()
        self._normalizer = normalizer or NameNormalizer()

    @property
    def configuration(self) -> TypeNameConfiguration:
        return self._configuration

    def validate(self, source_file: SourceFile) -> list[Violation]:
        """Scanner candidates first, then the structure walk; both feed the same pipeline."""
        return self.validate_aliases(source_file) + self.validate_structure(source_file.structure)

    def validate_aliases(self, source_file: SourceFile) -> list[Violation]:
        return self._validate_candidates(self._scanner.candidates(source_file))

    def validate_structure(self, root: DeclarationSite) -> list[Violation]:
        return self._validate_candidates(self._locate(root))

    def _locate(self, node: DeclarationSite) -> Iterator[NameCandidate]:
        """Depth-first, document-order walk over every node, yielding named type declarations."""
        if node.kind in TYPE_KINDS and node.name is not None and node.name_offset is not None:
            yield NameCandidate(name=node.name, offset=node.name_offset, declaration=node)
        for child in node.substructure:
            yield from self._locate(child)

    def _validate_candidates(self, candidates: Iterable[NameCandidate]) -> list[Violation]:
        violations: list[Violation] = []
        for candidate in candidates:
            name = self._normalizer.normalize(candidate.name, candidate.declaration)
            violation = self.validate_name(name, candidate.offset)
            if violation is not None:
                violations.append(violation)
        return violations

    def validate_name(self, name: str, offset: int) -> Violation | None:
        """Ordered checks on an already normalized name; the first that fails wins."""
        config = self._configuration
        if name in config.excluded:
            return None
        if not self._has_only_allowed_characters(name):
            return self._violation(
                Severity.ERROR, offset, f"Type name should only contain alphanumeric characters: '{name}'"
            )
        if config.validates_start_with_lowercase and name and name[0] != name[0].upper():
            return self._violation(
                Severity.ERROR, offset, f"Type name should start with an uppercase character: '{name}'"
            )
        severity = config.severity_for_length(self.character_count(name))
        if severity is not None:
            return self._violation(
                severity,
                offset,
                f"Type name should be between {config.min_length_threshold} and "
                f"{config.max_length_threshold} characters long: '{name}'",
            )
        return None

    def _has_only_allowed_characters(self, name: str) -> bool:
        allowed = self._configuration.allowed_symbols
        return all(self._is_alphanumeric(ch) or ch in allowed for ch in name)

    def _violation(self, severity: Severity, offset: int, reason: str) -> Violation:
        return Violation(
            severity=severity,
            byte_offset=offset,
            reason=reason,
            rule_identity=self.identifier,
        )

    @staticmethod
    def _is_alphanumeric(ch: str) -> bool:
        """Letters, marks and numbers, by Unicode general category."""
        return unicodedata.category(ch)[0] in "LMN"

    @staticmethod
    def character_count(name: str) -> int:
        """User-perceived length: combining marks fold into the preceding character."""
        return sum(1 for index, ch in enumerate(name) if index == 0 or unicodedata.category(ch)[0] != "M")
