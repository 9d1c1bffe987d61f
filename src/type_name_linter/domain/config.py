"""Type name rule configuration. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import ClassVar

from type_name_linter.domain.entities import Severity, SwiftVersion
from type_name_linter.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeNameConfiguration:
    """
    Thresholds and toggles for the type name rule.

    Supplied fully resolved: `from_dict` merges a [tool.type-name] mapping over
    the defaults. An `*_error` value of 0 disables that tier.
    """

    KNOWN_KEYS: ClassVar[frozenset[str]] = frozenset(
        {
            "min_length",
            "max_length",
            "excluded",
            "allowed_symbols",
            "validates_start_with_lowercase",
            "swift_version",
            "exclude_paths",
        }
    )

    min_length_warning: int = 3
    min_length_error: int = 0
    max_length_warning: int = 40
    max_length_error: int = 1000
    allowed_symbols: frozenset[str] = frozenset()
    excluded: frozenset[str] = frozenset()
    validates_start_with_lowercase: bool = True
    swift_version: SwiftVersion | None = None
    exclude_paths: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name.endswith(("_warning", "_error")):
                value = getattr(self, f.name)
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ConfigurationError(f"{f.name} must be a non-negative integer, got {value!r}")

    @property
    def min_length_threshold(self) -> int:
        """Lower bound quoted in length violations."""
        return max(self.min_length_warning, self.min_length_error)

    @property
    def max_length_threshold(self) -> int:
        """Upper bound quoted in length violations."""
        if self.max_length_error > 0:
            return min(self.max_length_warning, self.max_length_error)
        return self.max_length_warning

    def severity_for_length(self, length: int) -> Severity | None:
        """Return the severity a name of `length` characters earns, or None if in bounds."""
        if self.min_length_error > 0 and length <= self.min_length_error:
            return Severity.ERROR
        if length < self.min_length_warning:
            return Severity.WARNING
        if self.max_length_error > 0 and length >= self.max_length_error:
            return Severity.ERROR
        if length > self.max_length_warning:
            return Severity.WARNING
        return None

    @classmethod
    def from_dict(cls, config: Mapping[str, object]) -> "TypeNameConfiguration":
        """Build a configuration from a [tool.type-name] mapping; missing keys keep defaults."""
        unknown = sorted(set(config) - cls.KNOWN_KEYS)
        if unknown:
            logger.warning("Configuration Warning: unknown [tool.type-name] keys ignored: %s", ", ".join(unknown))

        defaults = cls()
        min_warning, min_error = cls._severity_levels(
            config.get("min_length"), "min_length", defaults.min_length_warning, defaults.min_length_error
        )
        max_warning, max_error = cls._severity_levels(
            config.get("max_length"), "max_length", defaults.max_length_warning, defaults.max_length_error
        )

        toggle = config.get("validates_start_with_lowercase", defaults.validates_start_with_lowercase)
        if not isinstance(toggle, bool):
            raise ConfigurationError(f"validates_start_with_lowercase must be a boolean, got {toggle!r}")

        swift_version = None
        raw_version = config.get("swift_version")
        if raw_version is not None:
            try:
                swift_version = SwiftVersion.parse(str(raw_version))
            except ValueError as e:
                raise ConfigurationError(f"swift_version: {e}") from e

        return cls(
            min_length_warning=min_warning,
            min_length_error=min_error,
            max_length_warning=max_warning,
            max_length_error=max_error,
            allowed_symbols=cls._allowed_symbols(config.get("allowed_symbols", [])),
            excluded=frozenset(cls._string_list(config.get("excluded", []), "excluded")),
            validates_start_with_lowercase=toggle,
            swift_version=swift_version,
            exclude_paths=tuple(cls._string_list(config.get("exclude_paths", []), "exclude_paths")),
        )

    @staticmethod
    def _severity_levels(raw: object, key: str, warning: int, error: int) -> tuple[int, int]:
        """Accept `{warning = N, error = M}` or a bare int (warning only)."""
        if raw is None:
            return warning, error
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw, error
        if isinstance(raw, Mapping):
            w = raw.get("warning", warning)
            e = raw.get("error", error)
            if isinstance(w, int) and isinstance(e, int) and not isinstance(w, bool) and not isinstance(e, bool):
                return w, e
        raise ConfigurationError(f"{key} must be an int or a table with integer 'warning'/'error', got {raw!r}")

    @staticmethod
    def _string_list(raw: object, key: str) -> list[str]:
        if isinstance(raw, str) or not isinstance(raw, Iterable):
            raise ConfigurationError(f"{key} must be a list of strings, got {raw!r}")
        items = list(raw)
        if not all(isinstance(x, str) for x in items):
            raise ConfigurationError(f"{key} must be a list of strings, got {raw!r}")
        return items

    @staticmethod
    def _allowed_symbols(raw: object) -> frozenset[str]:
        """Allowed symbols may be given as a list of strings or one string; each character counts."""
        if isinstance(raw, str):
            return frozenset(raw)
        symbols: set[str] = set()
        for item in TypeNameConfiguration._string_list(raw, "allowed_symbols"):
            symbols.update(item)
        return frozenset(symbols)

    def to_dict(self) -> dict[str, object]:
        """Effective configuration in [tool.type-name] shape (for `describe`)."""
        return {
            "min_length": {"warning": self.min_length_warning, "error": self.min_length_error},
            "max_length": {"warning": self.max_length_warning, "error": self.max_length_error},
            "excluded": sorted(self.excluded),
            "allowed_symbols": sorted(self.allowed_symbols),
            "validates_start_with_lowercase": self.validates_start_with_lowercase,
            "swift_version": str(self.swift_version) if self.swift_version else None,
            "exclude_paths": list(self.exclude_paths),
        }
