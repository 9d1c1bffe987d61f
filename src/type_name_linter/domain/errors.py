"""Exceptions raised outside the rule core. The rule itself never raises on malformed input."""


class TypeNameLinterError(Exception):
    """Base class for type-name-linter errors."""


class ConfigurationError(TypeNameLinterError):
    """A [tool.type-name] value is missing its expected shape."""


class SourceKitError(TypeNameLinterError):
    """SourceKitten is missing, failed, or produced output we cannot read."""
