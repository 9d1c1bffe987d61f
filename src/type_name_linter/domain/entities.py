from dataclasses import dataclass, field
from enum import Enum

from type_name_linter.domain.constants import (
    SOURCEKIT_ACCESSIBILITY_PREFIX,
    SOURCEKIT_DECL_PREFIX,
    SOURCEKIT_SYNTAX_PREFIX,
)


class Severity(Enum):
    """Graduated strength of a naming violation."""
    WARNING = "warning"
    ERROR = "error"


class DeclarationKind(Enum):
    """Declaration kinds reported by SourceKit, reduced to what the rule cares about."""
    CLASS = "class"
    STRUCT = "struct"
    ENUM = "enum"
    PROTOCOL = "protocol"
    TYPEALIAS = "typealias"
    ASSOCIATEDTYPE = "associatedtype"
    OTHER = "other"

    @classmethod
    def from_sourcekit(cls, identifier: str | None) -> "DeclarationKind":
        """Map e.g. 'source.lang.swift.decl.struct' to STRUCT; anything else is OTHER."""
        if not identifier or not identifier.startswith(SOURCEKIT_DECL_PREFIX):
            return cls.OTHER
        suffix = identifier[len(SOURCEKIT_DECL_PREFIX):]
        try:
            return cls(suffix)
        except ValueError:
            return cls.OTHER


TYPE_KINDS = frozenset(kind for kind in DeclarationKind if kind is not DeclarationKind.OTHER)


class Accessibility(Enum):
    PRIVATE = "private"
    FILEPRIVATE = "fileprivate"
    INTERNAL = "internal"
    PUBLIC = "public"
    OPEN = "open"
    OTHER = "other"

    @classmethod
    def from_sourcekit(cls, identifier: str | None) -> "Accessibility":
        if not identifier or not identifier.startswith(SOURCEKIT_ACCESSIBILITY_PREFIX):
            return cls.OTHER
        try:
            return cls(identifier[len(SOURCEKIT_ACCESSIBILITY_PREFIX):])
        except ValueError:
            return cls.OTHER

    @property
    def is_private(self) -> bool:
        return self in (Accessibility.PRIVATE, Accessibility.FILEPRIVATE)


@dataclass(frozen=True)
class DeclarationSite:
    """
    One node of the SourceKit structure tree.

    The root of a file is a DeclarationSite with kind OTHER and no name; every
    declaration below it hangs off `substructure` in document order.
    """

    kind: DeclarationKind = DeclarationKind.OTHER
    name: str | None = None
    name_offset: int | None = None
    inherited_types: frozenset[str] = frozenset()
    accessibility: Accessibility = Accessibility.OTHER
    substructure: tuple["DeclarationSite", ...] = ()


class SyntaxKind(Enum):
    """Syntax classification of a token; only keyword and identifier matter here."""
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    OTHER = "other"

    @classmethod
    def from_sourcekit(cls, identifier: str | None) -> "SyntaxKind":
        if identifier == f"{SOURCEKIT_SYNTAX_PREFIX}keyword":
            return cls.KEYWORD
        if identifier == f"{SOURCEKIT_SYNTAX_PREFIX}identifier":
            return cls.IDENTIFIER
        return cls.OTHER


@dataclass(frozen=True)
class SyntaxToken:
    """A classified token; offset and length are UTF-8 byte counts."""

    kind: SyntaxKind
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def intersects(self, start: int, end: int) -> bool:
        """True if this token overlaps the half-open byte range [start, end)."""
        return self.offset < end and self.end > start


@dataclass(frozen=True, order=True)
class SwiftVersion:
    """Comparable Swift language version, e.g. SwiftVersion(4, 1)."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, value: str) -> "SwiftVersion":
        """Parse '4', '4.1' or '4.0.3'. Raises ValueError on anything else."""
        parts = str(value).strip().split(".")
        if not parts or len(parts) > 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid Swift version: {value!r}")
        numbers = [int(p) for p in parts] + [0] * (3 - len(parts))
        return cls(numbers[0], numbers[1], numbers[2])

    def __str__(self) -> str:
        if self.patch:
            return f"{self.major}.{self.minor}.{self.patch}"
        return f"{self.major}.{self.minor}"


# Below this version SourceKit does not expose typealias/associatedtype as structure nodes.
ALIAS_STRUCTURE_VERSION = SwiftVersion(4, 1)
DEFAULT_SWIFT_VERSION = SwiftVersion(5, 0)


@dataclass(frozen=True)
class SourceFile:
    """Everything one validation call reads: text, structure, syntax map and Swift version."""

    path: str
    contents: str
    structure: DeclarationSite = field(default_factory=DeclarationSite)
    syntax_tokens: tuple[SyntaxToken, ...] = ()
    swift_version: SwiftVersion = DEFAULT_SWIFT_VERSION

    @property
    def contents_bytes(self) -> bytes:
        return self.contents.encode("utf-8")


@dataclass(frozen=True)
class NameCandidate:
    """A name to validate, with its byte offset and the declaration it came from (if any)."""

    name: str
    offset: int
    declaration: DeclarationSite | None = None
