"""Text scan for typealias/associatedtype names on Swift versions whose structure omits them."""

import re
from collections.abc import Iterator
from typing import ClassVar

from type_name_linter.domain.constants import ALIAS_PATTERN
from type_name_linter.domain.entities import (
    ALIAS_STRUCTURE_VERSION,
    NameCandidate,
    SourceFile,
    SyntaxKind,
    SwiftVersion,
    SyntaxToken,
)


class AliasDeclarationScanner:
    """
    Recovers alias names from raw text plus the syntax map.

    Each regex match must cover exactly two syntax tokens, a keyword followed by
    an identifier; any other shape (comments, strings, odd spacing) is dropped.
    """

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(ALIAS_PATTERN)

    def __init__(self, threshold: SwiftVersion = ALIAS_STRUCTURE_VERSION) -> None:
        self._threshold = threshold

    def is_active(self, source_file: SourceFile) -> bool:
        """Only Swift versions below the threshold need the text scan."""
        return source_file.swift_version < self._threshold

    def candidates(self, source_file: SourceFile) -> Iterator[NameCandidate]:
        if not self.is_active(source_file):
            return
        contents = source_file.contents
        raw = source_file.contents_bytes
        for match in self.PATTERN.finditer(contents):
            start = len(contents[: match.start()].encode("utf-8"))
            end = start + len(match.group(0).encode("utf-8"))
            tokens = [t for t in source_file.syntax_tokens if t.intersects(start, end)]
            name_token = self._name_token(tokens)
            if name_token is None:
                continue
            name = self._substring_with_byte_range(raw, name_token)
            if name is None:
                continue
            yield NameCandidate(name=name, offset=name_token.offset)

    @staticmethod
    def _name_token(tokens: list[SyntaxToken]) -> SyntaxToken | None:
        if len(tokens) != 2:
            return None
        keyword, name = tokens
        if keyword.kind is not SyntaxKind.KEYWORD or name.kind is not SyntaxKind.IDENTIFIER:
            return None
        return name

    @staticmethod
    def _substring_with_byte_range(raw: bytes, token: SyntaxToken) -> str | None:
        if token.offset < 0 or token.length <= 0 or token.end > len(raw):
            return None
        try:
            return raw[token.offset : token.end].decode("utf-8")
        except UnicodeDecodeError:
            return None
