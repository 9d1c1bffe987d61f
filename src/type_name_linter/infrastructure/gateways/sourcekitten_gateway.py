"""SourceKitten gateway: runs `sourcekitten structure/syntax` and converts the JSON to domain entities."""

import json
import logging
import shutil
import subprocess
from collections.abc import Mapping, Sequence

from type_name_linter.domain.entities import (
    Accessibility,
    DeclarationKind,
    DeclarationSite,
    SourceFile,
    SwiftVersion,
    SyntaxKind,
    SyntaxToken,
)
from type_name_linter.domain.errors import SourceKitError
from type_name_linter.domain.protocols import FileSystemProtocol, SourceKitGatewayProtocol

logger = logging.getLogger(__name__)


class SourceKittenGateway(SourceKitGatewayProtocol):
    """Infrastructure implementation of SourceKitGatewayProtocol backed by the sourcekitten CLI."""

    EXECUTABLE = "sourcekitten"

    def __init__(self, filesystem: FileSystemProtocol, executable: str | None = None) -> None:
        self._filesystem = filesystem
        self._executable = executable or self.EXECUTABLE

    def load(self, path: str, swift_version: SwiftVersion) -> SourceFile:
        """Read the file and ask SourceKitten for its structure and syntax map."""
        try:
            contents = self._filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceKitError(f"{path}: cannot read source: {e}") from e
        structure_json = self._run("structure", path)
        syntax_json = self._run("syntax", path)
        return self.from_json(path, contents, structure_json, syntax_json, swift_version)

    def load_captured(
        self, path: str, structure_path: str, syntax_path: str, swift_version: SwiftVersion
    ) -> SourceFile:
        """Same as load(), but from JSON files captured earlier with sourcekitten."""
        try:
            contents = self._filesystem.read_text(path)
            structure_json = self._filesystem.read_text(structure_path)
            syntax_json = self._filesystem.read_text(syntax_path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceKitError(f"{path}: cannot read input: {e}") from e
        return self.from_json(path, contents, structure_json, syntax_json, swift_version)

    def _run(self, command: str, path: str) -> str:
        executable = shutil.which(self._executable)
        if executable is None:
            raise SourceKitError(
                f"'{self._executable}' not found on PATH; install SourceKitten or pass --structure/--syntax"
            )
        logger.debug("Running %s %s --file %s", self._executable, command, path)
        try:
            result = subprocess.run(
                [executable, command, "--file", path],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise SourceKitError(f"{self._executable} {command} failed to start: {e}") from e
        if result.returncode != 0:
            stderr_text = (result.stderr or "").strip()
            raise SourceKitError(
                f"{self._executable} {command} exited with {result.returncode} for {path}: {stderr_text}"
            )
        return result.stdout

    @classmethod
    def from_json(
        cls,
        path: str,
        contents: str,
        structure_json: str,
        syntax_json: str,
        swift_version: SwiftVersion,
    ) -> SourceFile:
        """Build a SourceFile from captured `sourcekitten structure` and `sourcekitten syntax` output."""
        try:
            structure = json.loads(structure_json)
            syntax = json.loads(syntax_json)
        except json.JSONDecodeError as e:
            raise SourceKitError(f"{path}: invalid SourceKitten JSON: {e}") from e
        if not isinstance(structure, Mapping):
            raise SourceKitError(f"{path}: structure output must be a JSON object")
        if not isinstance(syntax, Sequence) or isinstance(syntax, str):
            raise SourceKitError(f"{path}: syntax output must be a JSON array")
        return SourceFile(
            path=path,
            contents=contents,
            structure=cls.parse_structure(structure),
            syntax_tokens=cls.parse_syntax(syntax),
            swift_version=swift_version,
        )

    @classmethod
    def parse_structure(cls, node: Mapping[str, object]) -> DeclarationSite:
        """Convert one SourceKit dictionary (and its key.substructure) into a DeclarationSite."""
        name = node.get("key.name")
        name_offset = node.get("key.nameoffset")
        inherited = node.get("key.inheritedtypes") or []
        children = node.get("key.substructure") or []
        return DeclarationSite(
            kind=DeclarationKind.from_sourcekit(cls._str_or_none(node.get("key.kind"))),
            name=name if isinstance(name, str) else None,
            name_offset=name_offset if isinstance(name_offset, int) and not isinstance(name_offset, bool) else None,
            inherited_types=frozenset(
                entry["key.name"]
                for entry in inherited
                if isinstance(entry, Mapping) and isinstance(entry.get("key.name"), str)
            ),
            accessibility=Accessibility.from_sourcekit(cls._str_or_none(node.get("key.accessibility"))),
            substructure=tuple(cls.parse_structure(child) for child in children if isinstance(child, Mapping)),
        )

    @staticmethod
    def parse_syntax(entries: Sequence[object]) -> tuple[SyntaxToken, ...]:
        """Convert `sourcekitten syntax` entries; malformed entries are skipped."""
        tokens: list[SyntaxToken] = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                continue
            offset, length = entry.get("offset"), entry.get("length")
            if not isinstance(offset, int) or not isinstance(length, int):
                continue
            kind = entry.get("type")
            tokens.append(
                SyntaxToken(
                    kind=SyntaxKind.from_sourcekit(kind if isinstance(kind, str) else None),
                    offset=offset,
                    length=length,
                )
            )
        return tuple(tokens)

    @staticmethod
    def _str_or_none(value: object) -> str | None:
        return value if isinstance(value, str) else None
