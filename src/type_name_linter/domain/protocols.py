"""Ports implemented by Infrastructure and Interface. Domain and use cases depend on these only."""

from typing import Protocol

from type_name_linter.domain.entities import SourceFile, SwiftVersion


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def find_swift_files(self, target_path: str, exclude: tuple[str, ...] = ()) -> list[str]:
        """Return sorted .swift paths under target_path (or [target_path] for a file)."""
        ...

    def read_text(self, path: str) -> str:
        ...


class SourceKitGatewayProtocol(Protocol):
    """Protocol for turning a Swift file into structure + syntax map."""

    def load(self, path: str, swift_version: SwiftVersion) -> SourceFile:
        """Raises SourceKitError when the file cannot be analysed."""
        ...
