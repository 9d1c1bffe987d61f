"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from type_name_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def find_swift_files(self, target_path: str, exclude: tuple[str, ...] = ()) -> list[str]:
        """Get all Swift files in path (recursive if directory), sorted, minus excluded fragments."""
        path_obj = Path(target_path)
        if path_obj.is_dir():
            candidates = sorted(str(p) for p in path_obj.glob("**/*.swift") if p.is_file())
        else:
            candidates = [str(path_obj)] if path_obj.suffix == ".swift" else []
        return [p for p in candidates if not any(fragment in p for fragment in exclude)]

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")
