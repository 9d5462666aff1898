"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from plugin_check.domain.constants import BATCH_FILE_SUFFIX
from plugin_check.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def glob_batch_files(self, path: str) -> list[str]:
        """Get all batch files in path, sorted (recursive if directory)."""
        path_obj = Path(path)
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.glob(f"**/*{BATCH_FILE_SUFFIX}") if p.is_file())
        return [str(path_obj)]

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding=encoding)
