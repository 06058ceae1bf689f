"""Filesystem queries used by the content checks."""

from __future__ import annotations

from itertools import islice
from pathlib import Path
from typing import List, Optional, Protocol


class FileSystem(Protocol):
    """Metadata and deletion operations over site-relative POSIX paths."""

    def exists(self, path: str) -> bool:
        """Return True when a regular file exists at ``path``."""

    def size(self, path: str) -> Optional[int]:
        """Return the size in bytes, or None when the file is absent."""

    def mtime(self, path: str) -> Optional[float]:
        """Return the modification time in seconds, or None when absent."""

    def head(self, path: str, lines: int) -> List[str]:
        """Return up to ``lines`` leading lines of the file."""

    def delete(self, path: str) -> None:
        """Delete the file; deleting an absent file is a no-op."""


class LocalFileSystem:
    """FileSystem implementation rooted at a directory on disk."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return self.root / path

    def exists(self, path: str) -> bool:
        return self.resolve(path).is_file()

    def size(self, path: str) -> Optional[int]:
        try:
            return self.resolve(path).stat().st_size
        except FileNotFoundError:
            return None

    def mtime(self, path: str) -> Optional[float]:
        try:
            return self.resolve(path).stat().st_mtime
        except FileNotFoundError:
            return None

    def head(self, path: str, lines: int) -> List[str]:
        with self.resolve(path).open("r", encoding="utf-8", errors="replace") as handle:
            return [line.rstrip("\r\n") for line in islice(handle, lines)]

    def delete(self, path: str) -> None:
        self.resolve(path).unlink(missing_ok=True)


__all__ = ["FileSystem", "LocalFileSystem"]
