"""Discovery of local Hugo installations."""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from .logging import get_logger

_VERSION_PATTERN = re.compile(r"\bv?(\d+\.\d+(?:\.\d+)?)")
_EXECUTABLE_NAMES = ("hugo", "hugo.exe")

logger = get_logger("hugo")


def parse_version(text: str | None) -> Optional[Tuple[int, ...]]:
    """Extract a numeric version tuple from ``text`` (e.g. ``hugo v0.111.3-...``)."""
    if not text:
        return None
    match = _VERSION_PATTERN.search(text)
    if match is None:
        return None
    return tuple(int(part) for part in match.group(1).split("."))


def format_version(version: Tuple[int, ...]) -> str:
    return ".".join(str(part) for part in version)


def normalize_version(text: str | None) -> Optional[str]:
    parsed = parse_version(text)
    return format_version(parsed) if parsed is not None else None


def version_at_least(version: str | None, minimum: str) -> bool:
    current = parse_version(version)
    required = parse_version(minimum)
    if current is None or required is None:
        return False
    width = max(len(current), len(required))
    return current + (0,) * (width - len(current)) >= required + (0,) * (width - len(required))


def versions_match(left: str | None, right: str | None) -> bool:
    a, b = parse_version(left), parse_version(right)
    if a is None or b is None:
        return False
    width = max(len(a), len(b))
    return a + (0,) * (width - len(a)) == b + (0,) * (width - len(b))


class HugoLocator:
    """Finds Hugo executables on the search path and reports their versions."""

    def __init__(
        self,
        runner: Callable[[Sequence[str]], str] | None = None,
        search_path: Sequence[str] | None = None,
    ) -> None:
        self._runner = runner or self._default_runner
        self._search_path = list(search_path) if search_path is not None else None

    def executables(self) -> List[str]:
        """Return distinct Hugo executables in search-path order."""
        directories = self._search_path
        if directories is None:
            directories = os.get_exec_path()
        found: List[str] = []
        seen = set()
        for directory in directories:
            for name in _EXECUTABLE_NAMES:
                candidate = Path(directory) / name
                if not candidate.is_file() or not os.access(candidate, os.X_OK):
                    continue
                key = candidate.resolve()
                if key in seen:
                    continue
                seen.add(key)
                found.append(str(candidate))
        return found

    def version(self, executable: str = "hugo") -> Optional[str]:
        """Return the normalised version reported by ``executable``."""
        try:
            output = self._runner([executable, "version"])
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.debug("Unable to query %s version: %s", executable, exc)
            return None
        return normalize_version(output)

    def installed_versions(self) -> List[str]:
        versions: List[str] = []
        for executable in self.executables():
            version = self.version(executable)
            if version is not None and version not in versions:
                versions.append(version)
        return versions

    def current_version(self) -> Optional[str]:
        """Version of the first Hugo found on the search path."""
        executables = self.executables()
        if not executables:
            return None
        return self.version(executables[0])

    @staticmethod
    def _default_runner(args: Sequence[str]) -> str:
        completed = subprocess.run(
            list(args),
            check=True,
            capture_output=True,
            text=True,
        )
        return completed.stdout


__all__ = [
    "HugoLocator",
    "normalize_version",
    "parse_version",
    "version_at_least",
    "versions_match",
]
