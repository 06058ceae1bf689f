"""Heuristic detection of HTML produced by the old pandoc-based pipeline.

Older site builds knitted R Markdown straight to standalone pandoc HTML, which
is large and carries a pandoc generator tag near the top. Those files are not
compatible with the current renderer. A match is only a suggestion for the
user to review; nothing here deletes files.
"""

from __future__ import annotations

from typing import Iterable, List

from ..filesystem import FileSystem
from ..logging import get_logger
from ..settings import DEFAULT_LEGACY_SIZE_THRESHOLD
from .models import LegacyArtifactFinding

PANDOC_MARKER = '<meta name="generator" content="pandoc" />'
HEAD_LINES = 15

logger = get_logger("content.legacy")


def find_legacy_artifacts(
    paths: Iterable[str],
    fs: FileSystem,
    *,
    size_threshold: int = DEFAULT_LEGACY_SIZE_THRESHOLD,
) -> List[LegacyArtifactFinding]:
    findings: List[LegacyArtifactFinding] = []
    for path in paths:
        if not path.endswith(".html"):
            continue
        size = fs.size(path)
        if size is None or size < size_threshold:
            continue
        try:
            head = fs.head(path, HEAD_LINES)
        except OSError as exc:
            logger.debug("Unable to read %s: %s", path, exc)
            continue
        if any(PANDOC_MARKER in line for line in head):
            findings.append(LegacyArtifactFinding(path=path, size=size))
    return findings


__all__ = ["HEAD_LINES", "PANDOC_MARKER", "find_legacy_artifacts"]
