"""Classification of renderable sources as never rendered, stale, or current."""

from __future__ import annotations

from typing import Iterable

from ..filesystem import FileSystem
from .models import (
    Classification,
    OutputCandidate,
    SourceDocument,
    StalenessPartition,
)
from .paths import output_path


def classify(source: SourceDocument, output: OutputCandidate) -> Classification:
    """An output is current when it is at least as new as its source."""
    if not output.exists or output.mtime is None:
        return Classification.NEVER_RENDERED
    if output.mtime < source.mtime:
        return Classification.STALE
    return Classification.CURRENT


def candidate_for(source: SourceDocument, fs: FileSystem) -> OutputCandidate | None:
    """Build the expected output candidate for ``source``; None for plain sources."""
    target = output_path(source.path, source.kind)
    if target is None:
        return None
    if not fs.exists(target):
        return OutputCandidate(path=target, exists=False)
    return OutputCandidate(path=target, exists=True, mtime=fs.mtime(target))


def partition(sources: Iterable[SourceDocument], fs: FileSystem) -> StalenessPartition:
    """Split renderable sources into never-rendered and stale groups."""
    result = StalenessPartition()
    for source in sources:
        candidate = candidate_for(source, fs)
        if candidate is None:
            continue
        state = classify(source, candidate)
        if state is Classification.NEVER_RENDERED:
            result.needs_initial_render.append(source)
        elif state is Classification.STALE:
            result.needs_rerender.append(source)
    return result


__all__ = ["candidate_for", "classify", "partition"]
