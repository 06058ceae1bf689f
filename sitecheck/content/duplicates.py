"""Detection and clean-up of duplicated output files.

For a basename ``FOO`` the rules are:

* ``FOO.Rmd`` exists: ``FOO.html`` is its output, so ``FOO.md`` and
  ``FOO.markdown`` are duplicates, unless ``FOO.Rmarkdown`` also exists
  and ``FOO.markdown`` is its output.
* otherwise ``FOO.Rmarkdown`` exists: it renders to ``FOO.markdown``, so
  ``FOO.html`` is a duplicate.
* otherwise only plain Markdown exists: Hugo renders it directly, so
  ``FOO.html`` is a duplicate.

An ``.html`` file without any same-basename source is authored HTML content
and is left alone.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from ..filesystem import FileSystem
from ..logging import get_logger
from .models import DeletionResult, DuplicateFinding, SourceDocument, SourceKind
from .paths import basename_key, output_path, with_ext

logger = get_logger("content.duplicates")


def find_duplicates(
    sources: Iterable[SourceDocument], fs: FileSystem
) -> List[DuplicateFinding]:
    """Return duplicate output files, sorted by path."""
    by_key: Dict[str, Dict[SourceKind, List[str]]] = defaultdict(lambda: defaultdict(list))
    for source in sources:
        by_key[basename_key(source.path)][source.kind].append(source.path)

    findings: Dict[str, DuplicateFinding] = {}
    for key, kinds in by_key.items():
        html_path = with_ext(key, "html")
        if SourceKind.RMD in kinds:
            rmd = kinds[SourceKind.RMD][0]
            # FOO.markdown is still required when FOO.Rmarkdown renders to it.
            required = {
                output_path(path, kind)
                for kind, paths in kinds.items()
                if kind is not SourceKind.RMD
                for path in paths
            }
            for path in kinds.get(SourceKind.MARKDOWN, []):
                if path in required:
                    continue
                findings[path] = DuplicateFinding(
                    path=path,
                    reason="R Markdown source renders to .html, not Markdown",
                    source=rmd,
                )
        elif SourceKind.RMARKDOWN in kinds:
            if fs.exists(html_path):
                findings[html_path] = DuplicateFinding(
                    path=html_path,
                    reason=".Rmarkdown source renders to .markdown, not .html",
                    source=kinds[SourceKind.RMARKDOWN][0],
                )
        elif SourceKind.MARKDOWN in kinds:
            if fs.exists(html_path):
                findings[html_path] = DuplicateFinding(
                    path=html_path,
                    reason="plain Markdown must not be rendered to .html",
                    source=kinds[SourceKind.MARKDOWN][0],
                )

    return [findings[path] for path in sorted(findings)]


def clean_duplicates(
    findings: Sequence[DuplicateFinding], fs: FileSystem
) -> List[DeletionResult]:
    """Delete every flagged file, reporting success or failure per file."""
    results: List[DeletionResult] = []
    for finding in findings:
        try:
            fs.delete(finding.path)
        except OSError as exc:
            logger.error("Failed to delete %s: %s", finding.path, exc)
            results.append(DeletionResult(path=finding.path, deleted=False, error=str(exc)))
            continue
        logger.info("Deleted %s", finding.path)
        results.append(DeletionResult(path=finding.path, deleted=True))
    return results


__all__ = ["clean_duplicates", "find_duplicates"]
