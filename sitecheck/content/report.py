"""Assembly of the content findings report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Sequence

from ..filesystem import FileSystem
from ..logging import get_logger
from ..models import CheckSection
from ..settings import DEFAULT_LEGACY_SIZE_THRESHOLD
from .duplicates import find_duplicates
from .legacy import find_legacy_artifacts
from .models import (
    ContentTree,
    DuplicateFinding,
    LegacyArtifactFinding,
    SourceDocument,
)
from .paths import output_path
from .staleness import partition

CATEGORY_ORDER = (
    "future_dated",
    "drafts",
    "never_rendered",
    "stale",
    "duplicates",
    "legacy_artifacts",
)

logger = get_logger("content.report")


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("s" if count != 1 else "")


@dataclass
class ContentReport:
    """Findings for every content category, in reporting order."""

    today: date
    future_dated: List[str] = field(default_factory=list)
    drafts: List[str] = field(default_factory=list)
    never_rendered: List[str] = field(default_factory=list)
    stale: List[str] = field(default_factory=list)
    duplicates: List[DuplicateFinding] = field(default_factory=list)
    legacy_artifacts: List[LegacyArtifactFinding] = field(default_factory=list)

    def paths(self, category: str) -> List[str]:
        if category not in CATEGORY_ORDER:
            raise KeyError(category)
        values = getattr(self, category)
        return [item if isinstance(item, str) else item.path for item in values]

    def to_section(self) -> CheckSection:
        section = CheckSection(name="content", title="Content files")

        section.progress("content", "Checking for previewed content that will not be published...")
        if self.future_dated:
            section.todo(
                "future_dated",
                f"Found {_plural(len(self.future_dated), 'file')} with a future publish date.",
                paths=self.future_dated,
                remedy=(
                    "If you want to publish today, change the file's front matter to "
                    f"'date: {self.today.strftime('%Y-%m-%d')}'."
                ),
            )
        else:
            section.success("future_dated", "Found 0 files with future publish dates.")

        if self.drafts:
            section.todo(
                "drafts",
                f"Found {_plural(len(self.drafts), 'file')} marked as drafts.",
                paths=self.drafts,
                remedy="To un-draft, change the file's front matter from 'draft: true' to 'draft: false'.",
            )
        else:
            section.success("drafts", "Found 0 files marked as drafts.")

        section.progress("content", "Checking your R Markdown content...")
        if self.never_rendered:
            section.todo(
                "never_rendered",
                f"Found {_plural(len(self.never_rendered), 'R Markdown file')} to render.",
                paths=self.never_rendered,
                remedy="Knit each file, or rebuild the site rendering new R Markdown files.",
            )
        else:
            section.success("never_rendered", "All R Markdown files have been knitted.")

        if self.stale:
            section.todo(
                "stale",
                f"Found {_plural(len(self.stale), 'R Markdown file')} to update by re-rendering.",
                paths=self.stale,
                remedy="Re-knit each file, or rebuild the site re-rendering files newer than their output.",
            )
        else:
            section.success(
                "stale", "All R Markdown output files are up to date with their source files."
            )

        section.progress("content", "Checking for .html/.md files to clean up...")
        if self.duplicates:
            section.todo(
                "duplicates",
                f"Found {_plural(len(self.duplicates), 'duplicated Markdown or .html output file')}.",
                paths=self.paths("duplicates"),
                remedy="To fix, run `sitecheck clean-duplicates --no-preview`.",
            )
        else:
            section.success("duplicates", "Found 0 duplicate output files.")

        if self.legacy_artifacts:
            section.todo(
                "legacy_artifacts",
                f"Found {_plural(len(self.legacy_artifacts), 'incompatible .html file')} "
                "introduced by an older pandoc-based build.",
                paths=self.paths("legacy_artifacts"),
                remedy=(
                    "Review and delete these files, then re-render new R Markdown files. "
                    "This detection is a heuristic; check each file before removing it."
                ),
            )
        else:
            section.success("legacy_artifacts", "Found 0 incompatible .html files to clean up.")

        return section


class ContentReportBuilder:
    """Runs the content detectors over a scanned content tree."""

    def __init__(
        self,
        fs: FileSystem,
        *,
        today: date,
        legacy_size_threshold: int = DEFAULT_LEGACY_SIZE_THRESHOLD,
    ) -> None:
        self.fs = fs
        self.today = today
        self.legacy_size_threshold = legacy_size_threshold

    def build(self, tree: ContentTree) -> ContentReport:
        documents = list(tree.documents)
        report = ContentReport(today=self.today)

        for document in _authored(documents):
            front_matter = document.front_matter
            if front_matter.date_error:
                logger.debug("Ignoring unparseable date in %s: %s", document.path, front_matter.date_error)
            if front_matter.date is not None and front_matter.date > self.today:
                report.future_dated.append(document.path)
            if front_matter.draft is True:
                report.drafts.append(document.path)

        staleness = partition(documents, self.fs)
        report.never_rendered = [source.path for source in staleness.needs_initial_render]
        report.stale = [source.path for source in staleness.needs_rerender]
        report.duplicates = find_duplicates(documents, self.fs)
        report.legacy_artifacts = find_legacy_artifacts(
            tree.html_files, self.fs, size_threshold=self.legacy_size_threshold
        )

        logger.debug(
            "Content report: %s",
            ", ".join(f"{name}={len(getattr(report, name))}" for name in CATEGORY_ORDER),
        )
        return report


def _authored(documents: Sequence[SourceDocument]) -> List[SourceDocument]:
    """Drop documents that are themselves the rendered output of another source."""
    outputs = {
        target
        for document in documents
        if (target := output_path(document.path, document.kind)) is not None
    }
    return [document for document in documents if document.path not in outputs]


__all__ = ["CATEGORY_ORDER", "ContentReport", "ContentReportBuilder"]
