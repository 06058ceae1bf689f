"""Data models for the content freshness and duplication checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class SourceKind(str, Enum):
    """Authored document formats found in the content directory."""

    RMD = "rmd"
    RMARKDOWN = "rmarkdown"
    MARKDOWN = "markdown"

    @property
    def renderable(self) -> bool:
        return self is not SourceKind.MARKDOWN


class Classification(str, Enum):
    """Rendering state of a renderable source relative to its output."""

    NEVER_RENDERED = "never_rendered"
    STALE = "stale"
    CURRENT = "current"


@dataclass(frozen=True)
class FrontMatter:
    """The front-matter fields the content checks rely on."""

    date: Optional[date] = None
    draft: Optional[bool] = None
    date_error: Optional[str] = None


@dataclass(frozen=True)
class SourceDocument:
    """An authored file under the content directory."""

    path: str
    kind: SourceKind
    mtime: float
    front_matter: FrontMatter = field(default_factory=FrontMatter)


@dataclass(frozen=True)
class OutputCandidate:
    """The expected rendered output of a source and its observed state."""

    path: str
    exists: bool
    mtime: Optional[float] = None


@dataclass
class StalenessPartition:
    """Renderable sources that need attention, split by reason."""

    needs_initial_render: List[SourceDocument] = field(default_factory=list)
    needs_rerender: List[SourceDocument] = field(default_factory=list)


@dataclass(frozen=True)
class DuplicateFinding:
    """An output file that exists without a source justifying it."""

    path: str
    reason: str
    source: Optional[str] = None


@dataclass(frozen=True)
class LegacyArtifactFinding:
    """An HTML file that looks like output from the old pandoc pipeline."""

    path: str
    size: int


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of deleting one duplicate file."""

    path: str
    deleted: bool
    error: Optional[str] = None


@dataclass
class ContentTree:
    """Everything the content checks need from one scan of the content directory."""

    root: str
    content_dir: str
    documents: List[SourceDocument] = field(default_factory=list)
    html_files: List[str] = field(default_factory=list)
