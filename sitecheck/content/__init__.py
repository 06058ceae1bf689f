"""Content freshness and artifact-duplication checks."""

from .duplicates import clean_duplicates, find_duplicates
from .legacy import find_legacy_artifacts
from .models import (
    Classification,
    ContentTree,
    DeletionResult,
    DuplicateFinding,
    FrontMatter,
    LegacyArtifactFinding,
    OutputCandidate,
    SourceDocument,
    SourceKind,
    StalenessPartition,
)
from .paths import EXTENSION_RULES, output_path, source_kind
from .report import CATEGORY_ORDER, ContentReport, ContentReportBuilder
from .staleness import candidate_for, classify, partition

__all__ = [
    "CATEGORY_ORDER",
    "Classification",
    "ContentReport",
    "ContentReportBuilder",
    "ContentTree",
    "DeletionResult",
    "DuplicateFinding",
    "EXTENSION_RULES",
    "FrontMatter",
    "LegacyArtifactFinding",
    "OutputCandidate",
    "SourceDocument",
    "SourceKind",
    "StalenessPartition",
    "candidate_for",
    "classify",
    "clean_duplicates",
    "find_duplicates",
    "find_legacy_artifacts",
    "output_path",
    "partition",
    "source_kind",
]
