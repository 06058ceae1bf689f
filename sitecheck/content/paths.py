"""Mapping from authored sources to their expected rendered outputs."""

from __future__ import annotations

import posixpath
from typing import Dict, Optional

from .models import SourceKind

# R Markdown renders to HTML; .Rmarkdown renders to .markdown for Hugo to
# process. Plain Markdown is rendered by Hugo itself and has no output file.
EXTENSION_RULES: Dict[SourceKind, str] = {
    SourceKind.RMD: "html",
    SourceKind.RMARKDOWN: "markdown",
}

_KIND_BY_EXTENSION: Dict[str, SourceKind] = {
    ".rmd": SourceKind.RMD,
    ".rmarkdown": SourceKind.RMARKDOWN,
    ".md": SourceKind.MARKDOWN,
    ".markdown": SourceKind.MARKDOWN,
}


def split_ext(path: str) -> tuple[str, str]:
    return posixpath.splitext(path)


def basename_key(path: str) -> str:
    """Return ``path`` without its extension."""
    return split_ext(path)[0]


def with_ext(path: str, ext: str) -> str:
    """Replace the extension of ``path`` with ``ext`` (given without a dot)."""
    return f"{basename_key(path)}.{ext.lstrip('.')}"


def source_kind(path: str) -> Optional[SourceKind]:
    """Classify ``path`` by extension; returns None for non-source files.

    The R Markdown extensions match with either case on the leading ``R``;
    plain Markdown extensions must be lower case.
    """
    ext = split_ext(path)[1]
    if ext[1:2] in {"R", "r"}:
        return _KIND_BY_EXTENSION.get(ext.lower())
    return _KIND_BY_EXTENSION.get(ext)


def output_path(source_path: str, kind: SourceKind) -> Optional[str]:
    """Return the expected output path for a source, or None if it has none."""
    ext = EXTENSION_RULES.get(kind)
    if ext is None:
        return None
    return with_ext(source_path, ext)


__all__ = [
    "EXTENSION_RULES",
    "basename_key",
    "output_path",
    "source_kind",
    "with_ext",
]
