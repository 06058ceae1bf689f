"""Content directory scanning and front-matter extraction."""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass
from datetime import date, datetime
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import yaml

from .content.models import ContentTree, FrontMatter, SourceDocument
from .content.paths import source_kind
from .logging import get_logger
from .site_config import DEFAULT_CONTENT_DIR, normalize_keys

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".Rproj.user",
}

_EXCLUDED_DIR_SUFFIXES = ("_files", "_cache")

# Intermediate files left behind by an interrupted knit.
_INTERMEDIATE_SUFFIXES = (".knit.md", ".utf8.md")

logger = get_logger("content_scanner")


@dataclass
class IgnoreRule:
    """A gitignore-style pattern from ``content.exclude_paths``."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


def _skip_dir(name: str) -> bool:
    return name in _EXCLUDED_DIRS or name.endswith(_EXCLUDED_DIR_SUFFIXES)


def _skip_file(name: str) -> bool:
    if name.startswith("_") and not name.startswith("_index."):
        return True
    return name.endswith(_INTERMEDIATE_SUFFIXES)


def _iter_files(content_root: Path, rules: Sequence[IgnoreRule]) -> Iterator[Tuple[Path, str]]:
    for dirpath, dirnames, filenames in os.walk(content_root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(content_root).as_posix() if current_dir != content_root else ""

        kept = []
        for name in sorted(dirnames):
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _skip_dir(name) or _should_ignore(rel_path, True, rules):
                continue
            kept.append(name)
        dirnames[:] = kept

        for filename in sorted(filenames):
            if _skip_file(filename):
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield current_dir / filename, rel_path


def split_front_matter(text: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(block, format)`` for a leading YAML (---) or TOML (+++) block."""
    lines = text.lstrip("\ufeff").splitlines()
    if not lines:
        return None, None
    opener = lines[0].strip()
    if opener == "---":
        closers, fmt = {"---", "..."}, "yaml"
    elif opener == "+++":
        closers, fmt = {"+++"}, "toml"
    else:
        return None, None
    for index in range(1, len(lines)):
        if lines[index].strip() in closers:
            return "\n".join(lines[1:index]), fmt
    return None, None


def parse_date(value: Any) -> Tuple[Optional[date], Optional[str]]:
    """Coerce a front-matter date value, returning ``(date, error)``."""
    if value is None:
        return None, None
    if isinstance(value, datetime):
        return value.date(), None
    if isinstance(value, date):
        return value, None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None, None
        try:
            return datetime.fromisoformat(text).date(), None
        except ValueError:
            pass
        try:
            return date.fromisoformat(text[:10]), None
        except ValueError:
            return None, f"unrecognised date {value!r}"
    return None, f"unsupported date value {value!r}"


class _FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as strings so ``parse_date`` can judge them."""


_FrontMatterLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str
)

_TOML_DATE_LINE = re.compile(r"^\s*date\s*=", re.IGNORECASE)


def _load_toml_block(block: str) -> Tuple[Any, Optional[str]]:
    try:
        return tomllib.loads(block), None
    except tomllib.TOMLDecodeError as exc:
        # An invalid date literal must not hide the other fields.
        kept = [line for line in block.splitlines() if not _TOML_DATE_LINE.match(line)]
        if len(kept) == len(block.splitlines()):
            raise
        return tomllib.loads("\n".join(kept)), f"invalid date: {exc}"


def parse_front_matter(text: str) -> FrontMatter:
    block, fmt = split_front_matter(text)
    if block is None:
        return FrontMatter()
    toml_error = None
    if fmt == "toml":
        data, toml_error = _load_toml_block(block)
    else:
        data = yaml.load(block, Loader=_FrontMatterLoader)
    if not isinstance(data, dict):
        return FrontMatter()
    data = normalize_keys(data)

    parsed_date, error = parse_date(data.get("date"))
    draft = data.get("draft")
    return FrontMatter(
        date=parsed_date,
        draft=draft if isinstance(draft, bool) else None,
        date_error=error or toml_error,
    )


def read_front_matter(path: Path) -> FrontMatter:
    """Read the front matter of ``path``; unreadable metadata yields an empty record."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
        return parse_front_matter(text)
    except (OSError, ValueError, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        logger.debug("Skipping front matter of %s: %s", path, exc)
        return FrontMatter()


class ContentScanner:
    """Walks a site's content directory to collect sources and HTML files."""

    def scan(
        self,
        root: str | Path,
        content_dir: str = DEFAULT_CONTENT_DIR,
        exclude_paths: Sequence[str] = (),
    ) -> ContentTree:
        root_path = Path(root).expanduser().resolve()
        if not root_path.is_dir():
            raise NotADirectoryError(f"Site path is not a directory: {root}")

        tree = ContentTree(root=str(root_path), content_dir=content_dir)
        content_root = root_path / content_dir
        if not content_root.is_dir():
            logger.debug("Content directory %s does not exist", content_root)
            return tree

        rules: List[IgnoreRule] = [
            rule for rule in (build_ignore_rule(p) for p in exclude_paths) if rule is not None
        ]
        prefix = content_root.relative_to(root_path).as_posix()

        for path, rel_path in _iter_files(content_root, rules):
            site_path = f"{prefix}/{rel_path}" if prefix != "." else rel_path
            if path.suffix == ".html":
                tree.html_files.append(site_path)
                continue
            kind = source_kind(site_path)
            if kind is None:
                continue
            tree.documents.append(
                SourceDocument(
                    path=site_path,
                    kind=kind,
                    mtime=path.stat().st_mtime,
                    front_matter=read_front_matter(path),
                )
            )

        logger.debug(
            "Scanned %s: %d source documents, %d html files",
            content_root,
            len(tree.documents),
            len(tree.html_files),
        )
        return tree


__all__ = [
    "ContentScanner",
    "IgnoreRule",
    "build_ignore_rule",
    "parse_date",
    "parse_front_matter",
    "read_front_matter",
    "split_front_matter",
]
