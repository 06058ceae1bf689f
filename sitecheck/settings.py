"""Configuration loading for sitecheck (.sitecheck.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

SETTINGS_FILENAME = ".sitecheck.yml"
DEFAULT_LEGACY_SIZE_THRESHOLD = 200_000


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be parsed."""


@dataclass
class HugoSettings:
    """Hugo toolchain preferences."""

    version: Optional[str] = None


@dataclass
class ContentSettings:
    """Content scanning options."""

    exclude_paths: List[str] = field(default_factory=list)


@dataclass
class ChecksSettings:
    """Check enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class SiteCheckSettings:
    """Represents the settings defined in .sitecheck.yml."""

    root: Path
    hugo: HugoSettings = field(default_factory=HugoSettings)
    content: ContentSettings = field(default_factory=ContentSettings)
    checks: ChecksSettings = field(default_factory=ChecksSettings)
    legacy_size_threshold: int = DEFAULT_LEGACY_SIZE_THRESHOLD
    exists: bool = False


def load_settings(settings_path: Path) -> SiteCheckSettings:
    """Load settings from disk, returning defaults when the file is absent."""
    settings_file = _resolve_settings_path(settings_path)
    root = settings_file.parent.resolve()

    if not settings_file.exists():
        return SiteCheckSettings(root=root)

    data = _read_settings(settings_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{SETTINGS_FILENAME} must contain a mapping at the root")

    hugo_data = _as_dict(data.get("hugo"))
    hugo = HugoSettings(version=_as_str(hugo_data.get("version")) if hugo_data else None)

    content_data = _as_dict(data.get("content"))
    content = ContentSettings()
    if content_data:
        content.exclude_paths = _as_str_list(content_data.get("exclude_paths"))

    checks_data = _as_dict(data.get("checks"))
    checks = ChecksSettings()
    if checks_data:
        checks.enabled = _as_str_list(checks_data.get("enabled"))

    legacy_data = _as_dict(data.get("legacy"))
    threshold = _as_int(legacy_data.get("size_threshold")) if legacy_data else None
    if threshold is None or threshold <= 0:
        threshold = DEFAULT_LEGACY_SIZE_THRESHOLD

    return SiteCheckSettings(
        root=root,
        hugo=hugo,
        content=content,
        checks=checks,
        legacy_size_threshold=threshold,
        exists=True,
    )


def _resolve_settings_path(settings_path: Path) -> Path:
    settings_path = settings_path.expanduser()
    if settings_path.is_dir():
        return (settings_path / SETTINGS_FILENAME).resolve()
    if settings_path.name != SETTINGS_FILENAME:
        return (settings_path.parent / SETTINGS_FILENAME).resolve()
    return settings_path.resolve()


def _read_settings(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.replace("_", ""))
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
