"""Typed loaders for the Hugo site configuration and netlify.toml.

Hugo treats configuration keys case-insensitively (``baseURL`` and ``baseurl``
are the same setting). Keys are lower-cased once, at load time, so that the
rest of the code reads plain attributes from :class:`SiteConfig` instead of
case-folding lookups at every call site.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_CANDIDATES = (
    "config.yaml",
    "config.yml",
    "config.toml",
    "hugo.yaml",
    "hugo.yml",
    "hugo.toml",
)
NETLIFY_FILENAME = "netlify.toml"
DEFAULT_CONTENT_DIR = "content"
DEFAULT_PUBLISH_DIR = "public"


class SiteConfigError(RuntimeError):
    """Raised when a site or deployment configuration file cannot be parsed."""


@dataclass
class SiteConfig:
    """Normalised view of the Hugo configuration file."""

    path: Path
    base_url: Optional[str] = None
    ignore_files: Optional[List[str]] = None
    goldmark_unsafe: Optional[bool] = None
    markdown_handler: Optional[str] = None
    has_markup: bool = False
    content_dir: str = DEFAULT_CONTENT_DIR
    publish_dir: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def format(self) -> str:
        return self.path.suffix.lstrip(".").lower().replace("yml", "yaml")


@dataclass
class NetlifyConfig:
    """Settings read from netlify.toml."""

    path: Path
    hugo_version: Optional[str] = None
    hugo_version_context: Optional[str] = None
    publish: Optional[str] = None


def find_config(root: Path) -> Optional[Path]:
    """Return the first Hugo configuration file found in ``root``."""
    for name in CONFIG_CANDIDATES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_site_config(root: Path) -> Optional[SiteConfig]:
    """Load the Hugo config for the site rooted at ``root``, or ``None`` if absent."""
    path = find_config(root)
    if path is None:
        return None
    data = normalize_keys(_read_structured(path))
    if not isinstance(data, dict):
        raise SiteConfigError(f"{path.name} must contain a mapping at the root")

    markup = _as_dict(data.get("markup"))
    renderer = _as_dict(_as_dict(markup.get("goldmark")).get("renderer"))
    unsafe = renderer.get("unsafe")

    return SiteConfig(
        path=path,
        base_url=_as_str(data.get("baseurl")),
        ignore_files=_as_str_list(data.get("ignorefiles")),
        goldmark_unsafe=unsafe if isinstance(unsafe, bool) else None,
        markdown_handler=_as_str(markup.get("defaultmarkdownhandler")),
        has_markup="markup" in data,
        content_dir=_as_str(data.get("contentdir")) or DEFAULT_CONTENT_DIR,
        publish_dir=_as_str(data.get("publishdir")),
        raw=data,
    )


def load_netlify_config(root: Path) -> Optional[NetlifyConfig]:
    """Load netlify.toml from ``root``, or ``None`` if the file does not exist."""
    path = root / NETLIFY_FILENAME
    if not path.is_file():
        return None
    data = _read_structured(path)

    production_env = _as_dict(
        _as_dict(_as_dict(data.get("context")).get("production")).get("environment")
    )
    build = _as_dict(data.get("build"))
    build_env = _as_dict(build.get("environment"))

    version = _as_str(production_env.get("HUGO_VERSION"))
    version_context = "context.production" if version else None
    if version is None:
        version = _as_str(build_env.get("HUGO_VERSION"))
        version_context = "build" if version else None

    return NetlifyConfig(
        path=path,
        hugo_version=version,
        hugo_version_context=version_context,
        publish=_as_str(build.get("publish")),
    )


def normalize_keys(value: Any) -> Any:
    """Recursively lower-case every mapping key."""
    if isinstance(value, dict):
        return {str(key).lower(): normalize_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value


def _read_structured(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    if path.suffix.lower() == ".toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise SiteConfigError(f"Failed to parse {path.name}: {exc}") from exc
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SiteConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_str_list(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value]
    return None


__all__ = [
    "CONFIG_CANDIDATES",
    "DEFAULT_PUBLISH_DIR",
    "NetlifyConfig",
    "SiteConfig",
    "SiteConfigError",
    "find_config",
    "load_netlify_config",
    "load_site_config",
    "normalize_keys",
]
