"""Check implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .base import Check, Site
from .config import ConfigCheck
from .content import ContentCheck, build_content_report, scan_content
from .gitignore import GitignoreCheck
from .hugo import HugoCheck
from .netlify import NetlifyCheck

_ENTRY_POINT_GROUP = "sitecheck.checks"

# Report order: configuration first, content last.
_BUILTIN_FACTORIES: dict[str, Callable[[], Check]] = {
    "config": ConfigCheck,
    "gitignore": GitignoreCheck,
    "hugo": HugoCheck,
    "netlify": NetlifyCheck,
    "content": ContentCheck,
}

BUILTIN_CHECKS = tuple(_BUILTIN_FACTORIES)


def discover_checks(enabled: Sequence[str] | None = None) -> List[Check]:
    """Return instantiated checks in report order, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    checks: List[Check] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Check]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, Check):
            raise TypeError(f"Check factory for '{name}' did not return a Check instance")
        if not instance.name:
            instance.name = key
        checks.append(instance)
        seen.add(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Failed to load check entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> Check:
            return _coerce_check(obj)

        _add(name, _factory)

    if enabled_set:
        missing = enabled_set - seen
        if missing:
            raise ValueError(f"Unknown checks requested: {', '.join(sorted(missing))}")

    return checks


def _coerce_check(obj: object) -> Check:
    if isinstance(obj, Check):
        return obj
    if isinstance(obj, type) and issubclass(obj, Check):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Check):
            return instance
    raise TypeError("Check entry point must be a Check subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "BUILTIN_CHECKS",
    "Check",
    "ConfigCheck",
    "ContentCheck",
    "GitignoreCheck",
    "HugoCheck",
    "NetlifyCheck",
    "Site",
    "build_content_report",
    "discover_checks",
    "scan_content",
]
