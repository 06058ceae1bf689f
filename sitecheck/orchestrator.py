"""Runs site checks in order and exposes the duplicate clean-up operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from .checks import Check, Site, discover_checks, scan_content
from .content import DeletionResult, DuplicateFinding, clean_duplicates, find_duplicates
from .content_scanner import ContentScanner
from .hugo import HugoLocator
from .logging import get_logger
from .models import CheckContext, CheckSection, SiteReport
from .settings import SETTINGS_FILENAME, ConfigError, SiteCheckSettings, load_settings
from .site_config import find_config


@dataclass
class CleanupOutcome:
    """Result of a duplicate clean-up run."""

    root: Path
    duplicates: List[DuplicateFinding]
    preview: bool
    results: List[DeletionResult] = field(default_factory=list)

    @property
    def failed(self) -> List[DeletionResult]:
        return [result for result in self.results if not result.deleted]


def find_site_root(path: Path) -> Path:
    """Return the nearest directory at or above ``path`` holding a Hugo config."""
    for candidate in (path, *path.parents):
        if find_config(candidate) is not None:
            return candidate
    return path


class SiteChecker:
    """Coordinates the checks for one site."""

    def __init__(
        self,
        hugo: HugoLocator | None = None,
        scanner: ContentScanner | None = None,
        checks: Optional[Iterable[Check]] = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.hugo = hugo or HugoLocator()
        self.scanner = scanner or ContentScanner()
        self._check_overrides = list(checks) if checks is not None else None
        self._today = today or date.today
        self.logger = get_logger("orchestrator")

    def run_check(
        self,
        path: str | Path,
        *,
        only: Sequence[str] | None = None,
        fix: bool = False,
    ) -> SiteReport:
        """Run every selected check and return the ordered report."""
        root = self._resolve_root(path)
        self.logger.info("Checking site at %s", root)

        report = SiteReport(root=str(root))
        settings = self._load_settings(root, report)
        site = self._build_site(root, settings)
        checks = self._select_checks(settings, only)
        self.logger.debug("Selected checks: %s", ", ".join(check.name for check in checks))

        context = CheckContext(today=self._today(), in_site_check=only is None, fix=fix)
        for check in checks:
            if not check.supports(site):
                self.logger.debug("Skipping check %s: not applicable", check.name)
                continue
            report.sections.append(self._run_single(check, site, context))

        self.logger.debug("Site check finished with %d todo(s)", report.todo_count)
        return report

    def find_duplicates(self, path: str | Path) -> List[DuplicateFinding]:
        root = self._resolve_root(path)
        site = self._build_site(root, self._load_settings(root))
        return find_duplicates(scan_content(site).documents, site.fs)

    def clean_duplicates(self, path: str | Path, *, preview: bool = True) -> CleanupOutcome:
        """List duplicate output files, deleting them only when ``preview`` is False."""
        root = self._resolve_root(path)
        site = self._build_site(root, self._load_settings(root))
        duplicates = find_duplicates(scan_content(site).documents, site.fs)
        outcome = CleanupOutcome(root=root, duplicates=duplicates, preview=preview)
        if preview or not duplicates:
            return outcome
        self.logger.info("Deleting %d duplicate file(s)", len(duplicates))
        outcome.results = clean_duplicates(duplicates, site.fs)
        return outcome

    def _resolve_root(self, path: str | Path) -> Path:
        target = Path(path).expanduser().resolve()
        if not target.exists():
            raise FileNotFoundError(f"Site path not found: {path}")
        if not target.is_dir():
            raise NotADirectoryError(f"Site path is not a directory: {path}")
        return find_site_root(target)

    def _load_settings(self, root: Path, report: SiteReport | None = None) -> SiteCheckSettings:
        try:
            return load_settings(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring %s: %s", SETTINGS_FILENAME, exc)
            if report is not None:
                section = CheckSection(name="settings", title=SETTINGS_FILENAME)
                section.todo("settings", f"{exc}. Using default settings.")
                report.sections.append(section)
            return SiteCheckSettings(root=root)

    def _build_site(self, root: Path, settings: SiteCheckSettings) -> Site:
        return Site(root=root, settings=settings, hugo=self.hugo, scanner=self.scanner)

    def _select_checks(
        self, settings: SiteCheckSettings, only: Sequence[str] | None
    ) -> List[Check]:
        if self._check_overrides is not None:
            if only is None:
                return list(self._check_overrides)
            wanted = {name.lower() for name in only}
            return [check for check in self._check_overrides if check.name in wanted]
        enabled = list(only) if only is not None else (settings.checks.enabled or None)
        return discover_checks(enabled)

    def _run_single(self, check: Check, site: Site, context: CheckContext) -> CheckSection:
        try:
            return check.run(site, context)
        except Exception as exc:
            self._log_exception(f"Check '{check.name}' failed", exc)
            section = CheckSection(name=check.name, title=check.title or check.name)
            section.todo("error", f"The {check.name} check could not complete: {exc}")
            return section

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)


__all__ = ["CleanupOutcome", "SiteChecker", "find_site_root"]
