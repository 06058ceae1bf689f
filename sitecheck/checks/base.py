"""Base classes for site checks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..content_scanner import ContentScanner
from ..filesystem import FileSystem, LocalFileSystem
from ..hugo import HugoLocator
from ..models import CheckContext, CheckSection
from ..settings import SiteCheckSettings
from ..site_config import SiteConfig, load_site_config


@dataclass
class Site:
    """The site under inspection and the collaborators used to query it."""

    root: Path
    settings: SiteCheckSettings
    hugo: HugoLocator = field(default_factory=HugoLocator)
    scanner: ContentScanner = field(default_factory=ContentScanner)
    fs: Optional[FileSystem] = None

    def __post_init__(self) -> None:
        if self.fs is None:
            self.fs = LocalFileSystem(self.root)

    def config(self) -> Optional[SiteConfig]:
        return load_site_config(self.root)

    def hugo_version(self) -> Optional[str]:
        """The Hugo version used for the site: pinned in settings, else the first on PATH."""
        return self.settings.hugo.version or self.hugo.current_version()


class Check(ABC):
    """Contract for checks that inspect one aspect of a site."""

    name: str = ""
    title: str = ""

    def supports(self, site: Site) -> bool:
        """Return True when this check applies to the site."""
        return True

    @abstractmethod
    def run(self, site: Site, context: CheckContext) -> CheckSection:
        """Inspect the site and return the findings section."""
