from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Sequence

import pytest

from sitecheck.checks import Site
from sitecheck.orchestrator import SiteChecker
from sitecheck.settings import load_settings
from tests._fixtures.fake_fs import FakeFileSystem
from tests._fixtures.site_builder import SiteBuilder
from tests._fixtures.stub_hugo import StubHugoLocator

TODAY = date(2026, 10, 18)


@pytest.fixture
def site_builder(tmp_path: Path) -> SiteBuilder:
    """Provide a reusable site builder rooted at the pytest tmp_path."""
    return SiteBuilder(tmp_path)


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def make_site(site_builder: SiteBuilder) -> Callable[..., Site]:
    """Return a factory building a Site for the builder's root."""

    def _make(versions: Sequence[str] = ("0.111.3",)) -> Site:
        root = site_builder.path()
        return Site(root=root, settings=load_settings(root), hugo=StubHugoLocator(versions))

    return _make


@pytest.fixture
def checker() -> SiteChecker:
    """SiteChecker with a fixed date and a single installed Hugo."""
    return SiteChecker(hugo=StubHugoLocator(["0.111.3"]), today=lambda: TODAY)
