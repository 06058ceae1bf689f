"""Tests for sitecheck.checks.content."""

from __future__ import annotations

from datetime import date

from sitecheck.checks import ContentCheck, Site, build_content_report
from sitecheck.content.models import ContentTree, SourceDocument, SourceKind
from sitecheck.models import CheckContext, Status
from sitecheck.settings import load_settings
from tests._fixtures.stub_hugo import StubHugoLocator

CONTEXT = CheckContext(today=date(2026, 10, 18))


def test_content_report_runs_on_injected_filesystem(site_builder, fake_fs) -> None:
    root = site_builder.path()
    site = Site(root=root, settings=load_settings(root), hugo=StubHugoLocator(), fs=fake_fs)
    fake_fs.add("content/a.Rmd", mtime=200)
    fake_fs.add("content/a.html", mtime=150)
    fake_fs.add("content/d.md", mtime=10)
    fake_fs.add("content/d.html", mtime=10)
    tree = ContentTree(
        root=str(root),
        content_dir="content",
        documents=[
            SourceDocument(path="content/a.Rmd", kind=SourceKind.RMD, mtime=200),
            SourceDocument(path="content/d.md", kind=SourceKind.MARKDOWN, mtime=10),
        ],
        html_files=["content/a.html", "content/d.html"],
    )

    report = build_content_report(site, CONTEXT, tree)

    assert report.stale == ["content/a.Rmd"]
    assert report.paths("duplicates") == ["content/d.html"]


def test_missing_content_dir_is_reported_first(make_site) -> None:
    section = ContentCheck().run(make_site(), CONTEXT)

    assert section.findings[0].status is Status.TODO
    assert section.findings[0].message == 'Content directory "content" was not found.'
