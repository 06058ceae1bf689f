"""Tests for sitecheck.checks.gitignore."""

from __future__ import annotations

from datetime import date

from sitecheck.checks.gitignore import GitignoreCheck
from sitecheck.models import CheckContext, Status

CONTEXT = CheckContext(today=date(2026, 10, 18))


def _messages(section, status):
    return [f.message for f in section.findings if f.status is status]


def test_missing_gitignore(make_site) -> None:
    section = GitignoreCheck().run(make_site(), CONTEXT)

    assert _messages(section, Status.TODO) == [".gitignore was not found. You may want to add this."]


def test_flags_items_to_remove_and_suggests_safe_items(site_builder, make_site) -> None:
    site_builder.write({".gitignore": "*.html\n.DS_Store\nstatic\n"})

    todos = _messages(GitignoreCheck().run(make_site(), CONTEXT), Status.TODO)

    assert todos == [
        "Remove items from .gitignore: *.html, static",
        "You can safely add to .gitignore: Thumbs.db",
    ]


def test_clean_gitignore(site_builder, make_site) -> None:
    site_builder.write({".gitignore": ".DS_Store\nThumbs.db\n"})

    section = GitignoreCheck().run(make_site(), CONTEXT)

    assert section.todo_count == 0
    assert "Found! You have safely ignored: .DS_Store, Thumbs.db" in _messages(section, Status.SUCCESS)


def test_netlify_build_dirs_suggested_only_with_netlify(site_builder, make_site) -> None:
    site_builder.write({".gitignore": ".DS_Store\nThumbs.db\npublic\n"})
    assert GitignoreCheck().run(make_site(), CONTEXT).todo_count == 0

    site_builder.write({"netlify.toml": "[build]\n"})
    todos = _messages(GitignoreCheck().run(make_site(), CONTEXT), Status.TODO)

    assert todos == ["When Netlify builds your site, you can safely add to .gitignore: resources"]
