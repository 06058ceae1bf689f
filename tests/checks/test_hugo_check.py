"""Tests for sitecheck.checks.hugo."""

from __future__ import annotations

from datetime import date

from sitecheck.checks.hugo import HugoCheck
from sitecheck.models import CheckContext, Status

CONTEXT = CheckContext(today=date(2026, 10, 18))


def _messages(section, status):
    return [f.message for f in section.findings if f.status is status]


def test_only_supports_hugo_sites(site_builder, make_site) -> None:
    assert not HugoCheck().supports(make_site())

    site_builder.write({"config.toml": 'baseURL = "/"\n'})
    assert HugoCheck().supports(make_site())


def test_hugo_not_installed(site_builder, make_site) -> None:
    site_builder.write({"config.toml": 'baseURL = "/"\n'})

    section = HugoCheck().run(make_site(versions=()), CONTEXT)

    assert _messages(section, Status.TODO) == [
        "Hugo not found - install Hugo and make sure it is on your PATH."
    ]


def test_reports_versions_and_missing_pin(site_builder, make_site) -> None:
    site_builder.write({"config.toml": 'baseURL = "/"\n'})

    section = HugoCheck().run(make_site(versions=("0.111.3", "0.100.0")), CONTEXT)

    assert "Found 2 versions of Hugo. You are using Hugo 0.111.3." in _messages(section, Status.SUCCESS)
    todos = _messages(section, Status.TODO)
    assert todos[0] == "Create .sitecheck.yml in the site root."
    assert '"0.111.3"' in todos[1]


def test_pinned_version(site_builder, make_site) -> None:
    site_builder.write(
        {
            "config.toml": 'baseURL = "/"\n',
            ".sitecheck.yml": 'hugo:\n  version: "0.100.0"\n',
        }
    )

    section = HugoCheck().run(make_site(versions=("0.111.3",)), CONTEXT)

    assert "Hugo 0.100.0 is pinned for this site." in _messages(section, Status.SUCCESS)
    assert _messages(section, Status.TODO) == [
        "The pinned Hugo 0.100.0 is not installed; installed: 0.111.3."
    ]


def test_netlify_hint_only_outside_site_check(site_builder, make_site) -> None:
    site_builder.write(
        {
            "config.toml": 'baseURL = "/"\n',
            ".sitecheck.yml": 'hugo:\n  version: "0.111.3"\n',
            "netlify.toml": "[build]\n",
        }
    )

    standalone = HugoCheck().run(make_site(), CONTEXT)
    in_site_check = HugoCheck().run(make_site(), CheckContext(today=CONTEXT.today, in_site_check=True))

    assert [f.category for f in standalone.findings if f.status is Status.TODO] == ["netlify"]
    assert in_site_check.todo_count == 0
