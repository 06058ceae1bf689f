"""Tests for sitecheck.checks.config."""

from __future__ import annotations

from datetime import date

from sitecheck.checks.config import REQUIRED_IGNORE_FILES, ConfigCheck, is_example_url
from sitecheck.models import CheckContext, Status
from sitecheck.site_config import load_site_config

CONTEXT = CheckContext(today=date(2026, 10, 18))
GOOD_IGNORE = '["\\\\.Rmd$", "\\\\.Rmarkdown$", "_cache$", "\\\\.knit\\\\.md$", "\\\\.utf8\\\\.md$"]'


def _todos(section, category):
    return [f.message for f in section.findings if f.category == category and f.status is Status.TODO]


def _successes(section, category):
    return [f.message for f in section.findings if f.category == category and f.status is Status.SUCCESS]


def test_is_example_url() -> None:
    assert is_example_url("https://example.org/")
    assert is_example_url("http://www.example.com")
    assert is_example_url("https://replace-this-with-your-hugo-site.com/")
    assert not is_example_url("https://yihui.org/")
    assert not is_example_url(None)


def test_missing_config_is_todo(make_site) -> None:
    section = ConfigCheck().run(make_site(), CONTEXT)

    assert section.todo_count == 1
    assert "No Hugo configuration file" in section.findings[0].message


def test_base_url_states(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": "baseURL: https://example.org/\n"})
    assert _todos(ConfigCheck().run(make_site(), CONTEXT), "base_url") == [
        'Set "baseURL" to "/" if you do not yet have a domain.'
    ]

    site_builder.write({"config.yaml": "baseURL: /\n"})
    assert _todos(ConfigCheck().run(make_site(), CONTEXT), "base_url") == [
        'Update "baseURL" to your actual URL when ready to publish.'
    ]

    site_builder.write({"config.yaml": "BaseURL: https://blog.example.net/\n"})
    assert _successes(ConfigCheck().run(make_site(), CONTEXT), "base_url") == [
        'Found baseURL = "https://blog.example.net/"; nothing to do here!'
    ]


def test_ignore_files_missing_setting(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": "baseURL: /\n"})

    todos = _todos(ConfigCheck().run(make_site(), CONTEXT), "ignore_files")

    assert len(todos) == 1
    assert todos[0].startswith('Set "ignoreFiles" to [')
    assert '"\\\\.Rmd$"' in todos[0]


def test_ignore_files_lists_missing_items(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": 'ignoreFiles: ["\\\\.Rmd$", "_cache$"]\n'})

    todos = _todos(ConfigCheck().run(make_site(), CONTEXT), "ignore_files")

    assert todos == [
        'Add these items to the "ignoreFiles" setting: "\\\\.Rmarkdown$", "\\\\.knit\\\\.md$", "\\\\.utf8\\\\.md$"'
    ]


def test_ignore_files_rejects_files_pattern(site_builder, make_site) -> None:
    site_builder.write(
        {"config.yaml": f'ignoreFiles: {GOOD_IGNORE[:-1]}, "_files$"]\n'}
    )

    config = load_site_config(site_builder.path())
    assert config is not None and set(REQUIRED_IGNORE_FILES) <= set(config.ignore_files or [])
    assert _todos(ConfigCheck().run(make_site(), CONTEXT), "ignore_files") == [
        'Remove "_files$" from "ignoreFiles"'
    ]


def test_ignore_files_complete(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": f"ignoreFiles: {GOOD_IGNORE}\n"})

    section = ConfigCheck().run(make_site(), CONTEXT)

    assert _todos(section, "ignore_files") == []
    assert _successes(section, "ignore_files") == ['"ignoreFiles" looks good - nothing to do here!']


def test_goldmark_todo_for_recent_hugo(site_builder, make_site) -> None:
    site_builder.write({"config.toml": 'baseURL = "/"\n'})

    section = ConfigCheck().run(make_site(["0.111.3"]), CONTEXT)

    goldmark = [f for f in section.findings if f.category == "goldmark" and f.status is Status.TODO]
    assert len(goldmark) == 1
    assert "[markup.goldmark.renderer]" in (goldmark[0].remedy or "")


def test_goldmark_fix_appends_snippet(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": "baseURL: /\n"})
    context = CheckContext(today=date(2026, 10, 18), fix=True)

    section = ConfigCheck().run(make_site(["0.111.3"]), context)

    assert _todos(section, "goldmark") == []
    config = load_site_config(site_builder.path())
    assert config is not None and config.goldmark_unsafe is True


def test_goldmark_fix_refuses_existing_markup_section(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": "markup:\n  highlight:\n    style: github\n"})
    context = CheckContext(today=date(2026, 10, 18), fix=True)

    section = ConfigCheck().run(make_site(["0.111.3"]), context)

    assert len(_todos(section, "goldmark")) == 1
    assert "goldmark" not in (site_builder.path() / "config.yaml").read_text(encoding="utf-8")


def test_goldmark_other_handler_or_old_hugo(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": "markup:\n  defaultMarkdownHandler: blackfriday\n"})
    assert _todos(ConfigCheck().run(make_site(["0.111.3"]), CONTEXT), "goldmark") == []

    site_builder.write({"config.yaml": "baseURL: /\n"})
    assert _successes(ConfigCheck().run(make_site(["0.59.1"]), CONTEXT), "goldmark") == ["All set!"]


def test_goldmark_unsafe_already_set(site_builder, make_site) -> None:
    site_builder.write({"config.yaml": "markup:\n  goldmark:\n    renderer:\n      unsafe: true\n"})

    assert _successes(ConfigCheck().run(make_site(), CONTEXT), "goldmark") == [
        'All set! Found the "unsafe" setting for goldmark.'
    ]
