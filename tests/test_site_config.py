"""Tests for sitecheck.site_config."""

from __future__ import annotations

import pytest

from sitecheck.site_config import (
    SiteConfigError,
    find_config,
    load_netlify_config,
    load_site_config,
    normalize_keys,
)


def test_yaml_config_keys_are_normalised(site_builder) -> None:
    site_builder.write(
        {
            "config.yaml": """
            baseURL: https://blog.example.net/
            ignoreFiles: ["\\\\.Rmd$", "_cache$"]
            contentDir: posts
            publishDir: docs
            markup:
              defaultMarkdownHandler: goldmark
              goldmark:
                renderer:
                  unsafe: true
            """
        }
    )

    config = load_site_config(site_builder.path())

    assert config is not None
    assert config.format == "yaml"
    assert config.base_url == "https://blog.example.net/"
    assert config.ignore_files == [r"\.Rmd$", "_cache$"]
    assert config.content_dir == "posts"
    assert config.publish_dir == "docs"
    assert config.markdown_handler == "goldmark"
    assert config.goldmark_unsafe is True
    assert config.has_markup is True


def test_toml_config_defaults(site_builder) -> None:
    site_builder.write({"config.toml": 'BaseUrl = "/"\ntitle = "Blog"\n'})

    config = load_site_config(site_builder.path())

    assert config is not None
    assert config.format == "toml"
    assert config.base_url == "/"
    assert config.ignore_files is None
    assert config.goldmark_unsafe is None
    assert config.content_dir == "content"
    assert config.publish_dir is None
    assert config.has_markup is False


def test_missing_config_returns_none(site_builder) -> None:
    assert find_config(site_builder.path()) is None
    assert load_site_config(site_builder.path()) is None


def test_config_yaml_preferred_over_toml(site_builder) -> None:
    site_builder.write({"config.toml": 'baseURL = "/"\n', "config.yaml": "baseURL: /\n"})

    assert find_config(site_builder.path()).name == "config.yaml"


def test_invalid_config_raises(site_builder) -> None:
    site_builder.write({"config.toml": "baseURL = \n"})

    with pytest.raises(SiteConfigError):
        load_site_config(site_builder.path())


def test_netlify_prefers_production_context(site_builder) -> None:
    site_builder.write(
        {
            "netlify.toml": """
            [build]
            publish = "public/"
            [build.environment]
            HUGO_VERSION = "0.100.0"
            [context.production.environment]
            HUGO_VERSION = "0.111.3"
            """
        }
    )

    netlify = load_netlify_config(site_builder.path())

    assert netlify is not None
    assert netlify.hugo_version == "0.111.3"
    assert netlify.hugo_version_context == "context.production"
    assert netlify.publish == "public/"


def test_netlify_falls_back_to_build_environment(site_builder) -> None:
    site_builder.write({"netlify.toml": '[build.environment]\nHUGO_VERSION = "0.100.0"\n'})

    netlify = load_netlify_config(site_builder.path())

    assert netlify is not None
    assert netlify.hugo_version == "0.100.0"
    assert netlify.hugo_version_context == "build"
    assert netlify.publish is None


def test_normalize_keys_is_recursive() -> None:
    assert normalize_keys({"A": [{"B": 1}], "c": {"D": {"E": 2}}}) == {
        "a": [{"b": 1}],
        "c": {"d": {"e": 2}},
    }
