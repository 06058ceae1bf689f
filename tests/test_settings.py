"""Tests for sitecheck.settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitecheck.settings import (
    DEFAULT_LEGACY_SIZE_THRESHOLD,
    ConfigError,
    SiteCheckSettings,
    load_settings,
)


def test_load_settings_returns_defaults_when_missing(tmp_path: Path) -> None:
    settings = load_settings(tmp_path)

    assert isinstance(settings, SiteCheckSettings)
    assert settings.root == tmp_path.resolve()
    assert settings.exists is False
    assert settings.hugo.version is None
    assert settings.content.exclude_paths == []
    assert settings.checks.enabled == []
    assert settings.legacy_size_threshold == DEFAULT_LEGACY_SIZE_THRESHOLD


def test_load_settings_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".sitecheck.yml").write_text(
        """
hugo:
  version: "0.111.3"
content:
  exclude_paths:
    - "drafts/"
    - "*.bak.md"
checks:
  enabled: [config, content]
legacy:
  size_threshold: 150000
""",
        encoding="utf-8",
    )

    settings = load_settings(tmp_path / ".sitecheck.yml")

    assert settings.exists is True
    assert settings.hugo.version == "0.111.3"
    assert settings.content.exclude_paths == ["drafts/", "*.bak.md"]
    assert settings.checks.enabled == ["config", "content"]
    assert settings.legacy_size_threshold == 150_000


def test_load_settings_ignores_invalid_threshold(tmp_path: Path) -> None:
    (tmp_path / ".sitecheck.yml").write_text("legacy:\n  size_threshold: -5\n", encoding="utf-8")

    assert load_settings(tmp_path).legacy_size_threshold == DEFAULT_LEGACY_SIZE_THRESHOLD


def test_load_settings_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".sitecheck.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(tmp_path)


def test_load_settings_wraps_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".sitecheck.yml").write_text("hugo: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_settings(tmp_path)
