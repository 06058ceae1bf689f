"""Checks for the Hugo configuration file."""

from __future__ import annotations

import json
import re
from typing import Optional

from ..hugo import version_at_least
from ..logging import get_logger
from ..models import CheckContext, CheckSection
from ..site_config import CONFIG_CANDIDATES, SiteConfig
from .base import Check, Site

_EXAMPLE_URL = re.compile(
    r"^https?://(www[.])?(example.(org|com)|replace-this-with-your-hugo-site.com)/?"
)

REQUIRED_IGNORE_FILES = [
    r"\.Rmd$",
    r"\.Rmarkdown$",
    "_cache$",
    r"\.knit\.md$",
    r"\.utf8\.md$",
]

_GOLDMARK_SNIPPETS = {
    "yaml": """
markup:
  goldmark:
    renderer:
      unsafe: true
""",
    "toml": """
[markup]
  [markup.goldmark]
    [markup.goldmark.renderer]
      unsafe = true
""",
}

logger = get_logger("checks.config")


def is_example_url(url: Optional[str]) -> bool:
    return isinstance(url, str) and _EXAMPLE_URL.match(url) is not None


def goldmark_snippet(config: SiteConfig) -> Optional[str]:
    return _GOLDMARK_SNIPPETS.get(config.format)


def apply_goldmark_fix(config: SiteConfig) -> bool:
    """Append the goldmark ``unsafe`` setting to the config file.

    Returns False when the file already declares a ``markup`` section, since
    appending a second one would produce an invalid file.
    """
    snippet = goldmark_snippet(config)
    if snippet is None or config.has_markup:
        return False
    with config.path.open("a", encoding="utf-8") as handle:
        handle.write(snippet)
    logger.info("Appended goldmark renderer setting to %s", config.path)
    return True


class ConfigCheck(Check):
    """Checks baseURL, ignoreFiles and the goldmark renderer setting."""

    name = "config"
    title = "Hugo configuration"

    def run(self, site: Site, context: CheckContext) -> CheckSection:
        config = site.config()
        if config is None:
            section = CheckSection(name=self.name, title=self.title)
            section.todo(
                "config",
                "No Hugo configuration file was found.",
                remedy=f"Create one of: {', '.join(CONFIG_CANDIDATES)}.",
            )
            return section

        section = CheckSection(name=self.name, title=f"Hugo configuration ({config.path.name})")
        self._check_base_url(section, config)
        self._check_ignore_files(section, config)
        self._check_goldmark(section, config, site, context)
        return section

    def _check_base_url(self, section: CheckSection, config: SiteConfig) -> None:
        section.progress("base_url", 'Checking "baseURL" setting for Hugo...')
        base = config.base_url
        if base is None or is_example_url(base):
            section.todo("base_url", 'Set "baseURL" to "/" if you do not yet have a domain.')
        elif base == "/":
            section.todo("base_url", 'Update "baseURL" to your actual URL when ready to publish.')
        else:
            section.success("base_url", f'Found baseURL = "{base}"; nothing to do here!')

    def _check_ignore_files(self, section: CheckSection, config: SiteConfig) -> None:
        section.progress("ignore_files", 'Checking "ignoreFiles" setting for Hugo...')
        current = config.ignore_files
        if current is None:
            section.todo(
                "ignore_files",
                f'Set "ignoreFiles" to {json.dumps(REQUIRED_IGNORE_FILES)}',
            )
            return
        missing = [item for item in REQUIRED_IGNORE_FILES if item not in current]
        if missing:
            section.todo(
                "ignore_files",
                'Add these items to the "ignoreFiles" setting: '
                + ", ".join(json.dumps(item) for item in missing),
            )
        elif "_files$" in current:
            section.todo("ignore_files", 'Remove "_files$" from "ignoreFiles"')
        else:
            section.success("ignore_files", '"ignoreFiles" looks good - nothing to do here!')

    def _check_goldmark(
        self,
        section: CheckSection,
        config: SiteConfig,
        site: Site,
        context: CheckContext,
    ) -> None:
        section.progress("goldmark", "Checking setting for Hugo's Markdown renderer...")
        unsafe = config.goldmark_unsafe
        if unsafe is not None or not version_at_least(site.hugo_version(), "0.60"):
            suffix = ' Found the "unsafe" setting for goldmark.' if unsafe is not None else ""
            section.success("goldmark", f"All set!{suffix}")
            return

        handler = config.markdown_handler
        if handler is not None and handler.lower() != "goldmark":
            section.progress("goldmark", f"You are using the Markdown renderer '{handler}'.")
            section.success(
                "goldmark", "No todos now. If you install a new Hugo version, re-run this check."
            )
            return

        section.progress("goldmark", "You are using the Markdown renderer 'goldmark'.")
        if context.fix and apply_goldmark_fix(config):
            section.success(
                "goldmark", f"Allowed goldmark to render raw HTML by updating {config.path.name}."
            )
            return
        section.todo(
            "goldmark",
            f"Allow goldmark to render raw HTML by adding this setting to {config.path.name}.",
            remedy=(goldmark_snippet(config) or "").strip() or None,
        )
