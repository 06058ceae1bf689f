"""Checks for the local Hugo installation and the pinned version."""

from __future__ import annotations

from ..models import CheckContext, CheckSection
from ..settings import SETTINGS_FILENAME
from ..site_config import NETLIFY_FILENAME, find_config
from .base import Check, Site


class HugoCheck(Check):
    name = "hugo"
    title = "Hugo"

    def supports(self, site: Site) -> bool:
        return find_config(site.root) is not None

    def run(self, site: Site, context: CheckContext) -> CheckSection:
        section = CheckSection(name=self.name, title=self.title)
        section.progress("version", "Checking Hugo version...")

        installed = site.hugo.installed_versions()
        if not installed:
            section.todo(
                "version",
                "Hugo not found - install Hugo and make sure it is on your PATH.",
            )
            return section

        current = site.hugo.current_version() or installed[0]
        count = len(installed)
        prefix = f"{count} versions of " if count > 1 else ""
        section.success("version", f"Found {prefix}Hugo. You are using Hugo {current}.")

        section.progress("pinned", f"Checking {SETTINGS_FILENAME} for the pinned Hugo version...")
        pinned = site.settings.hugo.version
        if pinned is not None:
            section.success("pinned", f"Hugo {pinned} is pinned for this site.")
            if pinned not in installed:
                section.todo(
                    "pinned",
                    f"The pinned Hugo {pinned} is not installed; installed: {', '.join(installed)}.",
                )
        else:
            section.progress("pinned", f"Hugo version not set in {SETTINGS_FILENAME}.")
            if not site.settings.exists:
                section.todo("pinned", f"Create {SETTINGS_FILENAME} in the site root.")
            section.todo(
                "pinned",
                f'Set the Hugo version in {SETTINGS_FILENAME}: hugo: {{version: "{current}"}}',
            )

        if (site.root / NETLIFY_FILENAME).is_file() and not context.in_site_check:
            section.todo(
                "netlify",
                "Also run `sitecheck check --only netlify` to check for possible problems "
                "with Hugo and Netlify.",
            )
        return section
