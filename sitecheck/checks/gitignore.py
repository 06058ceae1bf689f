"""Checks for entries in .gitignore."""

from __future__ import annotations

from ..models import CheckContext, CheckSection
from ..site_config import NETLIFY_FILENAME
from .base import Check, Site

# Ignoring these hides sources or outputs the site build depends on.
MUST_NOT_IGNORE = ("*.html", "*.md", "*.markdown", "static", "config.toml", "config.yaml")
SAFE_TO_IGNORE = (".DS_Store", "Thumbs.db")
NETLIFY_BUILD_DIRS = ("public", "resources")


class GitignoreCheck(Check):
    name = "gitignore"
    title = ".gitignore"

    def run(self, site: Site, context: CheckContext) -> CheckSection:
        section = CheckSection(name=self.name, title=self.title)
        path = site.root / ".gitignore"
        if not path.is_file():
            section.todo("gitignore", ".gitignore was not found. You may want to add this.")
            return section

        entries = [line.strip() for line in path.read_text(encoding="utf-8").splitlines()]

        section.progress("remove", "Checking for items to remove...")
        to_remove = [entry for entry in entries if entry in MUST_NOT_IGNORE]
        if to_remove:
            section.todo("remove", f"Remove items from .gitignore: {', '.join(to_remove)}")
        else:
            section.success("remove", "Nothing to see here - found no items to remove.")

        section.progress("safe", "Checking for items you can safely ignore...")
        self._suggest(section, "safe", entries, SAFE_TO_IGNORE, "You can safely add to .gitignore")

        if (site.root / NETLIFY_FILENAME).is_file():
            section.progress(
                "netlify", "Checking for items to ignore if you build the site on Netlify..."
            )
            self._suggest(
                section,
                "netlify",
                entries,
                NETLIFY_BUILD_DIRS,
                "When Netlify builds your site, you can safely add to .gitignore",
            )
        return section

    @staticmethod
    def _suggest(section, category, entries, candidates, message) -> None:
        present = [entry for entry in entries if entry in candidates]
        if present:
            section.success(category, f"Found! You have safely ignored: {', '.join(present)}")
        missing = [item for item in candidates if item not in entries]
        if missing:
            section.todo(category, f"{message}: {', '.join(missing)}")
