"""Checks that netlify.toml agrees with the local Hugo setup."""

from __future__ import annotations

from ..hugo import versions_match
from ..models import CheckContext, CheckSection
from ..settings import SETTINGS_FILENAME
from ..site_config import DEFAULT_PUBLISH_DIR, NETLIFY_FILENAME, load_netlify_config
from .base import Check, Site


class NetlifyCheck(Check):
    """Compares HUGO_VERSION and the publish directory with the local site."""

    name = "netlify"
    title = NETLIFY_FILENAME

    def run(self, site: Site, context: CheckContext) -> CheckSection:
        section = CheckSection(name=self.name, title=self.title)
        netlify = load_netlify_config(site.root)
        if netlify is None:
            section.todo(
                "netlify",
                f"{NETLIFY_FILENAME} was not found. Create it if you deploy the site on Netlify.",
            )
            return section

        local = site.hugo_version()
        remote = netlify.hugo_version
        if remote is None:
            section.progress("hugo_version", f"HUGO_VERSION not found in {NETLIFY_FILENAME}.")
            section.todo(
                "hugo_version",
                f"Set HUGO_VERSION = {local or '<your Hugo version>'} in [build] context "
                f"of {NETLIFY_FILENAME}.",
            )
        else:
            section.success(
                "hugo_version",
                f"Found HUGO_VERSION = {remote} in [{netlify.hugo_version_context}] context "
                f"of {NETLIFY_FILENAME}.",
            )
            section.progress("hugo_version", "Checking that Netlify & local Hugo versions match...")
            if local is None:
                section.todo(
                    "hugo_version",
                    "Hugo was not found locally, so the Netlify version cannot be compared.",
                )
            elif versions_match(local, remote):
                section.success(
                    "hugo_version",
                    f"It's a match! Local builds and Netlify are using the same Hugo version ({local}).",
                )
            else:
                section.progress(
                    "hugo_version",
                    "Mismatch found:\n"
                    f"  Hugo version ({local}) is used to build the site locally.\n"
                    f"  Netlify is using Hugo version ({remote}) to build the site.",
                )
                section.todo(
                    "hugo_version",
                    f'Option 1: Change HUGO_VERSION = "{local}" in {NETLIFY_FILENAME} '
                    "to match the local version.",
                )
                section.todo(
                    "hugo_version",
                    f"Option 2: Install Hugo {remote} to match the Netlify version, and pin it "
                    f'with hugo: {{version: "{remote}"}} in {SETTINGS_FILENAME}.',
                )

        section.progress("publish", "Checking that Netlify & local Hugo publish directories match...")
        if netlify.publish is not None:
            config = site.config()
            if config is not None and config.publish_dir is not None:
                local_dir = config.publish_dir
                origin = f"as set in {config.path.name}"
            else:
                local_dir = DEFAULT_PUBLISH_DIR
                origin = "Hugo's default"
            if local_dir != netlify.publish.rstrip("/"):
                section.progress(
                    "publish",
                    "Mismatch found:\n"
                    f'  The Netlify "publish" directory in "{NETLIFY_FILENAME}" is "{netlify.publish}".\n'
                    f'  The local Hugo "publishDir" directory is "{local_dir}" ({origin}).',
                )
                section.todo(
                    "publish",
                    f'Open {NETLIFY_FILENAME} and under [build] set publish = "{local_dir}".',
                )
            else:
                section.success(
                    "publish",
                    f"Good to go - local builds and Netlify are using the same publish directory: {local_dir}",
                )
        return section
