"""Check wrapping the content freshness and duplication report."""

from __future__ import annotations

from ..content import ContentReport, ContentReportBuilder, ContentTree
from ..logging import get_logger
from ..models import CheckContext, CheckSection, Finding, Status
from ..site_config import DEFAULT_CONTENT_DIR, SiteConfigError
from .base import Check, Site

logger = get_logger("checks.content")


def scan_content(site: Site) -> ContentTree:
    """Scan the site's content directory, honouring ``contentDir`` when readable."""
    content_dir = DEFAULT_CONTENT_DIR
    try:
        config = site.config()
    except SiteConfigError as exc:
        logger.warning("Falling back to '%s' as content directory: %s", content_dir, exc)
        config = None
    if config is not None:
        content_dir = config.content_dir
    return site.scanner.scan(site.root, content_dir, site.settings.content.exclude_paths)


def build_content_report(site: Site, context: CheckContext, tree: ContentTree | None = None) -> ContentReport:
    builder = ContentReportBuilder(
        site.fs,
        today=context.today,
        legacy_size_threshold=site.settings.legacy_size_threshold,
    )
    return builder.build(tree if tree is not None else scan_content(site))


class ContentCheck(Check):
    name = "content"
    title = "Content files"

    def run(self, site: Site, context: CheckContext) -> CheckSection:
        tree = scan_content(site)
        section = build_content_report(site, context, tree).to_section()
        if not (site.root / tree.content_dir).is_dir():
            section.findings.insert(
                0,
                Finding(
                    category="content",
                    status=Status.TODO,
                    message=f'Content directory "{tree.content_dir}" was not found.',
                ),
            )
        return section
