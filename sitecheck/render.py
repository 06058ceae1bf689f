"""Plain-text and JSON rendering of site reports."""

from __future__ import annotations

import json
from typing import List

from .models import CheckSection, Finding, SiteReport, Status
from .orchestrator import CleanupOutcome

RULE = "-" * 60

_MARKERS = {
    Status.PROGRESS: "|",
    Status.SUCCESS: "○",
    Status.TODO: "● [TODO]",
}


def format_finding(finding: Finding) -> List[str]:
    lines = f"{_MARKERS[finding.status]} {finding.message}".splitlines()
    if finding.paths:
        lines.append("")
        lines.extend(f"    {path}" for path in finding.paths)
        lines.append("")
    if finding.remedy:
        lines.extend(f"  {line}" for line in finding.remedy.splitlines())
    return lines


def format_section(section: CheckSection) -> str:
    lines = [RULE, f"Checking {section.title}"]
    for finding in section.findings:
        lines.extend(format_finding(finding))
    suffix = f" ({section.todo_count} todo)" if section.todo_count else ""
    lines.append(f"- Check done: {section.title}{suffix}")
    return "\n".join(lines)


def format_report(report: SiteReport) -> str:
    parts = [f"Running a series of automated checks for the site at {report.root}..."]
    parts.extend(format_section(section) for section in report.sections)
    parts.append(RULE)
    if report.todo_count:
        parts.append(f"Found {report.todo_count} item(s) that need your attention.")
    else:
        parts.append("All checks passed - nothing to do!")
    return "\n".join(parts) + "\n"


def format_report_json(report: SiteReport) -> str:
    return json.dumps(report.to_dict(), indent=2) + "\n"


def format_cleanup(outcome: CleanupOutcome) -> str:
    if not outcome.duplicates:
        return "No duplicated output files were found.\n"
    if outcome.preview:
        lines = [
            "Found possibly duplicated output files. Run "
            "`sitecheck clean-duplicates --no-preview` if you are sure they can be deleted:",
            "",
        ]
        lines.extend(f"    {item.path}  ({item.reason})" for item in outcome.duplicates)
        return "\n".join(lines) + "\n"
    lines = []
    for result in outcome.results:
        if result.deleted:
            lines.append(f"deleted  {result.path}")
        else:
            lines.append(f"FAILED   {result.path}: {result.error}")
    return "\n".join(lines) + "\n"


__all__ = ["format_cleanup", "format_report", "format_report_json", "format_section"]
