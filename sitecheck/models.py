"""Core data models shared across sitecheck components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional


class Status(str, Enum):
    """Outcome of a single finding."""

    SUCCESS = "success"
    TODO = "todo"
    PROGRESS = "progress"


@dataclass
class Finding:
    """A single reported observation with optional affected paths and remedy."""

    category: str
    status: Status
    message: str
    paths: List[str] = field(default_factory=list)
    remedy: Optional[str] = None

    @property
    def needs_attention(self) -> bool:
        return self.status is Status.TODO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "status": self.status.value,
            "message": self.message,
            "paths": list(self.paths),
            "remedy": self.remedy,
        }


@dataclass
class CheckSection:
    """Findings emitted by one check, in the order they were produced."""

    name: str
    title: str
    findings: List[Finding] = field(default_factory=list)

    def add(
        self,
        category: str,
        status: Status,
        message: str,
        *,
        paths: Optional[List[str]] = None,
        remedy: Optional[str] = None,
    ) -> Finding:
        finding = Finding(
            category=category,
            status=status,
            message=message,
            paths=list(paths or []),
            remedy=remedy,
        )
        self.findings.append(finding)
        return finding

    def success(self, category: str, message: str, **kwargs: Any) -> Finding:
        return self.add(category, Status.SUCCESS, message, **kwargs)

    def todo(self, category: str, message: str, **kwargs: Any) -> Finding:
        return self.add(category, Status.TODO, message, **kwargs)

    def progress(self, category: str, message: str) -> Finding:
        return self.add(category, Status.PROGRESS, message)

    @property
    def todo_count(self) -> int:
        return sum(1 for finding in self.findings if finding.needs_attention)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "findings": [finding.to_dict() for finding in self.findings],
        }


@dataclass
class SiteReport:
    """Ordered collection of check sections for one site."""

    root: str
    sections: List[CheckSection] = field(default_factory=list)

    @property
    def todo_count(self) -> int:
        return sum(section.todo_count for section in self.sections)

    def section(self, name: str) -> Optional[CheckSection]:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "todo_count": self.todo_count,
            "sections": [section.to_dict() for section in self.sections],
        }


@dataclass(frozen=True)
class CheckContext:
    """Execution context handed from the orchestrator down to every check."""

    today: date
    in_site_check: bool = False
    fix: bool = False
