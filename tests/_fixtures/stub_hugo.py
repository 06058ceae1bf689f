"""HugoLocator double reporting a fixed set of installed versions."""

from __future__ import annotations

from typing import List, Optional, Sequence

from sitecheck.hugo import HugoLocator


class StubHugoLocator(HugoLocator):
    def __init__(self, versions: Sequence[str] = ()) -> None:
        super().__init__(runner=lambda args: "", search_path=[])
        self.versions = list(versions)

    def installed_versions(self) -> List[str]:
        return list(self.versions)

    def current_version(self) -> Optional[str]:
        return self.versions[0] if self.versions else None


__all__ = ["StubHugoLocator"]
