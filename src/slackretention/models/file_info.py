"""Data models for Slack files and listing pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

HIDDEN_BY_LIMIT_MODE: str = "hidden_by_limit"


@dataclass(slots=True)
class FileInfo:
    """
    Represents a Slack file as returned by files.list.

    Notes:
        - `download_url` may be empty; such files cannot be archived.
        - Files hidden by the free plan limit keep their metadata but their
          content is withheld.
    """

    file_id: str
    name: str
    user_id: str
    created: datetime

    download_url: str = ""
    mode: str = ""

    @property
    def content_withheld(self) -> bool:
        return self.mode == HIDDEN_BY_LIMIT_MODE

    @property
    def is_downloadable(self) -> bool:
        return bool(self.download_url) and not self.content_withheld

    def created_before(self, cutoff: datetime) -> bool:
        return self.created < cutoff


@dataclass(slots=True)
class PageResult:
    """One page of files.list plus its paging metadata."""

    files: list[FileInfo] = field(default_factory=list)
    page: int = 1
    pages: int = 0
