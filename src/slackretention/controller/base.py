"""Remote capabilities consumed by the retention pipeline."""

from __future__ import annotations

from datetime import datetime
from typing import BinaryIO, Protocol

from slackretention.models import PageResult


class FileListing(Protocol):
    def list_files(self, cutoff: datetime, *, page_size: int, page: int) -> PageResult:
        """Return one page of files created strictly before `cutoff`."""


class ContentFetcher(Protocol):
    def fetch(self, download_url: str, sink: BinaryIO) -> None:
        """Stream the content behind `download_url` into `sink`."""


class FileDeleter(Protocol):
    def delete_file(self, file_id: str) -> None:
        """Delete the remote file."""


class UserDirectory(Protocol):
    def lookup_user(self, user_id: str) -> str:
        """Return the user's display name."""


__all__ = ["FileListing", "ContentFetcher", "FileDeleter", "UserDirectory"]
