"""Local archiving of Slack files before deletion."""

from __future__ import annotations

import logging
from datetime import timezone
from pathlib import Path
from typing import BinaryIO, Optional

from slackretention.controller.base import ContentFetcher
from slackretention.errors import ArchiveError, RunCancelledError, SlackRetentionError
from slackretention.models import FileInfo

from .retry import RetryableCall

LOGGER = logging.getLogger(__name__)

_UNSAFE_NAME_CHARS: tuple[str, ...] = ("/", "\\", "\x00")


def archive_path(root: Path, file: FileInfo) -> Path:
    """
    Return `<root>/<year>/<month>/<day>/<id>-<name>` for a file.

    The date is the UTC creation date; month is zero-padded, day is not.
    Separators and NUL bytes in the name become `_`, so the file stays in
    its day folder and the path is always valid to open.
    """
    created = file.created.astimezone(timezone.utc)
    return (
        Path(root)
        / str(created.year)
        / f"{created.month:02d}"
        / str(created.day)
        / f"{_safe_part(file.file_id)}-{_safe_part(file.name)}"
    )


def _safe_part(text: str) -> str:
    for ch in _UNSAFE_NAME_CHARS:
        text = text.replace(ch, "_")
    return text


class FileArchiver:
    """Write a local copy of one Slack file under the archive root."""

    def __init__(self, fetcher: ContentFetcher, retry: RetryableCall, root: Path) -> None:
        self._fetcher = fetcher
        self._retry = retry
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, file: FileInfo) -> Path:
        return archive_path(self._root, file)

    def archive(self, file: FileInfo) -> Optional[Path]:
        """
        Download `file` to its archive path.

        Returns:
            The written path, or None when the file has no download URL or its
            content is withheld (nothing to copy, which counts as success).

        Raises:
            ArchiveError: on any directory, file, transfer or close failure.
                A partially written file is left in place.
            RunCancelledError: if the run is cancelled during a back-off.
        """
        if not file.is_downloadable:
            LOGGER.debug("No downloadable content for %s, skipping", file.file_id)
            return None

        path = self.path_for(file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as handle:
                self._retry(
                    lambda: self._transfer(file.download_url, handle),
                    label=f"download of {file.file_id}",
                )
        except RunCancelledError:
            raise
        except (OSError, ValueError, SlackRetentionError) as exc:
            raise ArchiveError(
                f"Failed to archive file {file.file_id}: {exc}",
                details={"file_id": file.file_id, "path": str(path)},
                cause=exc,
            ) from exc

        LOGGER.debug("Archived %s to %s", file.file_id, path)
        return path

    def _transfer(self, download_url: str, handle: BinaryIO) -> None:
        # A retried transfer must not append to a partial earlier attempt.
        handle.seek(0)
        handle.truncate()
        self._fetcher.fetch(download_url, handle)
