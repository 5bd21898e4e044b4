"""RetentionPipeline: list old files, archive them, then delete them."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from slackretention.controller.base import FileDeleter, UserDirectory
from slackretention.errors import (
    ArchiveError,
    DeleteError,
    RunCancelledError,
    SlackRetentionError,
)
from slackretention.models import ArchiveState, FileInfo, FileOutcome, RunResult
from slackretention.util.time import now_utc, retention_cutoff

from .archiver import FileArchiver
from .lister import PaginatedLister
from .retry import RetryableCall
from .users import describe_user

LOGGER = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS: int = 90


class RetentionPipeline:
    """
    Sequential cleanup of files older than the retention window.

    Policy:
        - Listing failures and cancellation are fatal and raise.
        - A file is deleted only after a successful local copy, or when no
          copy is possible (content withheld by plan limit, no download URL).
        - Archive and delete failures are recorded per file; the run goes on.
    """

    def __init__(
        self,
        lister: PaginatedLister,
        archiver: FileArchiver,
        deleter: FileDeleter,
        retry: RetryableCall,
        *,
        retention_days: int = DEFAULT_RETENTION_DAYS,
        users: Optional[UserDirectory] = None,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self._lister = lister
        self._archiver = archiver
        self._deleter = deleter
        self._retry = retry
        self._retention_days = retention_days
        self._users = users
        self._clock = clock

    def run(self) -> RunResult:
        """
        Execute one cleanup pass.

        Raises:
            ListingError: if enumerating files fails; nothing is processed.
            RunCancelledError: if the run is cancelled at any point.
        """
        cutoff = retention_cutoff(self._clock(), self._retention_days)
        files = self._lister.list_older_than(cutoff)

        if not files:
            LOGGER.info(
                "found no files to delete that were older than %d days",
                self._retention_days,
            )
            return RunResult(status="success", cutoff=cutoff, summary=_summarize([]))

        LOGGER.info("found %d files for deletion", len(files))

        results: list[FileOutcome] = []
        for file in files:
            self._retry.cancel_token.raise_if_cancelled()
            results.append(self._process_one(file, cutoff))

        summary = _summarize(results)
        LOGGER.info(
            "run complete: %d deleted, %d archive failed, %d delete failed, %d skipped",
            summary["deleted"],
            summary["archive_failed"],
            summary["delete_failed"],
            summary["skipped"],
        )
        return RunResult(status="success", cutoff=cutoff, results=results, summary=summary)

    # ----------------------------
    # Internals
    # ----------------------------
    def _process_one(self, file: FileInfo, cutoff: datetime) -> FileOutcome:
        if not file.created_before(cutoff):
            LOGGER.warning(
                "file id %s was created at %s, not before cutoff %s; leaving it alone",
                file.file_id,
                file.created.isoformat(),
                cutoff.isoformat(),
            )
            return FileOutcome(
                file_id=file.file_id,
                name=file.name,
                status="skipped",
                archive="not_attempted",
            )

        local_path: Optional[str] = None
        archive: ArchiveState
        if file.content_withheld:
            LOGGER.info(
                "file id %s is hidden by free quota limit, won't download before deleting",
                file.file_id,
            )
            archive = "withheld"
        else:
            self._log_file_details(file)
            try:
                path = self._archiver.archive(file)
            except ArchiveError as exc:
                LOGGER.warning("error saving file %s: %s", file.file_id, exc)
                return _failed_outcome(file, "archive_failed", "failed", exc)
            if path is None:
                archive = "no_download_url"
            else:
                archive = "archived"
                local_path = str(path)

        try:
            self._retry(
                lambda: self._deleter.delete_file(file.file_id),
                label=f"delete of {file.file_id}",
            )
        except RunCancelledError:
            raise
        except SlackRetentionError as exc:
            error = DeleteError(
                f"Failed to delete file {file.file_id}: {exc}",
                details={"file_id": file.file_id, "error_type": exc.__class__.__name__},
                cause=exc,
            )
            LOGGER.warning("%s", error)
            outcome = _failed_outcome(file, "delete_failed", archive, error)
            outcome.local_path = local_path
            return outcome

        LOGGER.debug("deleted file %s", file.file_id)
        return FileOutcome(
            file_id=file.file_id,
            name=file.name,
            status="deleted",
            archive=archive,
            local_path=local_path,
        )

    def _log_file_details(self, file: FileInfo) -> None:
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        LOGGER.debug(
            "file_id=%s user_name=%s name=%s created=%s path=%s",
            file.file_id,
            describe_user(self._users, file.user_id),
            file.name,
            file.created.isoformat(),
            self._archiver.path_for(file),
        )


def _failed_outcome(
    file: FileInfo,
    status: str,
    archive: ArchiveState,
    exc: SlackRetentionError,
) -> FileOutcome:
    return FileOutcome(
        file_id=file.file_id,
        name=file.name,
        status=status,  # type: ignore[arg-type]
        archive=archive,
        error_type=exc.__class__.__name__,
        error_message=str(exc),
        error_details=getattr(exc, "details", None),
    )


def _summarize(results: list[FileOutcome]) -> dict[str, int]:
    summary: dict[str, int] = {
        "deleted": 0,
        "archive_failed": 0,
        "delete_failed": 0,
        "skipped": 0,
    }
    for r in results:
        summary[r.status] = summary.get(r.status, 0) + 1
    return summary
