"""Paginated enumeration of files eligible for cleanup."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from slackretention.controller.base import FileListing
from slackretention.errors import ListingError, RunCancelledError, SlackRetentionError
from slackretention.models import FileInfo, PageResult

from .retry import RetryableCall

LOGGER = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE: int = 100


class PaginatedLister:
    """Walk files.list page by page until the reported page count is reached."""

    def __init__(
        self,
        listing: FileListing,
        retry: RetryableCall,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._listing = listing
        self._retry = retry
        self._page_size = page_size

    def list_older_than(self, cutoff: datetime) -> list[FileInfo]:
        """
        Return every file created strictly before `cutoff`, in API order.

        Page 1 is always requested; its page count bounds the walk.

        Raises:
            ListingError: on any non-rate-limit failure; `partial` holds the
                files from the pages fetched so far.
            RunCancelledError: if the run is cancelled.
        """
        files: list[FileInfo] = []
        total_pages: Optional[int] = None
        page = 1

        while True:
            self._retry.cancel_token.raise_if_cancelled()
            result = self._fetch_page(cutoff, page, files)
            if total_pages is None:
                total_pages = result.pages
            LOGGER.debug(
                "Fetched page %d/%d with %d file(s)",
                page,
                total_pages,
                len(result.files),
            )
            files.extend(result.files)
            page += 1
            if page > total_pages:
                break

        return files

    def _fetch_page(self, cutoff: datetime, page: int, collected: list[FileInfo]) -> PageResult:
        try:
            return self._retry(
                lambda: self._listing.list_files(
                    cutoff,
                    page_size=self._page_size,
                    page=page,
                ),
                label=f"files.list page {page}",
            )
        except RunCancelledError:
            raise
        except SlackRetentionError as exc:
            raise ListingError(
                f"Listing failed on page {page}: {exc}",
                partial=collected,
                details={"page": page, "error_type": exc.__class__.__name__},
                cause=exc,
            ) from exc
