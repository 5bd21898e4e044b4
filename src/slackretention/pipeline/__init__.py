"""Retention pipeline components."""

from __future__ import annotations

from .archiver import FileArchiver, archive_path
from .lister import DEFAULT_PAGE_SIZE, PaginatedLister
from .retention import DEFAULT_RETENTION_DAYS, RetentionPipeline
from .retry import DEFAULT_RETRY_AFTER_SEC, RetryableCall
from .users import USER_LOOKUP_FAILED, describe_user

__all__ = [
    "RetryableCall",
    "PaginatedLister",
    "FileArchiver",
    "RetentionPipeline",
    "archive_path",
    "describe_user",
    "USER_LOOKUP_FAILED",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_RETENTION_DAYS",
    "DEFAULT_RETRY_AFTER_SEC",
]
