"""slackretention public API."""

from __future__ import annotations

from slackretention.auth import AuthInfo, TokenClient
from slackretention.config import RetentionConfig
from slackretention.controller import SlackController
from slackretention.errors import (
    ApiError,
    ArchiveError,
    AuthError,
    DeleteError,
    InvalidArgumentError,
    ListingError,
    NetworkError,
    NotFoundError,
    PermissionError,
    RateLimitError,
    RunCancelledError,
    SlackErrorInfo,
    SlackRetentionError,
    map_slack_error,
)
from slackretention.manager import RetentionManager
from slackretention.models import FileInfo, FileOutcome, PageResult, RunResult
from slackretention.pipeline import (
    FileArchiver,
    PaginatedLister,
    RetentionPipeline,
    RetryableCall,
    archive_path,
    describe_user,
)
from slackretention.util import CancellationToken

__all__ = [
    # High-level
    "RetentionManager",
    "RetentionConfig",
    "SlackController",
    # Auth
    "AuthInfo",
    "TokenClient",
    # Pipeline
    "RetryableCall",
    "PaginatedLister",
    "FileArchiver",
    "RetentionPipeline",
    "archive_path",
    "describe_user",
    "CancellationToken",
    # Models
    "FileInfo",
    "PageResult",
    "FileOutcome",
    "RunResult",
    # Errors
    "SlackRetentionError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "NetworkError",
    "ApiError",
    "ListingError",
    "ArchiveError",
    "DeleteError",
    "RunCancelledError",
    "SlackErrorInfo",
    "map_slack_error",
]
