"""Public error exports for slackretention."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
