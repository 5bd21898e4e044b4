"""Exception hierarchy and Slack error mapping for slackretention."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class SlackRetentionError(Exception):
    """
    Base exception for slackretention.

    Attributes:
        details: Optional structured information (e.g., HTTP status, Slack error code).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class AuthError(SlackRetentionError):
    """Raised when the API token is missing, invalid or revoked."""


class PermissionError(SlackRetentionError):
    """Raised when the token lacks a scope or the action is not allowed."""


class InvalidArgumentError(SlackRetentionError):
    """Raised when request arguments are invalid."""


class NotFoundError(SlackRetentionError):
    """Raised when a file or user no longer exists."""


class RateLimitError(SlackRetentionError):
    """
    Raised when Slack rate-limits a call (HTTP 429 / ``ratelimited``).

    Attributes:
        retry_after: Seconds the server asked us to wait, or None if not advertised.
    """

    def __init__(
        self,
        message: str,
        *,
        retry_after: Optional[float] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause)
        self.retry_after = retry_after


class NetworkError(SlackRetentionError):
    """Raised when connection issues prevent the request."""


class ApiError(SlackRetentionError):
    """Raised for unclassified API errors (5xx, unknown error codes, etc.)."""


class ListingError(SlackRetentionError):
    """
    Raised when enumerating files fails with a non-rate-limit error.

    Attributes:
        partial: Files collected from the pages fetched before the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        partial: Optional[list[Any]] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause)
        self.partial = list(partial) if partial else []


class ArchiveError(SlackRetentionError):
    """Raised when a local copy of a file could not be written."""


class DeleteError(SlackRetentionError):
    """Raised when a remote file could not be deleted."""


class RunCancelledError(SlackRetentionError):
    """Raised when the run's cancellation token fires."""


@dataclass(frozen=True)
class SlackErrorInfo:
    """Lightweight error information for mapping to slackretention exceptions."""

    status_code: int
    error: str | None = None
    message: str | None = None
    retry_after: float | None = None
    details: dict[str, Any] | None = None


_AUTH_ERRORS: frozenset[str] = frozenset(
    {
        "invalid_auth",
        "not_authed",
        "token_revoked",
        "token_expired",
        "account_inactive",
    }
)

_PERMISSION_ERRORS: frozenset[str] = frozenset(
    {
        "missing_scope",
        "no_permission",
        "not_allowed_token_type",
        "cant_delete_file",
        "access_denied",
        "ekm_access_denied",
    }
)

_NOT_FOUND_ERRORS: frozenset[str] = frozenset(
    {
        "file_not_found",
        "file_deleted",
        "user_not_found",
    }
)

_INVALID_ARGUMENT_PREFIXES: tuple[str, ...] = (
    "invalid_arguments",
    "invalid_arg_name",
    "invalid_ts_",
    "invalid_types",
    "invalid_channel",
    "user_not_visible",
)


def _is_invalid_argument(error: str) -> bool:
    return any(error.startswith(prefix) for prefix in _INVALID_ARGUMENT_PREFIXES)


def map_slack_error(
    info: SlackErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> SlackRetentionError:
    """
    Map a failed Slack call to a slackretention exception.

    Rate limiting wins over everything else, then the Slack ``error`` code,
    then the HTTP status:
        - 429 / ratelimited -> RateLimitError
        - auth codes / 401 -> AuthError
        - scope/permission codes / 403 -> PermissionError
        - missing file/user codes / 404 -> NotFoundError
        - invalid argument codes / 400 -> InvalidArgumentError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "error": info.error,
    }
    if info.details:
        details.update(info.details)

    error = info.error or ""
    message = info.message or error or f"HTTP error {info.status_code}"

    if info.status_code == 429 or error == "ratelimited":
        return RateLimitError(
            message,
            retry_after=info.retry_after,
            details=details,
            cause=cause,
        )
    if error in _AUTH_ERRORS or info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if error in _PERMISSION_ERRORS or info.status_code == 403:
        return PermissionError(message, details=details, cause=cause)
    if error in _NOT_FOUND_ERRORS or info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if (error and _is_invalid_argument(error)) or info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
