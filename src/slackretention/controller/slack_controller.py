"""Slack Web API controller (internal use only)."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, BinaryIO, Callable, Mapping, Optional, TypeVar

import requests
from slack_sdk.errors import SlackApiError, SlackClientError

from slackretention.auth import AuthInfo, TokenClient
from slackretention.errors import (
    ApiError,
    NetworkError,
    SlackErrorInfo,
    SlackRetentionError,
    map_slack_error,
)
from slackretention.models import FileInfo, PageResult
from slackretention.util.time import from_unix, to_slack_ts_to

from .fields import (
    DOWNLOAD_CHUNK_SIZE,
    FILE_CREATED_FIELDS,
    FILE_DOWNLOAD_URL_FIELD,
    FILE_ID_FIELD,
    FILE_MODE_FIELD,
    FILE_NAME_FIELD,
    FILE_USER_FIELD,
    PAGING_FIELD,
)

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class SlackController:
    """
    Slack Web API controller (internal only).

    Implements the listing, content-fetch, delete and user-lookup
    capabilities. Every failure is mapped to a slackretention exception;
    nothing is retried here, rate limits surface as RateLimitError.
    """

    def __init__(self, auth_info: AuthInfo) -> None:
        client = TokenClient(auth_info)
        self._client = client.build_web_client()
        self._session = client.build_download_session()

    @classmethod
    def from_clients(cls, web_client: Any, session: Any) -> "SlackController":
        """Create controller from pre-built clients (useful for tests)."""
        obj = cls.__new__(cls)
        obj._client = web_client
        obj._session = session
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def list_files(self, cutoff: datetime, *, page_size: int, page: int) -> PageResult:
        ts_to = str(to_slack_ts_to(cutoff))
        response = self._execute(
            lambda: self._client.files_list(
                ts_to=ts_to,
                count=page_size,
                page=page,
                show_files_hidden_by_limit=True,
            )
        )

        files: list[FileInfo] = []
        for item in response.get("files") or []:
            info = _file_dict_to_file_info(item)
            if info is not None:
                files.append(info)

        paging = response.get(PAGING_FIELD) or {}
        return PageResult(
            files=files,
            page=_as_int(paging.get("page"), default=page),
            pages=_as_int(paging.get("pages"), default=0),
        )

    def fetch(self, download_url: str, sink: BinaryIO) -> None:
        """
        Stream the content at `download_url` into `sink`.

        Only the HTTP side is mapped; errors raised by `sink.write` (disk
        full, closed file) propagate unchanged as OSError.
        """
        with self._execute(lambda: self._session.get(download_url, stream=True)) as resp:
            if resp.status_code >= 400:
                info = SlackErrorInfo(
                    status_code=resp.status_code,
                    message=f"Download failed with HTTP {resp.status_code}",
                    retry_after=_retry_after(resp.headers),
                    details={"url": download_url},
                )
                raise map_slack_error(info)
            chunks = iter(resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE))
            while True:
                chunk = self._execute(lambda: next(chunks, None))
                if chunk is None:
                    break
                if chunk:
                    sink.write(chunk)

    def delete_file(self, file_id: str) -> None:
        self._execute(lambda: self._client.files_delete(file=file_id))

    def lookup_user(self, user_id: str) -> str:
        response = self._execute(lambda: self._client.users_info(user=user_id))
        user = response.get("user") or {}
        name = user.get("name")
        if not isinstance(name, str) or not name:
            raise ApiError("users.info returned no name", details={"user_id": user_id})
        return name

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except SlackRetentionError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> SlackRetentionError:
        if isinstance(exc, SlackApiError):
            info = _slack_api_error_to_info(exc)
            return map_slack_error(info, cause=exc)

        if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
            return NetworkError("Network error", cause=exc)

        if isinstance(exc, requests.RequestException):
            return ApiError("Download error", cause=exc)

        if isinstance(exc, (SlackClientError, OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Slack API error", cause=exc)


def _file_dict_to_file_info(data: Mapping[str, Any]) -> Optional[FileInfo]:
    file_id = data.get(FILE_ID_FIELD)
    if not isinstance(file_id, str) or not file_id:
        LOGGER.debug("Ignoring file entry without an id: %r", data)
        return None

    created = None
    for key in FILE_CREATED_FIELDS:
        value = data.get(key)
        if value is None:
            continue
        try:
            created = from_unix(value)
            break
        except (TypeError, ValueError, OverflowError, OSError):
            continue
    if created is None:
        LOGGER.warning("Ignoring file %s: no usable creation timestamp", file_id)
        return None

    name = data.get(FILE_NAME_FIELD, "")
    user_id = data.get(FILE_USER_FIELD, "")
    download_url = data.get(FILE_DOWNLOAD_URL_FIELD, "")
    mode = data.get(FILE_MODE_FIELD, "")

    return FileInfo(
        file_id=file_id,
        name=name if isinstance(name, str) else "",
        user_id=user_id if isinstance(user_id, str) else "",
        created=created,
        download_url=download_url if isinstance(download_url, str) else "",
        mode=mode if isinstance(mode, str) else "",
    )


def _as_int(value: Any, *, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return default


def _retry_after(headers: Any) -> Optional[float]:
    if not headers:
        return None
    for key, value in dict(headers).items():
        if str(key).lower() != "retry-after":
            continue
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        try:
            return max(0.0, float(value))
        except (TypeError, ValueError):
            return None
    return None


def _slack_api_error_to_info(exc: SlackApiError) -> SlackErrorInfo:
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)

    error = None
    try:
        error = response.get("error") if response is not None else None
    except (AttributeError, ValueError):
        # binary payloads do not support key access
        error = None

    if not isinstance(status_code, int):
        status_code = 0

    return SlackErrorInfo(
        status_code=status_code,
        error=error if isinstance(error, str) else None,
        message=error if isinstance(error, str) else None,
        retry_after=_retry_after(getattr(response, "headers", None)),
    )
