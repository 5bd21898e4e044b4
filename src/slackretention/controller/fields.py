"""Field names and request constants for the Slack Web API."""

from __future__ import annotations

FILE_ID_FIELD: str = "id"
FILE_NAME_FIELD: str = "name"
FILE_USER_FIELD: str = "user"
FILE_MODE_FIELD: str = "mode"
FILE_DOWNLOAD_URL_FIELD: str = "url_private_download"

# `created` is current; `timestamp` is the deprecated alias older payloads use.
FILE_CREATED_FIELDS: tuple[str, ...] = ("created", "timestamp")

PAGING_FIELD: str = "paging"

DOWNLOAD_CHUNK_SIZE: int = 64 * 1024
