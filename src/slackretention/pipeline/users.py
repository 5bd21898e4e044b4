"""Best-effort user labels for log output."""

from __future__ import annotations

import logging
from typing import Optional

from slackretention.controller.base import UserDirectory
from slackretention.errors import SlackRetentionError

LOGGER = logging.getLogger(__name__)

USER_LOOKUP_FAILED: str = "user-lookup-failed"


def describe_user(directory: Optional[UserDirectory], user_id: str) -> str:
    """Return the user's name, or USER_LOOKUP_FAILED if it cannot be resolved."""
    if directory is None or not user_id:
        return USER_LOOKUP_FAILED
    try:
        return directory.lookup_user(user_id)
    except SlackRetentionError as exc:
        LOGGER.warning(
            "error fetching user details for user_id=%s error:%s", user_id, exc
        )
        return USER_LOOKUP_FAILED
