"""Public auth exports for slackretention."""

from __future__ import annotations

from .auth_info import DEFAULT_TOKEN_ENV_VAR, AuthInfo
from .token_client import TokenClient

__all__ = ["AuthInfo", "DEFAULT_TOKEN_ENV_VAR", "TokenClient"]
