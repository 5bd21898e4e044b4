"""Authentication information for slackretention (API token only)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from slackretention.errors import AuthError

DEFAULT_TOKEN_ENV_VAR: str = "TOKEN"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only Slack API tokens are supported. The token needs the `files:read`,
    `files:write` and `users:read` scopes.
    """

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token.strip():
            raise ValueError("AuthInfo.token must be a non-empty string")

    @classmethod
    def from_env(
        cls,
        var_name: str = DEFAULT_TOKEN_ENV_VAR,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AuthInfo":
        """
        Load the token from an environment variable.

        Raises:
            AuthError: if the variable is unset or blank.
        """
        env = os.environ if environ is None else environ
        value = env.get(var_name, "").strip()
        if not value:
            raise AuthError(
                f"{var_name} env var must be set",
                details={"env_var": var_name},
            )
        return cls(token=value)
