"""Client construction for slackretention."""

from __future__ import annotations

from slackretention.errors import AuthError

from .auth_info import AuthInfo


class TokenClient:
    """Create the Slack Web API client and the authenticated download session."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    def build_web_client(self):
        """
        Build a Slack Web API client.

        Only connection errors are retried by the client itself; rate limits
        surface as errors so the caller can apply its own back-off.

        Returns:
            slack_sdk.WebClient
        """
        try:
            from slack_sdk import WebClient
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "slack_sdk is not available",
                details={"hint": "Install slack_sdk"},
                cause=exc,
            ) from exc

        return WebClient(token=self._auth_info.token)

    def build_download_session(self):
        """
        Build an HTTP session that sends the token with every request.

        Slack serves `url_private_download` only to authenticated callers.

        Returns:
            requests.Session
        """
        try:
            import requests
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "requests is not available",
                details={"hint": "Install requests"},
                cause=exc,
            ) from exc

        session = requests.Session()
        session.headers["Authorization"] = f"Bearer {self._auth_info.token}"
        return session
