"""Rate-limit aware execution of remote calls."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from slackretention.errors import RateLimitError, RunCancelledError
from slackretention.util.cancel import CancellationToken

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SEC: float = 1.0


class RetryableCall:
    """
    Re-invoke a remote call for as long as it is rate limited.

    There is no attempt ceiling: the loop only ends on success, on any
    error other than RateLimitError, or when the cancellation token fires
    while waiting out a back-off.
    """

    def __init__(
        self,
        cancel_token: CancellationToken,
        *,
        default_retry_after: float = DEFAULT_RETRY_AFTER_SEC,
    ) -> None:
        self._cancel_token = cancel_token
        self._default_retry_after = default_retry_after

    @property
    def cancel_token(self) -> CancellationToken:
        return self._cancel_token

    def __call__(self, func: Callable[[], T], *, label: str = "remote call") -> T:
        attempt = 0
        while True:
            attempt += 1
            try:
                return func()
            except RateLimitError as exc:
                delay = exc.retry_after
                # Retry-After: 0 would turn the loop into a busy spin.
                if delay is None or delay <= 0:
                    delay = self._default_retry_after
                LOGGER.info(
                    "%s rate limited (attempt %d); retrying in %.1fs",
                    label,
                    attempt,
                    delay,
                )
                if self._cancel_token.wait(delay):
                    raise RunCancelledError(
                        "Run was cancelled while waiting out a rate limit",
                        details={"label": label, "attempt": attempt},
                        cause=exc,
                    ) from exc
