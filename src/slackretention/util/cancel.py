from __future__ import annotations

import threading

from slackretention.errors import RunCancelledError


class CancellationToken:
    """
    Run-scoped cancellation signal.

    `cancel()` may be called from another thread or a signal handler; any
    pending `wait()` returns immediately.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """
        Sleep for `seconds` unless cancelled first.

        Returns:
            True if the token was cancelled (also when cancellation and the
            timeout coincide), False if the full interval elapsed.
        """
        self._event.wait(timeout=max(0.0, seconds))
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise RunCancelledError("Run was cancelled")
