import time
import unittest

from slackretention.errors import NotFoundError, RateLimitError, RunCancelledError
from slackretention.pipeline.retry import RetryableCall
from slackretention.util.cancel import CancellationToken


class RecordingToken(CancellationToken):
    """Token that records back-off requests instead of sleeping."""

    def __init__(self, cancel_on_wait: bool = False) -> None:
        super().__init__()
        self.waits: list[float] = []
        self._cancel_on_wait = cancel_on_wait

    def wait(self, seconds: float) -> bool:
        self.waits.append(seconds)
        if self._cancel_on_wait:
            self.cancel()
        return self.cancelled


class ScriptedCall:
    def __init__(self, outcomes) -> None:
        self._outcomes = list(outcomes)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class TestRetryableCall(unittest.TestCase):
    def test_success_returns_immediately(self) -> None:
        token = RecordingToken()
        call = ScriptedCall(["ok"])
        self.assertEqual(RetryableCall(token)(call), "ok")
        self.assertEqual(call.calls, 1)
        self.assertEqual(token.waits, [])

    def test_rate_limited_then_success_waits_retry_after(self) -> None:
        token = RecordingToken()
        call = ScriptedCall([RateLimitError("slow", retry_after=2.0), "ok"])

        self.assertEqual(RetryableCall(token)(call), "ok")
        self.assertEqual(call.calls, 2)
        self.assertEqual(token.waits, [2.0])

    def test_no_retry_ceiling(self) -> None:
        token = RecordingToken()
        outcomes = [RateLimitError("slow", retry_after=0.5) for _ in range(50)] + ["ok"]
        call = ScriptedCall(outcomes)

        self.assertEqual(RetryableCall(token)(call), "ok")
        self.assertEqual(call.calls, 51)
        self.assertEqual(len(token.waits), 50)

    def test_missing_retry_after_uses_default(self) -> None:
        token = RecordingToken()
        call = ScriptedCall([RateLimitError("slow"), "ok"])

        RetryableCall(token, default_retry_after=3.0)(call)
        self.assertEqual(token.waits, [3.0])

    def test_zero_retry_after_uses_default(self) -> None:
        token = RecordingToken()
        call = ScriptedCall(
            [RateLimitError("slow", retry_after=0.0), RateLimitError("slow", retry_after=0.0), "ok"]
        )

        self.assertEqual(RetryableCall(token, default_retry_after=2.0)(call), "ok")
        self.assertEqual(token.waits, [2.0, 2.0])

    def test_other_errors_are_not_retried(self) -> None:
        token = RecordingToken()
        call = ScriptedCall([NotFoundError("gone"), "ok"])

        with self.assertRaises(NotFoundError):
            RetryableCall(token)(call)
        self.assertEqual(call.calls, 1)
        self.assertEqual(token.waits, [])

    def test_cancel_during_backoff_stops_retrying(self) -> None:
        token = RecordingToken(cancel_on_wait=True)
        call = ScriptedCall([RateLimitError("slow", retry_after=60.0), "ok"])

        with self.assertRaises(RunCancelledError) as ctx:
            RetryableCall(token)(call, label="files.delete")
        self.assertEqual(call.calls, 1)
        self.assertIsInstance(ctx.exception.cause, RateLimitError)
        self.assertEqual(ctx.exception.details["label"], "files.delete")

    def test_real_wait_is_at_least_retry_after(self) -> None:
        token = CancellationToken()
        call = ScriptedCall([RateLimitError("slow", retry_after=0.05), "ok"])

        started = time.monotonic()
        self.assertEqual(RetryableCall(token)(call), "ok")
        self.assertGreaterEqual(time.monotonic() - started, 0.04)

    def test_already_cancelled_token_aborts_on_first_backoff(self) -> None:
        token = CancellationToken()
        token.cancel()
        call = ScriptedCall([RateLimitError("slow", retry_after=30.0), "ok"])

        started = time.monotonic()
        with self.assertRaises(RunCancelledError):
            RetryableCall(token)(call)
        self.assertLess(time.monotonic() - started, 5.0)


if __name__ == "__main__":
    unittest.main()
