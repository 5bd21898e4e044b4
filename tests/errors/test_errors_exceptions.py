import unittest

from slackretention.errors.exceptions import (
    ApiError,
    AuthError,
    InvalidArgumentError,
    ListingError,
    NotFoundError,
    PermissionError,
    RateLimitError,
    SlackErrorInfo,
    SlackRetentionError,
    map_slack_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = SlackRetentionError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_rate_limit_error_keeps_retry_after(self) -> None:
        err = RateLimitError("slow down", retry_after=2.5)
        self.assertEqual(err.retry_after, 2.5)
        self.assertIsNone(RateLimitError("slow down").retry_after)

    def test_listing_error_copies_partial(self) -> None:
        collected = ["a"]
        err = ListingError("boom", partial=collected)
        collected.append("b")
        self.assertEqual(err.partial, ["a"])
        self.assertEqual(ListingError("boom").partial, [])

    def test_map_status_codes(self) -> None:
        self.assertIsInstance(map_slack_error(SlackErrorInfo(status_code=429)), RateLimitError)
        self.assertIsInstance(map_slack_error(SlackErrorInfo(status_code=401)), AuthError)
        self.assertIsInstance(map_slack_error(SlackErrorInfo(status_code=403)), PermissionError)
        self.assertIsInstance(map_slack_error(SlackErrorInfo(status_code=404)), NotFoundError)
        self.assertIsInstance(map_slack_error(SlackErrorInfo(status_code=400)), InvalidArgumentError)
        self.assertIsInstance(map_slack_error(SlackErrorInfo(status_code=503)), ApiError)

    def test_map_slack_error_codes_on_http_200(self) -> None:
        cases = {
            "ratelimited": RateLimitError,
            "invalid_auth": AuthError,
            "token_revoked": AuthError,
            "missing_scope": PermissionError,
            "cant_delete_file": PermissionError,
            "file_not_found": NotFoundError,
            "file_deleted": NotFoundError,
            "invalid_ts_latest": InvalidArgumentError,
            "fatal_error": ApiError,
        }
        for code, expected in cases.items():
            with self.subTest(code=code):
                err = map_slack_error(SlackErrorInfo(status_code=200, error=code))
                self.assertIsInstance(err, expected)
                self.assertEqual(err.details["error"], code)

    def test_map_rate_limit_carries_retry_after(self) -> None:
        err = map_slack_error(SlackErrorInfo(status_code=429, retry_after=30.0))
        self.assertIsInstance(err, RateLimitError)
        self.assertEqual(err.retry_after, 30.0)  # type: ignore[attr-defined]

    def test_map_keeps_cause_and_extra_details(self) -> None:
        cause = RuntimeError("root")
        err = map_slack_error(
            SlackErrorInfo(status_code=500, details={"url": "https://files.example"}),
            cause=cause,
        )
        self.assertIs(err.cause, cause)
        self.assertEqual(err.details["url"], "https://files.example")
        self.assertEqual(err.details["status_code"], 500)
        self.assertEqual(str(err), "HTTP error 500")


if __name__ == "__main__":
    unittest.main()
