import os
import signal
import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from slackretention import cli
from slackretention.errors import ListingError, RunCancelledError
from slackretention.models import RunResult
from slackretention.util.cancel import CancellationToken

CUTOFF = datetime(2025, 1, 1, tzinfo=timezone.utc)


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        patches = [
            patch.dict(os.environ, {"TOKEN": "xoxb-test"}, clear=True),
            patch.object(cli, "configure_logging"),
            patch.object(cli, "install_signal_handlers"),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)
        manager_patch = patch.object(cli, "RetentionManager")
        self.manager_cls = manager_patch.start()
        self.addCleanup(manager_patch.stop)
        self.manager = self.manager_cls.return_value

    def test_success_exits_zero(self) -> None:
        self.manager.run.return_value = RunResult(status="success", cutoff=CUTOFF)

        self.assertEqual(cli.main([]), cli.EXIT_OK)

        auth_info, config = self.manager_cls.call_args.args
        self.assertEqual(auth_info.token, "xoxb-test")
        self.assertEqual(config.retention_days, 90)
        token = self.manager.run.call_args.args[0]
        self.assertIsInstance(token, CancellationToken)
        cli.install_signal_handlers.assert_called_once_with(token)

    def test_missing_token_exits_one_without_running(self) -> None:
        del os.environ["TOKEN"]

        self.assertEqual(cli.main([]), cli.EXIT_FAILURE)
        self.manager_cls.assert_not_called()

    def test_token_variable_name_is_configurable(self) -> None:
        del os.environ["TOKEN"]
        os.environ["SLACK_RETENTION_TOKEN_ENV_VAR"] = "SLACK_BOT_TOKEN"
        os.environ["SLACK_BOT_TOKEN"] = "xoxb-other"
        self.manager.run.return_value = RunResult(status="success", cutoff=CUTOFF)

        self.assertEqual(cli.main([]), cli.EXIT_OK)
        self.assertEqual(self.manager_cls.call_args.args[0].token, "xoxb-other")

    def test_invalid_config_exits_one(self) -> None:
        os.environ["SLACK_RETENTION_DAYS"] = "0"

        self.assertEqual(cli.main([]), cli.EXIT_FAILURE)
        self.manager_cls.assert_not_called()

    def test_listing_failure_exits_one(self) -> None:
        self.manager.run.side_effect = ListingError("listing failed", partial=[])
        self.assertEqual(cli.main([]), cli.EXIT_FAILURE)

    def test_cancellation_exits_130(self) -> None:
        self.manager.run.side_effect = RunCancelledError("cancelled")
        self.assertEqual(cli.main([]), cli.EXIT_CANCELLED)

    def test_configures_logging_from_config(self) -> None:
        os.environ["SLACK_RETENTION_LOG_LEVEL"] = "debug"
        self.manager.run.return_value = RunResult(status="success", cutoff=CUTOFF)

        cli.main([])
        cli.configure_logging.assert_called_once_with("DEBUG", None)


class TestSignalHandlers(unittest.TestCase):
    def setUp(self) -> None:
        self._previous = {
            sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)
        }

    def tearDown(self) -> None:
        for sig, handler in self._previous.items():
            signal.signal(sig, handler)

    def test_signal_cancels_token(self) -> None:
        token = CancellationToken()
        cli.install_signal_handlers(token)

        handler = signal.getsignal(signal.SIGTERM)
        handler(signal.SIGTERM, None)

        self.assertTrue(token.cancelled)

    def test_sigint_is_handled_too(self) -> None:
        token = CancellationToken()
        cli.install_signal_handlers(token)

        signal.getsignal(signal.SIGINT)(signal.SIGINT, None)

        self.assertTrue(token.cancelled)


if __name__ == "__main__":
    unittest.main()
