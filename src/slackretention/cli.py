"""Delete Slack files older than the retention window, keeping a local copy."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Optional, Sequence

from slackretention.auth import AuthInfo
from slackretention.config import RetentionConfig
from slackretention.errors import AuthError, RunCancelledError, SlackRetentionError
from slackretention.logging_utils import configure_logging
from slackretention.manager import RetentionManager
from slackretention.util.cancel import CancellationToken

LOGGER = logging.getLogger("slackretention")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slack-retention",
        description=__doc__,
        epilog=(
            "Configuration comes from the environment: TOKEN (required), "
            "SLACK_RETENTION_DAYS, SLACK_RETENTION_SAVE_DIR, SLACK_RETENTION_PAGE_SIZE, "
            "SLACK_RETENTION_DEFAULT_RETRY_AFTER, SLACK_RETENTION_LOG_LEVEL, "
            "SLACK_RETENTION_LOG_DIR, SLACK_RETENTION_TOKEN_ENV_VAR."
        ),
    )
    return parser.parse_args(argv)


def install_signal_handlers(token: CancellationToken) -> None:
    def _handler(signum, _frame) -> None:
        LOGGER.warning("received signal %s, cancelling run", signum)
        token.cancel()

    signal.signal(signal.SIGINT, _handler)
    signal.signal(signal.SIGTERM, _handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parse_args(argv)

    try:
        config = RetentionConfig.from_env()
    except ValueError as exc:
        configure_logging()
        LOGGER.error("invalid configuration: %s", exc)
        return EXIT_FAILURE

    configure_logging(config.log_level, config.log_dir)
    LOGGER.info("starting")

    try:
        auth_info = AuthInfo.from_env(config.token_env_var)
    except AuthError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE

    token = CancellationToken()
    install_signal_handlers(token)

    try:
        result = RetentionManager(auth_info, config).run(token)
    except RunCancelledError as exc:
        LOGGER.warning("run cancelled: %s", exc)
        return EXIT_CANCELLED
    except SlackRetentionError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE

    LOGGER.info("finished: %s", result.summary)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
