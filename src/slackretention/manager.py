"""RetentionManager: wires the Slack controller into the retention pipeline."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from slackretention.auth import AuthInfo
from slackretention.config import RetentionConfig
from slackretention.controller import SlackController
from slackretention.models import RunResult
from slackretention.pipeline import (
    FileArchiver,
    PaginatedLister,
    RetentionPipeline,
    RetryableCall,
)
from slackretention.util.cancel import CancellationToken
from slackretention.util.time import now_utc


class RetentionManager:
    """High-level entry point: one `run()` per scheduled invocation."""

    def __init__(self, auth_info: AuthInfo, config: Optional[RetentionConfig] = None) -> None:
        self._controller = SlackController(auth_info)
        self._config = config or RetentionConfig()

    @classmethod
    def from_controller(
        cls,
        controller: SlackController,
        config: Optional[RetentionConfig] = None,
    ) -> "RetentionManager":
        """Create manager with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._controller = controller
        obj._config = config or RetentionConfig()
        return obj

    @property
    def config(self) -> RetentionConfig:
        return self._config

    def build_pipeline(
        self,
        cancel_token: CancellationToken,
        *,
        clock: Callable[[], datetime] = now_utc,
    ) -> RetentionPipeline:
        """Build a pipeline whose components share one retry policy and token."""
        cfg = self._config
        retry = RetryableCall(cancel_token, default_retry_after=cfg.default_retry_after)
        lister = PaginatedLister(self._controller, retry, page_size=cfg.page_size)
        archiver = FileArchiver(self._controller, retry, cfg.save_dir)
        return RetentionPipeline(
            lister,
            archiver,
            self._controller,
            retry,
            retention_days=cfg.retention_days,
            users=self._controller,
            clock=clock,
        )

    def run(
        self,
        cancel_token: Optional[CancellationToken] = None,
        *,
        clock: Callable[[], datetime] = now_utc,
    ) -> RunResult:
        """
        Run one cleanup pass.

        Raises:
            ListingError: if enumerating files fails.
            RunCancelledError: if `cancel_token` fires.
        """
        token = cancel_token or CancellationToken()
        return self.build_pipeline(token, clock=clock).run()
