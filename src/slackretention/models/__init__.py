"""Public model exports for slackretention."""

from __future__ import annotations

from .file_info import HIDDEN_BY_LIMIT_MODE, FileInfo, PageResult
from .results import ArchiveState, FileOutcome, OutcomeStatus, RunResult, RunStatus

__all__ = [
    "HIDDEN_BY_LIMIT_MODE",
    "FileInfo",
    "PageResult",
    "OutcomeStatus",
    "ArchiveState",
    "RunStatus",
    "FileOutcome",
    "RunResult",
]
