"""Result models for a retention run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Optional


OutcomeStatus = Literal["deleted", "archive_failed", "delete_failed", "skipped"]
ArchiveState = Literal["archived", "no_download_url", "withheld", "failed", "not_attempted"]
RunStatus = Literal["success"]


@dataclass(slots=True)
class FileOutcome:
    """Result for a single file."""

    file_id: str
    name: str
    status: OutcomeStatus
    archive: ArchiveState

    local_path: Optional[str] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None


@dataclass(slots=True)
class RunResult:
    """
    Aggregate result of one run.

    A run that returns always has status "success": per-file failures are
    recorded in `results`, listing failures and cancellation raise instead.
    """

    status: RunStatus
    cutoff: datetime
    results: list[FileOutcome] = field(default_factory=list)
    summary: dict[str, int] = field(default_factory=dict)
