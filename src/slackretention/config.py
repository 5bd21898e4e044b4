"""Configuration for slackretention, read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from slackretention.auth import DEFAULT_TOKEN_ENV_VAR
from slackretention.pipeline import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_RETENTION_DAYS,
    DEFAULT_RETRY_AFTER_SEC,
)

ENV_PREFIX: str = "SLACK_RETENTION_"
MAX_PAGE_SIZE: int = 1000


@dataclass(slots=True)
class RetentionConfig:
    """
    Settings for one retention run.

    The API token itself is not stored here; `token_env_var` names the
    variable AuthInfo.from_env reads it from.
    """

    retention_days: int = DEFAULT_RETENTION_DAYS
    save_dir: Path = Path("files")
    page_size: int = DEFAULT_PAGE_SIZE
    default_retry_after: float = DEFAULT_RETRY_AFTER_SEC
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    token_env_var: str = DEFAULT_TOKEN_ENV_VAR

    def __post_init__(self) -> None:
        if self.retention_days < 1:
            raise ValueError(f"{ENV_PREFIX}DAYS must be >= 1")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"{ENV_PREFIX}PAGE_SIZE must be between 1 and {MAX_PAGE_SIZE}")
        if self.default_retry_after < 0:
            raise ValueError(f"{ENV_PREFIX}DEFAULT_RETRY_AFTER must not be negative")
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a valid level: {self.log_level}")
        self.log_level = level

    @staticmethod
    def _coerce_path(value: Optional[str]) -> Optional[Path]:
        if value is None or not value.strip():
            return None
        return Path(os.path.expandvars(value.strip())).expanduser()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RetentionConfig":
        env = os.environ if environ is None else environ

        def _get(name: str) -> Optional[str]:
            value = env.get(f"{ENV_PREFIX}{name}")
            if value is None or not value.strip():
                return None
            return value.strip()

        def _int(name: str, default: int) -> int:
            raw = _get(name)
            if raw is None:
                return default
            try:
                return int(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc

        def _float(name: str, default: float) -> float:
            raw = _get(name)
            if raw is None:
                return default
            try:
                return float(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc

        save_dir = cls._coerce_path(_get("SAVE_DIR")) or Path("files")

        return cls(
            retention_days=_int("DAYS", DEFAULT_RETENTION_DAYS),
            save_dir=save_dir,
            page_size=_int("PAGE_SIZE", DEFAULT_PAGE_SIZE),
            default_retry_after=_float("DEFAULT_RETRY_AFTER", DEFAULT_RETRY_AFTER_SEC),
            log_level=_get("LOG_LEVEL") or "INFO",
            log_dir=cls._coerce_path(_get("LOG_DIR")),
            token_env_var=_get("TOKEN_ENV_VAR") or DEFAULT_TOKEN_ENV_VAR,
        )


__all__ = ["RetentionConfig", "ENV_PREFIX", "MAX_PAGE_SIZE"]
