"""Logging setup for the retention job."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


class DailyLogFileHandler(logging.FileHandler):
    """
    FileHandler writing to `<log_dir>/<YYYY-MM-DD>.log`.

    The target file switches at local midnight; whenever a day's file is
    opened, dated logs older than `keep_days` are removed.
    """

    def __init__(self, log_dir: Path, *, keep_days: int = 7) -> None:
        self.log_dir = Path(log_dir)
        self.keep_days = max(keep_days, 1)
        self._day = date.today()
        super().__init__(self._path_for(self._day), encoding="utf-8", delay=True)

    def emit(self, record: logging.LogRecord) -> None:
        today = date.today()
        if today != self._day:
            # Runs under the handler lock taken by Handler.handle().
            if self.stream is not None:
                self.stream.close()
                self.stream = None
            self._day = today
            self.baseFilename = str(self._path_for(today).absolute())
        super().emit(record)

    def _open(self):
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._prune(self._day)
        return super()._open()

    def _path_for(self, day: date) -> Path:
        return self.log_dir / f"{day.isoformat()}.log"

    def _prune(self, today: date) -> None:
        oldest_kept = today - timedelta(days=self.keep_days - 1)
        for path in self.log_dir.glob("*.log"):
            try:
                day = date.fromisoformat(path.stem)
            except ValueError:
                continue
            if day < oldest_kept:
                try:
                    path.unlink()
                except OSError:
                    continue


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Replace root handlers with a console handler and an optional daily file."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir is not None:
        file_handler = DailyLogFileHandler(log_dir)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.captureWarnings(True)


__all__ = ["configure_logging", "DailyLogFileHandler", "LOG_FORMAT"]
