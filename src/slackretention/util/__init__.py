from .cancel import CancellationToken
from .time import from_unix, normalize_dt, now_utc, retention_cutoff, to_slack_ts_to

__all__ = [
    "CancellationToken",
    "now_utc",
    "normalize_dt",
    "from_unix",
    "retention_cutoff",
    "to_slack_ts_to",
]
