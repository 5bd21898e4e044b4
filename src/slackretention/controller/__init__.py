"""Internal controller exports for slackretention."""

from __future__ import annotations

from .base import ContentFetcher, FileDeleter, FileListing, UserDirectory
from .slack_controller import SlackController

__all__ = [
    "SlackController",
    "FileListing",
    "ContentFetcher",
    "FileDeleter",
    "UserDirectory",
]
