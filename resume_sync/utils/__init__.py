"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_COMMIT_MESSAGE_TEMPLATE,
    DEFAULT_GIT_BRANCH,
    DEFAULT_GIT_REMOTE,
    NOTIFICATION_TITLE,
)
from .logging import configure_logging, reset_logging

__all__ = [
    "DEFAULT_COMMIT_MESSAGE_TEMPLATE",
    "DEFAULT_GIT_BRANCH",
    "DEFAULT_GIT_REMOTE",
    "NOTIFICATION_TITLE",
    "configure_logging",
    "reset_logging",
]
