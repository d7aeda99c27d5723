"""Internal data models for sync runs."""

from enum import Enum


class SyncDecision(Enum):
    """Enum for sync decisions."""

    COPY = "copy"
    NOOP = "noop"


class SyncRunStatus(str, Enum):
    """Terminal status of a sync run."""

    SYNCED = "synced"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class PublishOutcome(str, Enum):
    """What the git publisher did with the destination file."""

    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing_to_commit"
