"""Contains results of a sync run."""

from dataclasses import dataclass

from resume_sync.synchronize.exceptions import ResumeSyncError
from resume_sync.synchronize.models import PublishOutcome, SyncRunStatus


@dataclass
class SyncRunResult:
    """Contains results of a single sync run."""

    status: SyncRunStatus
    source_digest: str | None = None
    dest_digest: str | None = None
    copied: bool = False
    publish_outcome: PublishOutcome | None = None
    pushed: bool = False
    deployment_url: str | None = None
    error: ResumeSyncError | None = None

    @property
    def committed(self) -> bool:
        """Whether a new commit was created."""
        return self.publish_outcome == PublishOutcome.COMMITTED

    @property
    def exit_code(self) -> int:
        """Process exit status for this run: 0 on success or no-op, 1 on failure."""
        return 1 if self.status == SyncRunStatus.FAILED else 0
