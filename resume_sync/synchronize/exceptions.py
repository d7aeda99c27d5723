"""Custom exceptions for the synchronize module.

Every exception here is fatal to a sync run: the workflow logs it, sends its
notification (when it has one) and exits non-zero. Nothing is rolled back.
"""

from pathlib import Path

from resume_sync.runner.models import CommandResult


class ResumeSyncError(Exception):
    """Base class for fatal sync run errors."""

    notification: str | None = None
    """Desktop notification text sent when this error ends a run."""


class MissingSourceError(ResumeSyncError):
    """Raised when the source resume does not exist."""

    def __init__(self, source_file: Path) -> None:
        super().__init__(f"Source file not found: {source_file}")
        self.source_file = source_file


class DigestFailureError(ResumeSyncError):
    """Raised when a content digest cannot be computed."""

    notification = "Failed to read resume"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to compute digest of {path}: {reason}")
        self.path = path


class CopyFailureError(ResumeSyncError):
    """Raised when the resume cannot be copied into the project."""

    notification = "Failed to copy resume"

    def __init__(self, source_file: Path, dest_file: Path, reason: str) -> None:
        super().__init__(f"Failed to copy file {source_file} to {dest_file}: {reason}")
        self.source_file = source_file
        self.dest_file = dest_file


class GitCommandError(ResumeSyncError):
    """Raised when a git command fails."""

    notification = "Git command failed"

    def __init__(self, message: str, result: CommandResult) -> None:
        detail = f" ({result.output})" if result.output else ""
        super().__init__(f"{message}: exit status {result.returncode}{detail}")
        self.result = result


class PushFailureError(GitCommandError):
    """Raised when pushing to the remote fails."""

    notification = "Git push failed"


class DeployFailureError(ResumeSyncError):
    """Raised when the Vercel deployment fails."""

    notification = "Vercel deployment failed"

    def __init__(self, result: CommandResult) -> None:
        detail = f" ({result.output})" if result.output else ""
        super().__init__(f"Vercel deployment failed: exit status {result.returncode}{detail}")
        self.result = result


class RunLockError(ResumeSyncError):
    """Raised when the run lock cannot be acquired."""

    notification = "Resume sync already running"

    def __init__(self, lock_file: Path, reason: str) -> None:
        super().__init__(f"Could not acquire run lock {lock_file}: {reason}")
        self.lock_file = lock_file


class CommitMessageError(ResumeSyncError):
    """Raised when the commit message template cannot be rendered."""

    notification = "Invalid commit message template"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to render commit message template: {reason}")
