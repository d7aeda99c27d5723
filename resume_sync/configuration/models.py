"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SyncConfig:
    """Resolved configuration for a single resume sync run."""

    source_file: Path
    dest_file: Path
    project_dir: Path
    git_branch: str
    git_remote: str
    log_file: Path
    git_enabled: bool
    deploy_enabled: bool
    notifications_enabled: bool
    lock_enabled: bool
    lock_file: Path
    lock_timeout: float
    commit_message_template: str
    vercel_bin: str
    nvm_dir: Path | None
    debug: bool = False

    @property
    def dest_relative_path(self) -> Path:
        """Destination file path relative to the project root."""
        return self.dest_file.relative_to(self.project_dir)
