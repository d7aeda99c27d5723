"""Driver for configuration reconciliation for the CLI entry point."""

from pathlib import Path

from resume_sync.configuration import reconcile
from resume_sync.configuration.models import SyncConfig


def get_sync_config(
    source_file: Path | None = None,
    dest_file: Path | None = None,
    project_dir: Path | None = None,
    git_branch: str | None = None,
    git_remote: str | None = None,
    log_file: Path | None = None,
    git_enabled: bool | None = None,
    deploy_enabled: bool | None = None,
    notifications_enabled: bool | None = None,
    lock_enabled: bool | None = None,
    debug: bool | None = None,
) -> SyncConfig:
    """Get the reconciled sync configuration."""
    return reconcile.reconcile_sync_configuration(
        cli_source_file=source_file,
        cli_dest_file=dest_file,
        cli_project_dir=project_dir,
        cli_git_branch=git_branch,
        cli_git_remote=git_remote,
        cli_log_file=log_file,
        cli_git_enabled=git_enabled,
        cli_deploy_enabled=deploy_enabled,
        cli_notifications_enabled=notifications_enabled,
        cli_lock_enabled=lock_enabled,
        cli_debug=debug,
    )
