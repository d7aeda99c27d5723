"""Contains git publishing logic for the synced resume."""

import jinja2
import structlog

from resume_sync.configuration.models import SyncConfig
from resume_sync.runner.abc import CommandRunnerBase
from resume_sync.synchronize.exceptions import CommitMessageError, GitCommandError, PushFailureError
from resume_sync.synchronize.models import PublishOutcome
from resume_sync.utils.templates import construct_jinja2_template_from_string, render_template

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def render_commit_message(config: SyncConfig) -> str:
    """Render the commit message template for this configuration.

    Raises:
        CommitMessageError: If the template has a syntax error or uses an unknown variable.
    """
    try:
        template = construct_jinja2_template_from_string(config.commit_message_template)
        return render_template(
            template,
            source_file=str(config.source_file),
            dest_file=str(config.dest_relative_path),
            git_branch=config.git_branch,
        )
    except jinja2.TemplateError as exc:
        raise CommitMessageError(str(exc)) from exc


def stage_file(config: SyncConfig, runner: CommandRunnerBase) -> None:
    """Stage exactly the destination file."""
    result = runner.run(["git", "add", "--", str(config.dest_relative_path)], cwd=config.project_dir)
    if not result.ok:
        raise GitCommandError(f"Failed to stage {config.dest_relative_path}", result)


def has_staged_changes(config: SyncConfig, runner: CommandRunnerBase) -> bool:
    """Whether the destination file has staged changes to commit.

    `git diff --quiet` exits 0 for no changes and 1 for changes; anything else is an error.
    """
    result = runner.run(["git", "diff", "--cached", "--quiet", "--", str(config.dest_relative_path)], cwd=config.project_dir)
    if result.returncode == 0:
        return False
    if result.returncode == 1:
        return True
    raise GitCommandError(f"Failed to inspect staged changes for {config.dest_relative_path}", result)


def commit_file(config: SyncConfig, runner: CommandRunnerBase, message: str) -> None:
    """Commit only the destination file."""
    result = runner.run(["git", "commit", "-m", message, "--", str(config.dest_relative_path)], cwd=config.project_dir)
    if not result.ok:
        raise GitCommandError(f"Failed to commit {config.dest_relative_path}", result)


def push_branch(config: SyncConfig, runner: CommandRunnerBase) -> None:
    """Push the configured branch to the configured remote."""
    result = runner.run(["git", "push", config.git_remote, config.git_branch], cwd=config.project_dir)
    if not result.ok:
        raise PushFailureError(f"Failed to push {config.git_branch} to {config.git_remote}", result)


def publish_destination(config: SyncConfig, runner: CommandRunnerBase) -> PublishOutcome:
    """Stage, commit and push the destination file.

    Nothing to commit is not an error: the push still runs, so commits
    left behind by an earlier failed push get published. Pushing with
    nothing new is a successful no-op.

    Raises:
        CommitMessageError: If the commit message cannot be rendered. Nothing is staged in that case.
        GitCommandError: If staging or committing fails.
        PushFailureError: If the push fails.
    """
    message = render_commit_message(config)
    stage_file(config, runner)
    if has_staged_changes(config, runner):
        commit_file(config, runner, message)
        outcome = PublishOutcome.COMMITTED
        logger.info("Committed resume", path=str(config.dest_relative_path))
    else:
        outcome = PublishOutcome.NOTHING_TO_COMMIT
        logger.info("No git changes to commit")

    push_branch(config, runner)
    logger.info(f"Pushed to git ({config.git_branch})", remote=config.git_remote)
    return outcome
