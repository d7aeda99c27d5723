"""Defines the Command Line Interface (CLI) using Typer."""

import shutil
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from resume_sync.agents.launchd import DEFAULT_LAUNCHD_LABEL, render_launchd_agent
from resume_sync.configuration import env
from resume_sync.configuration.driver import get_sync_config
from resume_sync.configuration.exceptions import InvalidConfigurationError, RequiredConfigurationElementError
from resume_sync.configuration.models import SyncConfig
from resume_sync.runner.subprocess_runner import SubprocessCommandRunner
from resume_sync.synchronize.detector import decide_sync_action
from resume_sync.synchronize.driver import run_sync_workflow
from resume_sync.synchronize.exceptions import ResumeSyncError
from resume_sync.synchronize.files import ensure_source_exists
from resume_sync.utils.logging import configure_logging

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Sync a resume into a web project, push it and deploy it.")


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    source_file: Annotated[Path | None, Option(help="Resume file to watch (env SOURCE_FILE).")] = None,
    dest_file: Annotated[Path | None, Option(help="Where the resume lives in the web project (env DEST_FILE).")] = None,
    project_dir: Annotated[Path | None, Option(help="Web project root used for git and deployment (env PROJECT_DIR).")] = None,
    git_branch: Annotated[str | None, Option(help="Branch to push to (env GIT_BRANCH).")] = None,
    git_remote: Annotated[str | None, Option(help="Remote to push to (env GIT_REMOTE).")] = None,
    log_file: Annotated[Path | None, Option(help="Log file path (env LOG_FILE).")] = None,
    git: Annotated[bool | None, Option("--git/--no-git", help="Commit and push changes (env ENABLE_GIT).")] = None,
    deploy: Annotated[bool | None, Option("--deploy/--no-deploy", help="Deploy with the Vercel CLI (env ENABLE_VERCEL).")] = None,
    notifications: Annotated[
        bool | None, Option("--notifications/--no-notifications", help="Show desktop notifications (env ENABLE_NOTIFICATIONS).")
    ] = None,
    lock: Annotated[bool | None, Option("--lock/--no-lock", help="Serialise concurrent runs with a lock file (env ENABLE_LOCK).")] = None,
    env_file: Annotated[Path | None, Option(envvar="RESUME_SYNC_ENV_FILE", help="Extra .env file to load before reading settings.")] = None,
    debug: Annotated[bool | None, Option("--debug/--no-debug", help="Enable debug logging (env DEBUG).")] = None,
) -> None:
    """Collect configuration overrides for the selected command."""
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
        env.reload_settings()
    # Console only until a command knows where its log file lives.
    configure_logging(None, debug=debug if debug is not None else env.settings.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj["overrides"] = {
        "source_file": source_file,
        "dest_file": dest_file,
        "project_dir": project_dir,
        "git_branch": git_branch,
        "git_remote": git_remote,
        "log_file": log_file,
        "git_enabled": git,
        "deploy_enabled": deploy,
        "notifications_enabled": notifications,
        "lock_enabled": lock,
        "debug": debug,
    }


def load_config(ctx: typer.Context) -> SyncConfig:
    """Reconcile the CLI overrides with the environment, exiting 1 on bad configuration."""
    try:
        return get_sync_config(**ctx.obj["overrides"])
    except (RequiredConfigurationElementError, InvalidConfigurationError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(1) from exc


@typer_app.command(name="sync")
def sync_cli(ctx: typer.Context) -> None:
    """Copy the resume into the project if it changed, then commit, push and deploy."""
    config = load_config(ctx)
    try:
        configure_logging(config.log_file, debug=config.debug)
    except OSError as exc:
        typer.echo(f"Cannot open log file {config.log_file}: {exc}", err=True)
        raise typer.Exit(1) from exc
    logger.debug("Reconciled sync configuration", config=config)
    result = run_sync_workflow(config, SubprocessCommandRunner())
    if result.exit_code != 0:
        raise typer.Exit(result.exit_code)


@typer_app.command(name="status")
def status_cli(ctx: typer.Context) -> None:
    """Show whether the project's copy of the resume is out of date. Changes nothing."""
    config = load_config(ctx)
    try:
        ensure_source_exists(config.source_file)
        decision, source_digest, dest_digest = decide_sync_action(config.source_file, config.dest_file)
    except ResumeSyncError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    typer.echo(f"Source:      {config.source_file} ({source_digest})")
    typer.echo(f"Destination: {config.dest_file} ({dest_digest or 'missing'})")
    typer.echo(f"Decision:    {decision.value}")


@typer_app.command(name="launchd-plist")
def launchd_plist_cli(
    ctx: typer.Context,
    label: Annotated[str, Option(help="launchd job label.")] = DEFAULT_LAUNCHD_LABEL,
    output: Annotated[Path | None, Option(help="Write the plist here instead of printing it.")] = None,
    program: Annotated[str | None, Option(help="Path to the resume-sync executable. Defaults to the one on PATH.")] = None,
) -> None:
    """Generate a launchd agent that runs a sync whenever the resume is saved."""
    config = load_config(ctx)
    program_path = program or shutil.which("resume-sync") or sys.argv[0]
    plist = render_launchd_agent(config, program=program_path, label=label)
    if output is None:
        typer.echo(plist, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(plist, encoding="utf-8")
    typer.echo(f"Wrote launchd agent to {output}")
    typer.echo(f"Load it with: launchctl load {output}")


if __name__ == "__main__":
    typer_app()
