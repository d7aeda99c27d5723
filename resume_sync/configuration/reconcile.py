"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path
from typing import TypeVar

import jinja2

from resume_sync.configuration import env
from resume_sync.configuration.exceptions import InvalidConfigurationError, RequiredConfigurationElementError
from resume_sync.configuration.models import SyncConfig
from resume_sync.utils.constants import (
    DEFAULT_COMMIT_MESSAGE_TEMPLATE,
    DEFAULT_LOG_FILE_RELATIVE_PATH,
    DEFAULT_NVM_DIR,
    LOCK_FILE_SUFFIX,
)
from resume_sync.utils.templates import construct_jinja2_template_from_string, render_template

T = TypeVar("T")


def _prefer_cli(cli_value: T | None, env_value: T) -> T:
    """Return the CLI value when one was given, otherwise the environment value."""
    if cli_value is not None:
        return cli_value
    return env_value


def _require_path(cli_value: Path | None, env_value: Path | None, name: str, cli_name: str, env_name: str) -> Path:
    value = _prefer_cli(cli_value, env_value)
    if value is None:
        raise RequiredConfigurationElementError(name=name, cli_name=cli_name, env_name=env_name)
    return Path(value).expanduser().absolute()


def _validate_commit_message_template(template_string: str, source_file: Path, dest_file: Path, git_branch: str) -> None:
    """Render the commit message template once so mistakes surface before any file is touched."""
    try:
        template = construct_jinja2_template_from_string(template_string)
        render_template(template, source_file=str(source_file), dest_file=str(dest_file), git_branch=git_branch)
    except jinja2.TemplateError as exc:
        raise InvalidConfigurationError(f"Invalid COMMIT_MESSAGE_TEMPLATE: {exc}") from exc


def reconcile_sync_configuration(
    cli_source_file: Path | None = None,
    cli_dest_file: Path | None = None,
    cli_project_dir: Path | None = None,
    cli_git_branch: str | None = None,
    cli_git_remote: str | None = None,
    cli_log_file: Path | None = None,
    cli_git_enabled: bool | None = None,
    cli_deploy_enabled: bool | None = None,
    cli_notifications_enabled: bool | None = None,
    cli_lock_enabled: bool | None = None,
    cli_debug: bool | None = None,
) -> SyncConfig:
    """Reconciles CLI arguments with environment settings into a SyncConfig.

    CLI arguments take precedence over environment variables (and `.env`),
    which take precedence over built-in defaults.

    Raises:
        RequiredConfigurationElementError: If the source, destination or project directory is missing.
        InvalidConfigurationError: If git is enabled and the destination is outside the project directory,
            or the commit message template does not render.

    Returns:
        SyncConfig: The resolved configuration.
    """
    source_file = _require_path(cli_source_file, env.settings.SOURCE_FILE, "Source file", "--source-file", "SOURCE_FILE")
    dest_file = _require_path(cli_dest_file, env.settings.DEST_FILE, "Destination file", "--dest-file", "DEST_FILE")
    project_dir = _require_path(cli_project_dir, env.settings.PROJECT_DIR, "Project directory", "--project-dir", "PROJECT_DIR")

    log_file_value = _prefer_cli(cli_log_file, env.settings.LOG_FILE)
    if log_file_value is None:
        log_file = project_dir / DEFAULT_LOG_FILE_RELATIVE_PATH
    else:
        log_file = Path(log_file_value).expanduser().absolute()

    if env.settings.LOCK_FILE is None:
        lock_file = log_file.with_name(log_file.name + LOCK_FILE_SUFFIX)
    else:
        lock_file = Path(env.settings.LOCK_FILE).expanduser().absolute()

    nvm_dir = Path(env.settings.NVM_DIR or DEFAULT_NVM_DIR).expanduser()

    git_enabled = _prefer_cli(cli_git_enabled, env.settings.ENABLE_GIT)
    if git_enabled and not dest_file.is_relative_to(project_dir):
        raise InvalidConfigurationError(
            f"Destination file {dest_file} is not inside project directory {project_dir}; git integration needs a path relative to the project."
        )

    git_branch = _prefer_cli(cli_git_branch, env.settings.GIT_BRANCH)
    commit_message_template = env.settings.COMMIT_MESSAGE_TEMPLATE or DEFAULT_COMMIT_MESSAGE_TEMPLATE
    if git_enabled:
        _validate_commit_message_template(commit_message_template, source_file, dest_file.relative_to(project_dir), git_branch)

    config = SyncConfig(
        source_file=source_file,
        dest_file=dest_file,
        project_dir=project_dir,
        git_branch=git_branch,
        git_remote=_prefer_cli(cli_git_remote, env.settings.GIT_REMOTE),
        log_file=log_file,
        git_enabled=git_enabled,
        deploy_enabled=_prefer_cli(cli_deploy_enabled, env.settings.ENABLE_VERCEL),
        notifications_enabled=_prefer_cli(cli_notifications_enabled, env.settings.ENABLE_NOTIFICATIONS),
        lock_enabled=_prefer_cli(cli_lock_enabled, env.settings.ENABLE_LOCK),
        lock_file=lock_file,
        lock_timeout=env.settings.LOCK_TIMEOUT,
        commit_message_template=commit_message_template,
        vercel_bin=env.settings.VERCEL_BIN,
        nvm_dir=nvm_dir,
        debug=_prefer_cli(cli_debug, env.settings.DEBUG),
    )
    return config
