"""Renders a macOS launchd agent that runs a sync whenever the resume is saved."""

import structlog

from resume_sync.configuration.models import SyncConfig
from resume_sync.utils.templates import construct_jinja2_environment, construct_jinja2_template_from_package, render_template

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

DEFAULT_LAUNCHD_LABEL = "local.resume-sync"
LAUNCHD_TEMPLATE_NAME = "launchd_agent.plist.j2"


def build_agent_environment(config: SyncConfig) -> dict[str, str]:
    """Export the resolved configuration as environment variables for the agent."""
    environment = {
        "SOURCE_FILE": str(config.source_file),
        "DEST_FILE": str(config.dest_file),
        "PROJECT_DIR": str(config.project_dir),
        "LOG_FILE": str(config.log_file),
        "GIT_BRANCH": config.git_branch,
        "GIT_REMOTE": config.git_remote,
        "ENABLE_GIT": str(config.git_enabled).lower(),
        "ENABLE_VERCEL": str(config.deploy_enabled).lower(),
        "ENABLE_NOTIFICATIONS": str(config.notifications_enabled).lower(),
        "ENABLE_LOCK": str(config.lock_enabled).lower(),
    }
    if config.nvm_dir is not None:
        environment["NVM_DIR"] = str(config.nvm_dir)
    return environment


def render_launchd_agent(config: SyncConfig, program: str, label: str = DEFAULT_LAUNCHD_LABEL) -> str:
    """Render a launchd plist watching the source file.

    Args:
        config: The resolved sync configuration to bake into the agent.
        program: Path to the `resume-sync` executable.
        label: The launchd job label.

    Returns:
        str: The plist XML.
    """
    template = construct_jinja2_template_from_package(LAUNCHD_TEMPLATE_NAME, environment=construct_jinja2_environment(autoescape=True))
    plist = render_template(
        template,
        label=label,
        program_arguments=[program, "sync"],
        working_directory=str(config.project_dir),
        environment_variables=build_agent_environment(config),
        watch_path=str(config.source_file),
    )
    logger.debug("Rendered launchd agent", label=label, watch_path=str(config.source_file))
    return plist
