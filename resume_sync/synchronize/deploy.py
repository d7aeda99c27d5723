"""Triggers a production deployment with the Vercel CLI."""

import re
import shlex
from pathlib import Path

import structlog

from resume_sync.configuration.models import SyncConfig
from resume_sync.runner.abc import CommandRunnerBase
from resume_sync.synchronize.exceptions import DeployFailureError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

DEPLOYMENT_URL_PATTERN = re.compile(r"https://\S+")
"""Pattern to match URLs printed by the Vercel CLI."""


def build_deploy_command(config: SyncConfig) -> list[str]:
    """Build the non-interactive production deploy command.

    When nvm is installed, the command runs in a bash shell that sources
    nvm first so an npm-installed Vercel CLI is on the PATH.
    """
    command = [config.vercel_bin, "--prod", "--yes"]
    nvm_script = nvm_init_script(config.nvm_dir)
    if nvm_script is None:
        return command
    return ["bash", "-c", f". {shlex.quote(str(nvm_script))} && {shlex.join(command)}"]


def nvm_init_script(nvm_dir: Path | None) -> Path | None:
    """Return nvm's init script if it exists and is non-empty."""
    if nvm_dir is None:
        return None
    script = nvm_dir / "nvm.sh"
    if script.is_file() and script.stat().st_size > 0:
        return script
    return None


def extract_deployment_url(output: str) -> str | None:
    """Return the last URL printed by the Vercel CLI, if any."""
    urls = DEPLOYMENT_URL_PATTERN.findall(output)
    if not urls:
        return None
    return urls[-1]


def trigger_deployment(config: SyncConfig, runner: CommandRunnerBase) -> str | None:
    """Deploy the project to production.

    Raises:
        DeployFailureError: If the Vercel CLI exits non-zero or cannot be started.

    Returns:
        str | None: The deployment URL reported by the Vercel CLI.
    """
    result = runner.run(build_deploy_command(config), cwd=config.project_dir)
    if not result.ok:
        raise DeployFailureError(result)
    deployment_url = extract_deployment_url(result.stdout)
    logger.info("Vercel deployment triggered successfully", deployment_url=deployment_url)
    return deployment_url
