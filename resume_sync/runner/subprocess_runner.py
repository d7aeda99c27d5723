"""Command runner backed by the subprocess module."""

import subprocess
from pathlib import Path

import structlog

from resume_sync.runner.abc import CommandRunnerBase
from resume_sync.runner.models import CommandResult
from resume_sync.utils.constants import COMMAND_NOT_FOUND_RETURNCODE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SubprocessCommandRunner(CommandRunnerBase):
    """Runs commands synchronously, blocking until each one exits."""

    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        """Run a command and capture its output."""
        logger.debug("Running command", command=" ".join(args), cwd=str(cwd) if cwd else None)
        try:
            completed = subprocess.run(args, cwd=cwd, capture_output=True, text=True, check=False)
        except OSError as exc:
            # Missing executable or missing working directory.
            logger.warning("Command could not be started", command=args[0], cwd=str(cwd) if cwd else None, error=str(exc))
            return CommandResult(args=tuple(args), returncode=COMMAND_NOT_FOUND_RETURNCODE, stderr=str(exc))
        result = CommandResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        logger.debug("Command finished", command=args[0], returncode=result.returncode, output=result.output)
        return result
