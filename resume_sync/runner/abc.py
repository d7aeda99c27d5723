"""Base ABC for command runners."""

from abc import ABC, abstractmethod
from pathlib import Path

from resume_sync.runner.models import CommandResult


class CommandRunnerBase(ABC):
    """Base ABC for command runners."""

    @abstractmethod
    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        """Run a command to completion and return its result.

        Implementations must not raise on a non-zero exit status; callers
        decide what a failure means.
        """
        pass
