"""Runs external commands (git, Vercel, notification helpers) behind a swappable interface."""

from .abc import CommandRunnerBase
from .models import CommandResult
from .subprocess_runner import SubprocessCommandRunner

__all__ = [
    "CommandResult",
    "CommandRunnerBase",
    "SubprocessCommandRunner",
]
