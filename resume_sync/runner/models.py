"""Data models for command execution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the command exited successfully."""
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, stripped, for log messages."""
        return "\n".join(part.strip() for part in (self.stdout, self.stderr) if part.strip())
