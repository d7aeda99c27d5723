"""Best-effort desktop notifications."""

import sys

import structlog

from resume_sync.runner.abc import CommandRunnerBase
from resume_sync.utils.constants import NOTIFICATION_TITLE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _applescript_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class DesktopNotifier:
    """Shows desktop notifications through the platform's notification helper.

    Uses `osascript` on macOS and `notify-send` on Linux. A failed
    notification is logged and otherwise ignored.
    """

    def __init__(self, runner: CommandRunnerBase, enabled: bool = True, title: str = NOTIFICATION_TITLE, platform: str | None = None) -> None:
        self.runner = runner
        self.enabled = enabled
        self.title = title
        self.platform = platform or sys.platform

    def build_command(self, message: str) -> list[str] | None:
        """Build the notification command for this platform, or None when unsupported."""
        if self.platform == "darwin":
            script = f"display notification {_applescript_string(message)} with title {_applescript_string(self.title)}"
            return ["osascript", "-e", script]
        if self.platform.startswith("linux"):
            return ["notify-send", self.title, message]
        return None

    def notify(self, message: str) -> bool:
        """Show a notification. Returns whether one was shown."""
        if not self.enabled:
            return False
        command = self.build_command(message)
        if command is None:
            logger.debug("Desktop notifications are not supported on this platform", platform=self.platform)
            return False
        try:
            result = self.runner.run(command)
        except Exception as exc:
            logger.warning("Failed to send desktop notification", notification=message, error=str(exc))
            return False
        if not result.ok:
            logger.warning("Failed to send desktop notification", notification=message, returncode=result.returncode, output=result.output)
            return False
        return True
