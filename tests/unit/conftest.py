"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator

import pytest
import structlog

from resume_sync.configuration.models import SyncConfig
from resume_sync.runner.abc import CommandRunnerBase
from resume_sync.runner.models import CommandResult
from resume_sync.utils.constants import DEFAULT_COMMIT_MESSAGE_TEMPLATE
from resume_sync.utils.logging import reset_logging


class FakeCommandRunner(CommandRunnerBase):
    """Records every command and answers with canned results.

    Results are looked up by the longest matching command prefix; anything
    unmatched succeeds with empty output. `git diff --cached --quiet`
    reports staged changes by default.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []
        self.results: dict[tuple[str, ...], CommandResult] = {
            ("git", "diff"): CommandResult(args=("git", "diff"), returncode=1),
        }

    def set_result(self, prefix: tuple[str, ...], returncode: int, stdout: str = "", stderr: str = "") -> None:
        self.results[prefix] = CommandResult(args=prefix, returncode=returncode, stdout=stdout, stderr=stderr)

    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        self.calls.append((tuple(args), cwd))
        matches = [prefix for prefix in self.results if tuple(args[: len(prefix)]) == prefix]
        if not matches:
            return CommandResult(args=tuple(args), returncode=0)
        canned = self.results[max(matches, key=len)]
        return CommandResult(args=tuple(args), returncode=canned.returncode, stdout=canned.stdout, stderr=canned.stderr)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [args for args, _ in self.calls]

    def commands_starting_with(self, executable: str) -> list[tuple[str, ...]]:
        return [args for args in self.commands if args and args[0] == executable]


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    reset_logging()
    structlog.reset_defaults()


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    """A command runner that records commands instead of running them."""
    return FakeCommandRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty web project directory."""
    project = tmp_path / "site"
    project.mkdir()
    return project


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A binary resume file containing bytes that must survive the copy unchanged."""
    source = tmp_path / "Documents" / "resume-v2.pdf"
    source.parent.mkdir()
    source.write_bytes(b"%PDF-1.7\n" + bytes(range(256)) * 2048 + b"\r\n%%EOF\n")
    return source


@pytest.fixture
def sync_config(tmp_path: Path, project_dir: Path, source_file: Path) -> SyncConfig:
    """A configuration with every feature enabled except the run lock."""
    return SyncConfig(
        source_file=source_file,
        dest_file=project_dir / "public" / "resume.pdf",
        project_dir=project_dir,
        git_branch="main",
        git_remote="origin",
        log_file=project_dir / "scripts" / "resume-sync.log",
        git_enabled=True,
        deploy_enabled=True,
        notifications_enabled=True,
        lock_enabled=False,
        lock_file=project_dir / "scripts" / "resume-sync.log.lock",
        lock_timeout=1.0,
        commit_message_template=DEFAULT_COMMIT_MESSAGE_TEMPLATE,
        vercel_bin="vercel",
        nvm_dir=tmp_path / "no-nvm",
    )
