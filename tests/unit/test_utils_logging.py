"""Unit tests for logging configuration."""

import logging
from pathlib import Path

import structlog

from resume_sync.utils.logging import configure_logging, render_log_file_line, reset_logging


def test_render_log_file_line_info() -> None:
    """Test the `[timestamp] message key=value` layout."""
    line = render_log_file_line(
        None,
        "info",
        {"timestamp": "2026-01-02 03:04:05", "level": "info", "event": "Copied resume to project", "dest_file": "/site/public/resume.pdf"},
    )

    assert line == "[2026-01-02 03:04:05] Copied resume to project dest_file=/site/public/resume.pdf"


def test_render_log_file_line_error_prefix() -> None:
    """Test that error events are prefixed like the rest of the log expects."""
    line = render_log_file_line(None, "error", {"timestamp": "2026-01-02 03:04:05", "level": "error", "event": "Git push failed", "logger": "x"})

    assert line == "[2026-01-02 03:04:05] ERROR: Git push failed"


def test_render_log_file_line_skips_none_values() -> None:
    """Test that empty extras are left out."""
    line = render_log_file_line(None, "info", {"timestamp": "t", "level": "info", "event": "Deployed", "deployment_url": None})

    assert line == "[t] Deployed"


def test_configure_logging_appends_to_log_file(tmp_path: Path) -> None:
    """Test that events are appended to the log file, creating its directory."""
    log_file = tmp_path / "scripts" / "resume-sync.log"
    log_file.parent.mkdir()
    log_file.write_text("[earlier] previous run\n")

    configure_logging(log_file)
    structlog.get_logger("resume_sync.test").info("Copied resume to project")
    logging.getLogger("resume_sync.stdlib").info("plain stdlib message")
    reset_logging()

    lines = log_file.read_text().splitlines()
    assert lines[0] == "[earlier] previous run"
    assert lines[1].startswith("[")
    assert lines[1].endswith("] Copied resume to project")
    assert lines[2].endswith("] plain stdlib message")


def test_configure_logging_creates_missing_directory(tmp_path: Path) -> None:
    """Test that a missing log directory is created."""
    log_file = tmp_path / "new" / "dir" / "sync.log"

    configure_logging(log_file)
    reset_logging()

    assert log_file.exists()


def test_configure_logging_twice_does_not_duplicate_lines(tmp_path: Path) -> None:
    """Test that reconfiguring replaces the previous handlers."""
    log_file = tmp_path / "sync.log"

    configure_logging(log_file)
    configure_logging(log_file)
    structlog.get_logger("resume_sync.test").info("once")
    reset_logging()

    assert log_file.read_text().count("once") == 1


def test_configure_logging_debug_level(tmp_path: Path) -> None:
    """Test that debug mode lets debug events through."""
    log_file = tmp_path / "sync.log"

    configure_logging(log_file, debug=True)
    structlog.get_logger("resume_sync.test").debug("verbose detail")
    reset_logging()

    assert "verbose detail" in log_file.read_text()


def test_configure_logging_without_log_file_installs_console_only(tmp_path: Path) -> None:
    """Test that console-only logging writes no file and filters debug events."""
    configure_logging(None)

    handler_names = sorted(handler.name for handler in logging.getLogger().handlers if handler.name and handler.name.startswith("resume_sync."))
    assert handler_names == ["resume_sync.console"]
    assert logging.getLogger().level == logging.INFO
    assert list(tmp_path.iterdir()) == []
