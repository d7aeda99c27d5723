"""Configures structlog for the CLI: a human log file plus console output."""

import logging
from pathlib import Path
from typing import Any

import structlog

from resume_sync.utils.constants import LOG_TIMESTAMP_FORMAT

HANDLER_NAME_PREFIX = "resume_sync."


def render_log_file_line(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    """Render an event as `[timestamp] message key=value ...`.

    Error events are prefixed with `ERROR: ` so failures stand out when
    tailing the log.
    """
    timestamp = event_dict.pop("timestamp", "")
    level = event_dict.pop("level", method_name)
    event = event_dict.pop("event", "")
    event_dict.pop("logger", None)
    prefix = "ERROR: " if level in ("error", "critical", "exception") else ""
    extras = " ".join(f"{key}={value}" for key, value in event_dict.items() if value is not None)
    line = f"[{timestamp}] {prefix}{event}"
    if extras:
        line = f"{line} {extras}"
    return line


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt=LOG_TIMESTAMP_FORMAT, utc=False),
        structlog.processors.format_exc_info,
    ]


def _build_file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.name = f"{HANDLER_NAME_PREFIX}file"
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                render_log_file_line,
            ],
        )
    )
    return file_handler


def reset_logging() -> None:
    """Remove handlers installed by configure_logging."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.name and handler.name.startswith(HANDLER_NAME_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(log_file: Path | None, debug: bool = False) -> None:
    """Configure structlog to append to `log_file` and echo to stderr.

    The log directory is created if missing. Without a log file only the
    console handler is installed. Debug mode lowers the level for both outputs.
    """
    reset_logging()
    level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler()
    console_handler.name = f"{HANDLER_NAME_PREFIX}console"
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False),
            ],
        )
    )

    root_logger = logging.getLogger()
    if log_file is not None:
        root_logger.addHandler(_build_file_handler(log_file))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
