"""Copies the resume into the web project."""

import os
import shutil
from contextlib import suppress
from pathlib import Path

import structlog

from resume_sync.synchronize.exceptions import CopyFailureError, MissingSourceError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def ensure_source_exists(source_file: Path) -> None:
    """Raise MissingSourceError unless the source is an existing regular file."""
    if not source_file.is_file():
        raise MissingSourceError(source_file)


def sync_file(source_file: Path, dest_file: Path) -> None:
    """Copy the source file's bytes to the destination, creating parent directories.

    The copy goes to a temporary sibling first and then replaces the
    destination, so readers never see a half-written file.

    Raises:
        MissingSourceError: If the source file does not exist.
        CopyFailureError: If the copy fails for any other reason.
    """
    ensure_source_exists(source_file)
    tmp_file = dest_file.with_name(f".{dest_file.name}.tmp")
    try:
        dest_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source_file, tmp_file)
        os.replace(tmp_file, dest_file)
    except OSError as exc:
        with suppress(OSError):
            tmp_file.unlink(missing_ok=True)
        raise CopyFailureError(source_file, dest_file, str(exc)) from exc
    logger.debug("Copied file", source_file=str(source_file), dest_file=str(dest_file))
