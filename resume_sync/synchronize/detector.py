"""Contains change detection logic for the resume file."""

import hashlib
from pathlib import Path

import structlog

from resume_sync.synchronize.exceptions import DigestFailureError
from resume_sync.synchronize.models import SyncDecision
from resume_sync.utils.constants import DIGEST_CHUNK_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def compute_file_digest(path: Path) -> str:
    """Compute the MD5 hex digest of a file's whole content.

    MD5 only detects byte-level change here; it is not used for security.

    Raises:
        DigestFailureError: If the file cannot be read.
    """
    hasher = hashlib.md5(usedforsecurity=False)
    try:
        with open(path, "rb") as f:
            while chunk := f.read(DIGEST_CHUNK_SIZE):
                hasher.update(chunk)
    except OSError as exc:
        logger.error("Failed to compute file digest", path=str(path), error=str(exc))
        raise DigestFailureError(path, str(exc)) from exc
    return hasher.hexdigest()


def decide_sync_action(source_file: Path, dest_file: Path) -> tuple[SyncDecision, str, str | None]:
    """Compare source and destination content, and decide whether to copy or no-op.

    A missing destination always needs a copy.

    Returns:
        tuple: The decision, the source digest and the destination digest (None when the destination is missing).
    """
    source_digest = compute_file_digest(source_file)
    if not dest_file.exists():
        logger.info("Destination file not found", dest_file=str(dest_file))
        return SyncDecision.COPY, source_digest, None

    dest_digest = compute_file_digest(dest_file)
    if source_digest != dest_digest:
        logger.info("Destination file differs from source", source_digest=source_digest, dest_digest=dest_digest)
        return SyncDecision.COPY, source_digest, dest_digest

    logger.debug("Destination file is up to date", digest=source_digest)
    return SyncDecision.NOOP, source_digest, dest_digest
