"""Serialises concurrent sync runs with an advisory lock file."""

import fcntl
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

from resume_sync.synchronize.exceptions import RunLockError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

LOCK_POLL_INTERVAL = 0.2


@contextmanager
def run_lock(lock_file: Path, timeout: float) -> Iterator[None]:
    """Hold an exclusive lock on `lock_file` for the duration of the block.

    A second run waits for the first to finish, then re-evaluates the
    change itself. The lock is released by the OS if the process dies.

    Raises:
        RunLockError: If the lock file cannot be opened or the lock is not acquired within `timeout` seconds.
    """
    try:
        lock_file.parent.mkdir(parents=True, exist_ok=True)
        handle = open(lock_file, "a")
    except OSError as exc:
        raise RunLockError(lock_file, str(exc)) from exc

    with handle:
        deadline = time.monotonic() + timeout
        waiting_logged = False
        while True:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except BlockingIOError:
                if time.monotonic() >= deadline:
                    raise RunLockError(lock_file, f"still held by another run after {timeout} seconds") from None
                if not waiting_logged:
                    logger.info("Waiting for another resume sync to finish", lock_file=str(lock_file))
                    waiting_logged = True
                time.sleep(LOCK_POLL_INTERVAL)
        try:
            yield
        finally:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
