"""Orchestrates a single resume sync run."""

import time
from contextlib import nullcontext

import structlog

from resume_sync.configuration.models import SyncConfig
from resume_sync.runner.abc import CommandRunnerBase
from resume_sync.synchronize.deploy import trigger_deployment
from resume_sync.synchronize.detector import decide_sync_action
from resume_sync.synchronize.exceptions import ResumeSyncError
from resume_sync.synchronize.files import ensure_source_exists, sync_file
from resume_sync.synchronize.lock import run_lock
from resume_sync.synchronize.models import SyncDecision, SyncRunStatus
from resume_sync.synchronize.notifier import DesktopNotifier
from resume_sync.synchronize.publisher import publish_destination
from resume_sync.synchronize.results import SyncRunResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def run_sync_workflow(config: SyncConfig, runner: CommandRunnerBase, notifier: DesktopNotifier | None = None) -> SyncRunResult:
    """Run the sync workflow: detect change, copy, publish to git, deploy.

    Every stage runs to completion before the next one starts. The first
    fatal error is logged, notified and ends the run with a failed result;
    earlier side effects (such as the copied file) are kept.
    """
    if notifier is None:
        notifier = DesktopNotifier(runner, enabled=config.notifications_enabled)

    result = SyncRunResult(status=SyncRunStatus.FAILED)
    lock = run_lock(config.lock_file, config.lock_timeout) if config.lock_enabled else nullcontext()
    try:
        with lock:
            _run_sync_stages(config, runner, result)
    except ResumeSyncError as exc:
        logger.error(str(exc), error_type=type(exc).__name__)
        if exc.notification:
            notifier.notify(exc.notification)
        result.status = SyncRunStatus.FAILED
        result.error = exc
        return result

    if result.status == SyncRunStatus.SYNCED:
        logger.info("Resume sync completed successfully")
        notifier.notify("Resume updated and deployed")
    return result


def _run_sync_stages(config: SyncConfig, runner: CommandRunnerBase, result: SyncRunResult) -> None:
    ensure_source_exists(config.source_file)

    decision, result.source_digest, result.dest_digest = decide_sync_action(config.source_file, config.dest_file)
    if decision == SyncDecision.NOOP:
        logger.info("No changes detected, skipping sync")
        result.status = SyncRunStatus.UNCHANGED
        return

    logger.info("Starting resume sync...")
    start_time = time.time()
    sync_file(config.source_file, config.dest_file)
    result.copied = True
    logger.info("Copied resume to project", dest_file=str(config.dest_file))

    if config.git_enabled:
        result.publish_outcome = publish_destination(config, runner)
        result.pushed = True

    if config.deploy_enabled:
        result.deployment_url = trigger_deployment(config, runner)

    result.status = SyncRunStatus.SYNCED
    logger.debug("Finished sync stages", duration=round(time.time() - start_time, 2))
