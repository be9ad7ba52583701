"""Checks whether a build is already queued or running."""

from typing import Iterable

import structlog

from vivaldi_build_trigger.builds.models import NON_TERMINAL_WORKFLOW_STATUSES, WorkflowStatus
from vivaldi_build_trigger.github.adapter import GitHubKitAdapter
from vivaldi_build_trigger.utils.constants import BUILD_STATUS_PAGE_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def classify_workflow_run_statuses(raw_statuses: Iterable[object]) -> bool:
    """Returns True if any raw status is a non-terminal one.

    Absent or unrecognized statuses count as not running.
    """
    return any(WorkflowStatus.parse(raw_status) in NON_TERMINAL_WORKFLOW_STATUSES for raw_status in raw_statuses)


async def is_build_running(github_adapter: GitHubKitAdapter, per_page: int = BUILD_STATUS_PAGE_SIZE) -> bool:
    """Determine whether any of the most recent workflow runs has not finished.

    Only the first page of runs is inspected, in the order GitHub returns them.
    """
    runs = await github_adapter.list_repository_workflow_runs(per_page=per_page)
    raw_statuses = [getattr(run, "status", None) for run in runs]
    build_running = classify_workflow_run_statuses(raw_statuses)
    logger.debug("Checked recent workflow runs", run_count=len(runs), statuses=raw_statuses, build_running=build_running)
    return build_running
