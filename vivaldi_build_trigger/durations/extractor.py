"""Extracts the start minute and duration of every successful build workflow run.

The output is a tab-separated table, used to pick a time of hour at which
scheduled builds finish fastest.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Self

import structlog

from vivaldi_build_trigger.github.adapter import GitHubKitAdapter
from vivaldi_build_trigger.utils.constants import DEFAULT_WORKFLOW_FILE, RUN_DURATIONS_PAGE_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

RUN_DURATIONS_HEADER = ("startedMinutesOfHour", "runDurationSeconds")
LINE_ENDING = "\r\n"


@dataclass(frozen=True)
class RunDuration:
    """When in the hour a run started, and how long it took."""

    started_minute_of_hour: int
    run_duration_seconds: int

    @classmethod
    def from_workflow_run(cls, run: Any) -> Self:
        """Build from a workflow run's run_started_at and updated_at timestamps."""
        started: datetime = run.run_started_at
        completed: datetime = run.updated_at
        if not isinstance(started, datetime) or not isinstance(completed, datetime):
            raise ValueError(f"Workflow run {getattr(run, 'id', None)} is missing run_started_at or updated_at")
        return cls(
            started_minute_of_hour=started.minute,
            run_duration_seconds=int((completed - started).total_seconds()),
        )


async def extract_run_durations(
    github_adapter: GitHubKitAdapter,
    workflow_id: str = DEFAULT_WORKFLOW_FILE,
    per_page: int = RUN_DURATIONS_PAGE_SIZE,
) -> list[RunDuration]:
    """Page through every successful run of a workflow and collect its duration.

    The total run count is taken from the first page. Paging stops once that
    many runs are collected, or when GitHub returns an empty page.
    """
    run_durations: list[RunDuration] = []
    total_count: int | None = None
    page = 1
    while True:
        logger.info("Fetching page", page=page, workflow_id=workflow_id)
        page_total_count, runs = await github_adapter.list_workflow_runs(
            workflow_id=workflow_id,
            status="success",
            per_page=per_page,
            page=page,
        )
        page += 1
        if total_count is None:
            total_count = page_total_count

        run_durations.extend(RunDuration.from_workflow_run(run) for run in runs)
        logger.info("Fetched page", run_count=len(runs), collected=len(run_durations), total_count=total_count)

        if not runs or len(run_durations) >= total_count:
            break
    return run_durations


def format_run_durations(run_durations: list[RunDuration]) -> str:
    """Render run durations as a tab-separated table with a header row."""
    lines = ["\t".join(RUN_DURATIONS_HEADER)]
    lines.extend(f"{duration.started_minute_of_hour}\t{duration.run_duration_seconds}" for duration in run_durations)
    return "".join(line + LINE_ENDING for line in lines)


def write_run_durations(run_durations: list[RunDuration], output_file: Path) -> str:
    """Write the run duration table to a file as UTF-8 without a byte order mark, returning the table."""
    output = format_run_durations(run_durations)
    with open(output_file, "w", encoding="utf-8", newline="") as f:
        f.write(output)
    logger.info("Wrote run durations", output_file=str(output_file), run_count=len(run_durations))
    return output
