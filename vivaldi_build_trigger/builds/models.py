"""Data models for the build-if-outdated workflow."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel


class BuildType(str, Enum):
    """Vivaldi release channels, in the order they are checked.

    Declaration order is significant: the first outdated build type is the
    only one that gets built during an invocation.
    """

    STABLE = "stable"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True)
class BuildTypeSource:
    """Where the latest published version of a build type is announced."""

    appcast_url: str


BUILD_TYPE_SOURCES: dict[BuildType, BuildTypeSource] = {
    BuildType.STABLE: BuildTypeSource(appcast_url="https://update.vivaldi.com/update/1.0/public/appcast.x64.xml"),
    BuildType.SNAPSHOT: BuildTypeSource(appcast_url="https://update.vivaldi.com/update/1.0/win/appcast.x64.xml"),
}


class WorkflowStatus(str, Enum):
    """Statuses GitHub reports for workflow runs."""

    REQUESTED = "requested"
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    WAITING = "waiting"
    PENDING = "pending"
    ACTION_REQUIRED = "action_required"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    SKIPPED = "skipped"
    STALE = "stale"
    SUCCESS = "success"
    TIMED_OUT = "timed_out"

    @classmethod
    def parse(cls, raw_status: object) -> "WorkflowStatus | None":
        """Case-insensitively parse a raw status, returning None if it is absent or unrecognized."""
        if not isinstance(raw_status, str):
            return None
        try:
            return cls(raw_status.strip().lower())
        except ValueError:
            return None


NON_TERMINAL_WORKFLOW_STATUSES = frozenset(
    {
        WorkflowStatus.QUEUED,
        WorkflowStatus.IN_PROGRESS,
        WorkflowStatus.REQUESTED,
        WorkflowStatus.WAITING,
    }
)
"""Statuses that mean a build is still running."""


class BuildDecision(Enum):
    """Outcome of checking one build type."""

    TRIGGER = "trigger"
    SKIP = "skip"


class WorkflowDispatchInputs(BaseModel):
    """Inputs accepted by the build workflow."""

    buildType: str


class WorkflowDispatchRequest(BaseModel):
    """Body of a workflow dispatch request."""

    ref: str
    inputs: WorkflowDispatchInputs


@dataclass
class BuildCheckResult:
    """Result of checking a single build type.

    ``build_running`` is None when versions matched and the build status was never probed.
    """

    build_type: BuildType
    latest_version: str
    tested_version: str
    build_running: bool | None
    decision: BuildDecision

    @property
    def is_outdated(self) -> bool:
        """Whether the test suite lags behind the latest published version."""
        return self.latest_version != self.tested_version


@dataclass
class BuildIfOutdatedResult:
    """Contains results of one build-if-outdated pass."""

    dry_run: bool
    checks: list[BuildCheckResult] = field(default_factory=list)

    @property
    def triggered_build_type(self) -> BuildType | None:
        """The build type that was triggered, if any."""
        for check in self.checks:
            if check.decision == BuildDecision.TRIGGER:
                return check.build_type
        return None
