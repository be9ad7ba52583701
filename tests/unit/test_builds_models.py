"""Unit tests for the build models."""

import pytest

from vivaldi_build_trigger.builds.models import (
    BUILD_TYPE_SOURCES,
    BuildCheckResult,
    BuildDecision,
    BuildIfOutdatedResult,
    BuildType,
    WorkflowStatus,
)


def test_build_types_are_checked_stable_first() -> None:
    """Test that the build type priority order is stable, then snapshot."""
    assert list(BuildType) == [BuildType.STABLE, BuildType.SNAPSHOT]


def test_every_build_type_has_an_appcast() -> None:
    """Test that the source table covers every build type."""
    assert set(BUILD_TYPE_SOURCES) == set(BuildType)
    assert BUILD_TYPE_SOURCES[BuildType.STABLE].appcast_url.endswith("/public/appcast.x64.xml")
    assert BUILD_TYPE_SOURCES[BuildType.SNAPSHOT].appcast_url.endswith("/win/appcast.x64.xml")


@pytest.mark.parametrize(
    "raw_status, expected",
    [
        pytest.param("queued", WorkflowStatus.QUEUED, id="lowercase"),
        pytest.param("IN_PROGRESS", WorkflowStatus.IN_PROGRESS, id="uppercase"),
        pytest.param("Waiting", WorkflowStatus.WAITING, id="mixed case"),
        pytest.param("completed", WorkflowStatus.COMPLETED, id="terminal"),
        pytest.param("bogus", None, id="unrecognized"),
        pytest.param("", None, id="empty"),
        pytest.param(None, None, id="absent"),
        pytest.param(42, None, id="not a string"),
    ],
)
def test_workflow_status_parse(raw_status: object, expected: WorkflowStatus | None) -> None:
    """Test that statuses parse case-insensitively and unknown values become None."""
    assert WorkflowStatus.parse(raw_status) == expected


def test_build_check_result_is_outdated() -> None:
    """Test that a check is outdated exactly when versions differ."""
    outdated = BuildCheckResult(BuildType.STABLE, "6.2.3105.58", "6.2.3105.57", False, BuildDecision.TRIGGER)
    current = BuildCheckResult(BuildType.STABLE, "6.2.3105.58", "6.2.3105.58", None, BuildDecision.SKIP)
    assert outdated.is_outdated is True
    assert current.is_outdated is False


def test_triggered_build_type() -> None:
    """Test that the triggered build type is reported from the checks."""
    result = BuildIfOutdatedResult(dry_run=False)
    assert result.triggered_build_type is None
    result.checks.append(BuildCheckResult(BuildType.STABLE, "1", "1", None, BuildDecision.SKIP))
    result.checks.append(BuildCheckResult(BuildType.SNAPSHOT, "2", "1", False, BuildDecision.TRIGGER))
    assert result.triggered_build_type == BuildType.SNAPSHOT
