"""Orchestrates checking each build type and triggering at most one build."""

import asyncio

import httpx
import structlog

from vivaldi_build_trigger.builds.models import BuildCheckResult, BuildDecision, BuildIfOutdatedResult, BuildType
from vivaldi_build_trigger.builds.status import is_build_running
from vivaldi_build_trigger.builds.trigger import trigger_build
from vivaldi_build_trigger.configuration.models import TriggerConfig
from vivaldi_build_trigger.github.adapter import GitHubKitAdapter
from vivaldi_build_trigger.utils.http import HttpClientSettings, create_http_client
from vivaldi_build_trigger.versions.baseline import get_tested_vivaldi_version
from vivaldi_build_trigger.versions.sparkle import get_latest_vivaldi_version

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def check_build_type(
    build_type: BuildType,
    http_client: httpx.AsyncClient,
    github_adapter: GitHubKitAdapter,
    test_data_url: str,
    dry_run: bool,
    workflow_id: str,
    ref: str,
) -> BuildCheckResult:
    """Compare the latest and tested versions of one build type, and build it if it is outdated.

    Both versions are fetched concurrently and the comparison waits for both.
    If either fetch fails, the other one is cancelled and the failure propagates.
    The build status is only probed when the versions differ.
    """
    try:
        async with asyncio.TaskGroup() as task_group:
            latest_task = task_group.create_task(get_latest_vivaldi_version(http_client, build_type))
            tested_task = task_group.create_task(get_tested_vivaldi_version(http_client, build_type, test_data_url))
    except ExceptionGroup as group:
        # The sibling fetch has already been cancelled; surface the first failure as-is
        raise group.exceptions[0]
    latest_version, tested_version = latest_task.result(), tested_task.result()

    build_running: bool | None = None
    if latest_version != tested_version:
        build_running = await is_build_running(github_adapter)
        if not build_running:
            await trigger_build(github_adapter, build_type, dry_run=dry_run, workflow_id=workflow_id, ref=ref)
            return BuildCheckResult(build_type, latest_version, tested_version, build_running, BuildDecision.TRIGGER)
        logger.debug("Build type is outdated but a build is already running", build_type=build_type.value)
    else:
        logger.debug("Build type matches tested version", build_type=build_type.value, version=latest_version)

    logger.info(f"{build_type.value} is up-to-date, not triggering {build_type.value} build.")
    return BuildCheckResult(build_type, latest_version, tested_version, build_running, BuildDecision.SKIP)


async def build_if_outdated(
    http_client: httpx.AsyncClient,
    github_adapter: GitHubKitAdapter,
    test_data_url: str,
    dry_run: bool,
    workflow_id: str,
    ref: str,
) -> BuildIfOutdatedResult:
    """Check each build type in priority order, stopping after the first one that triggers a build.

    Any error aborts the remaining checks.
    """
    result = BuildIfOutdatedResult(dry_run=dry_run)
    for build_type in BuildType:
        check = await check_build_type(
            build_type,
            http_client=http_client,
            github_adapter=github_adapter,
            test_data_url=test_data_url,
            dry_run=dry_run,
            workflow_id=workflow_id,
            ref=ref,
        )
        result.checks.append(check)
        if check.decision == BuildDecision.TRIGGER:
            break
    return result


async def run_build_if_outdated(config: TriggerConfig, http_settings: HttpClientSettings | None = None) -> BuildIfOutdatedResult:
    """Run one build-if-outdated pass with clients built from the reconciled configuration."""
    http_settings = http_settings or HttpClientSettings()
    github_adapter = await GitHubKitAdapter.create(
        repo=config.repo,
        github_access_token=config.github_access_token,
        github_api_url=config.github_api_url,
        http_settings=http_settings,
    )
    async with github_adapter.client, create_http_client(http_settings) as http_client:
        result = await build_if_outdated(
            http_client=http_client,
            github_adapter=github_adapter,
            test_data_url=config.test_data_url,
            dry_run=config.dry_run,
            workflow_id=config.workflow_file,
            ref=config.workflow_ref,
        )
    logger.info(
        "Finished checking build types",
        checked=[check.build_type.value for check in result.checks],
        triggered=result.triggered_build_type.value if result.triggered_build_type else None,
        dry_run=config.dry_run,
    )
    return result
