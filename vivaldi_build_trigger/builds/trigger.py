"""Dispatches the build workflow for a build type."""

import structlog

from vivaldi_build_trigger.builds.models import BuildType, WorkflowDispatchInputs, WorkflowDispatchRequest
from vivaldi_build_trigger.github.adapter import GitHubKitAdapter
from vivaldi_build_trigger.utils.constants import DEFAULT_WORKFLOW_FILE, DEFAULT_WORKFLOW_REF

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def build_dispatch_request(build_type: BuildType, ref: str = DEFAULT_WORKFLOW_REF) -> WorkflowDispatchRequest:
    """Build the dispatch request body for a build type."""
    return WorkflowDispatchRequest(ref=ref, inputs=WorkflowDispatchInputs(buildType=build_type.value))


async def trigger_build(
    github_adapter: GitHubKitAdapter,
    build_type: BuildType,
    dry_run: bool,
    workflow_id: str = DEFAULT_WORKFLOW_FILE,
    ref: str = DEFAULT_WORKFLOW_REF,
) -> WorkflowDispatchRequest:
    """Request a new run of the build workflow for a build type.

    In dry-run mode everything happens except the dispatch request itself.
    Dispatch failures propagate to the caller.
    """
    dispatch_request = build_dispatch_request(build_type, ref=ref)
    logger.info("Triggering build", build_type=build_type.value, workflow_id=workflow_id, request=dispatch_request.model_dump())

    if not dry_run:
        await github_adapter.create_workflow_dispatch(
            workflow_id=workflow_id,
            ref=dispatch_request.ref,
            inputs=dispatch_request.inputs.model_dump(),
        )

    logger.info("Build triggered", build_type=build_type.value, dry_run=dry_run)
    return dispatch_request
