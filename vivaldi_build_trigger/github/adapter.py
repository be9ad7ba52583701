"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit_schemas.v2022_11_28.models import WorkflowRun

from vivaldi_build_trigger.utils.constants import GITHUB_REST_API_VERSION
from vivaldi_build_trigger.utils.github import split_repository_in_configuration
from vivaldi_build_trigger.utils.http import HttpClientSettings

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ValueError(
                    f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {getattr(exc.response, 'url', None)}"
                ) from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        repo: str,
        github_access_token: str | None,
        github_api_url: str,
        http_settings: HttpClientSettings,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_access_token: Bearer token, or None to send unauthenticated requests
            github_api_url: GitHub API URL
            http_settings: Transport settings shared with the other HTTP clients

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            ValueError: If the repository is not in 'owner/repo' format
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
            authenticated=github_access_token is not None,
        )
        client = get_github_client(
            github_access_token=github_access_token,
            github_api_url=github_api_url,
            http_settings=http_settings,
        )
        return cls(client, owner, repo_name)

    # Workflow runs
    async def list_repository_workflow_runs(self, per_page: int, page: int = 1) -> list[WorkflowRun]:
        """List the most recent workflow runs of every workflow in the repository.

        Only the requested page is fetched.
        """
        response: Response[Any] = await self.client.rest(GITHUB_REST_API_VERSION).actions.async_list_workflow_runs_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            per_page=per_page,
            page=page,
        )
        return response.parsed_data.workflow_runs

    async def list_workflow_runs(
        self,
        workflow_id: str,
        status: str | None = None,
        per_page: int = 100,
        page: int = 1,
    ) -> tuple[int, list[WorkflowRun]]:
        """List one page of runs of a single workflow, along with the total run count."""
        params = self._omit_null_parameters(status=status)
        response: Response[Any] = await self.client.rest(GITHUB_REST_API_VERSION).actions.async_list_workflow_runs(
            owner=self.owner,
            repo=self.repo_name,
            workflow_id=workflow_id,
            per_page=per_page,
            page=page,
            **params,
        )
        return response.parsed_data.total_count, response.parsed_data.workflow_runs

    # Workflow dispatch
    @handle_github_422
    async def create_workflow_dispatch(self, workflow_id: str, ref: str, inputs: dict[str, str] | None = None) -> None:
        """Request a new run of a workflow.

        GitHub answers with 204 No Content, so there is nothing to return.
        """
        params = self._omit_null_parameters(inputs=inputs)
        await self.client.rest(GITHUB_REST_API_VERSION).actions.async_create_workflow_dispatch(
            owner=self.owner,
            repo=self.repo_name,
            workflow_id=workflow_id,
            ref=ref,
            **params,
        )
