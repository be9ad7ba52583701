"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Workflow runs
    @abstractmethod
    async def list_repository_workflow_runs(self, per_page: int, page: int = 1) -> list[Any]:
        """List the most recent workflow runs of every workflow in a repository."""
        pass

    @abstractmethod
    async def list_workflow_runs(
        self,
        workflow_id: str,
        status: str | None = None,
        per_page: int = 100,
        page: int = 1,
    ) -> tuple[int, list[Any]]:
        """List one page of runs of a single workflow, along with the total run count."""
        pass

    # Workflow dispatch
    @abstractmethod
    async def create_workflow_dispatch(self, workflow_id: str, ref: str, inputs: dict[str, str] | None = None) -> None:
        """Request a new run of a workflow."""
        pass
