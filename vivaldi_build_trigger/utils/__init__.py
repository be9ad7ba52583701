"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_REPO,
    DEFAULT_TEST_DATA_URL,
    DEFAULT_WORKFLOW_FILE,
    DEFAULT_WORKFLOW_REF,
    SPARKLE_NAMESPACE,
)

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_REPO",
    "DEFAULT_TEST_DATA_URL",
    "DEFAULT_WORKFLOW_FILE",
    "DEFAULT_WORKFLOW_REF",
    "SPARKLE_NAMESPACE",
]
