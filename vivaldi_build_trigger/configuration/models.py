"""Reconciled configuration for each CLI command."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class BaseConfig:
    """Configuration shared by every command."""

    debug: bool
    github_api_url: str
    github_access_token: str | None
    repo: str
    workflow_file: str


@dataclass
class TriggerConfig(BaseConfig):
    """Configuration class for the trigger command."""

    workflow_ref: str
    test_data_url: str
    dry_run: bool


@dataclass
class ExtractDurationsConfig(BaseConfig):
    """Configuration class for the extract-durations command."""

    output_file: Path
