"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

from vivaldi_build_trigger.configuration.env import settings
from vivaldi_build_trigger.configuration.exceptions import RequiredConfigurationElementError
from vivaldi_build_trigger.configuration.models import BaseConfig, ExtractDurationsConfig, TriggerConfig


async def reconcile_base_configuration(
    cli_debug: bool,
    cli_github_api_url: str | None,
    cli_github_access_token: str | None,
    cli_repo: str | None,
    cli_workflow_file: str | None = None,
) -> BaseConfig:
    """Reconciles the configuration shared by every command.

    Values passed on the command line take precedence over values read from
    the environment (or the .env file).
    """
    return BaseConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        github_access_token=cli_github_access_token or settings.GITHUB_ACCESS_TOKEN,
        repo=cli_repo or settings.REPO,
        workflow_file=cli_workflow_file or settings.WORKFLOW_FILE,
    )


async def reconcile_trigger_configuration(
    cli_debug: bool,
    cli_github_api_url: str | None,
    cli_github_access_token: str | None,
    cli_repo: str | None,
    cli_dry_run: bool,
    cli_workflow_file: str | None = None,
    cli_workflow_ref: str | None = None,
    cli_test_data_url: str | None = None,
) -> TriggerConfig:
    """Reconciles the configuration for the trigger command.

    Raises:
        RequiredConfigurationElementError: If no GitHub access token is configured.
    """
    base_config = await reconcile_base_configuration(
        cli_debug=cli_debug,
        cli_github_api_url=cli_github_api_url,
        cli_github_access_token=cli_github_access_token,
        cli_repo=cli_repo,
        cli_workflow_file=cli_workflow_file,
    )
    if not base_config.github_access_token:
        raise RequiredConfigurationElementError(
            name="GitHub access token",
            cli_name="--github-access-token",
            env_name="GITHUB_ACCESS_TOKEN",
        )
    return TriggerConfig(
        debug=base_config.debug,
        github_api_url=base_config.github_api_url,
        github_access_token=base_config.github_access_token,
        repo=base_config.repo,
        workflow_file=base_config.workflow_file,
        workflow_ref=cli_workflow_ref or settings.WORKFLOW_REF,
        test_data_url=cli_test_data_url or settings.TEST_DATA_URL,
        dry_run=cli_dry_run,
    )


async def reconcile_extract_durations_configuration(
    cli_debug: bool,
    cli_github_api_url: str | None,
    cli_github_access_token: str | None,
    cli_repo: str | None,
    cli_output_file: Path,
    cli_workflow_file: str | None = None,
) -> ExtractDurationsConfig:
    """Reconciles the configuration for the extract-durations command.

    A missing access token is allowed here; requests are then sent unauthenticated.
    """
    base_config = await reconcile_base_configuration(
        cli_debug=cli_debug,
        cli_github_api_url=cli_github_api_url,
        cli_github_access_token=cli_github_access_token,
        cli_repo=cli_repo,
        cli_workflow_file=cli_workflow_file,
    )
    return ExtractDurationsConfig(
        debug=base_config.debug,
        github_api_url=base_config.github_api_url,
        github_access_token=base_config.github_access_token,
        repo=base_config.repo,
        workflow_file=base_config.workflow_file,
        output_file=cli_output_file,
    )
