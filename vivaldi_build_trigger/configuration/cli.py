"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from vivaldi_build_trigger.builds.orchestrator import run_build_if_outdated
from vivaldi_build_trigger.configuration.exceptions import RequiredConfigurationElementError
from vivaldi_build_trigger.configuration.reconcile import (
    reconcile_extract_durations_configuration,
    reconcile_trigger_configuration,
)
from vivaldi_build_trigger.durations.extractor import extract_run_durations, write_run_durations
from vivaldi_build_trigger.github.adapter import GitHubKitAdapter
from vivaldi_build_trigger.utils.http import HttpClientSettings

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)

TRIGGER_USAGE = "Usage: vivaldi-build-trigger trigger --github-access-token XXXXXXXXX [--dry-run]"


def configure_logging(debug: bool) -> None:
    """Filter structlog output to INFO, or DEBUG when requested."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO))


@typer_app.command(name="trigger")
def trigger_cli(
    github_access_token: Annotated[
        str | None,
        Option(envvar="GITHUB_ACCESS_TOKEN", help="Token with repo scope access to the launcher repository."),
    ] = None,
    dry_run: Annotated[bool, Option("--dry-run", "-n", help="Don't actually start any builds.")] = False,
    repo: Annotated[str | None, Option(envvar="REPO", help="Repository name (owner/repo) whose build workflow is dispatched.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    debug: Annotated[bool, Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Trigger a build if a newer Vivaldi version than the tested one has been published."""
    try:
        config = asyncio.run(
            reconcile_trigger_configuration(
                cli_debug=debug,
                cli_github_api_url=github_api_url,
                cli_github_access_token=github_access_token,
                cli_repo=repo,
                cli_dry_run=dry_run,
            )
        )
    except RequiredConfigurationElementError as e:
        typer.echo(str(e), err=True)
        typer.echo(TRIGGER_USAGE)
        raise typer.Exit(1) from e

    configure_logging(config.debug)
    if config.dry_run:
        typer.echo("Dry run: no builds will actually be started.")

    result = asyncio.run(run_build_if_outdated(config))

    if result.triggered_build_type is not None:
        typer.echo(f"Triggered {result.triggered_build_type.value} build{' (dry run)' if result.dry_run else ''}.")
    else:
        typer.echo("All build types are up-to-date, no build triggered.")


@typer_app.command(name="extract-durations")
def extract_durations_cli(
    output: Annotated[Path, Option("--output", "-o", help="File to write the tab-separated run durations to.")] = Path("output.txt"),
    github_access_token: Annotated[str | None, Option(envvar="GITHUB_ACCESS_TOKEN", help="GitHub access token (optional).")] = None,
    repo: Annotated[str | None, Option(envvar="REPO", help="Repository name (owner/repo).")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    debug: Annotated[bool, Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Write the start minute and duration of every successful build run to a file."""
    config = asyncio.run(
        reconcile_extract_durations_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_access_token=github_access_token,
            cli_repo=repo,
            cli_output_file=output,
        )
    )
    configure_logging(config.debug)

    async def extract_durations() -> str:
        adapter = await GitHubKitAdapter.create(
            repo=config.repo,
            github_access_token=config.github_access_token,
            github_api_url=config.github_api_url,
            http_settings=HttpClientSettings(),
        )
        async with adapter.client:
            run_durations = await extract_run_durations(adapter, workflow_id=config.workflow_file)
        return write_run_durations(run_durations, config.output_file)

    typer.echo(asyncio.run(extract_durations()))


if __name__ == "__main__":
    typer_app()
