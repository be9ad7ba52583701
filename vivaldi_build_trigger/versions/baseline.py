"""Reads the Vivaldi version the launcher's test suite was last verified against."""

import httpx
import structlog

from vivaldi_build_trigger.builds.models import BuildType

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def get_tested_version_url(test_data_url: str, build_type: BuildType) -> str:
    """Returns the URL of the text file holding the tested version of a build type."""
    return f"{test_data_url.rstrip('/')}/vivaldi-{build_type.value}-version.txt"


async def get_tested_vivaldi_version(http_client: httpx.AsyncClient, build_type: BuildType, test_data_url: str) -> str:
    """Fetch the tested Vivaldi version for a build type, with surrounding whitespace removed."""
    response = await http_client.get(get_tested_version_url(test_data_url, build_type))
    response.raise_for_status()

    version = response.content.decode("utf-8").strip()
    logger.info("Tested Vivaldi version", build_type=build_type.value, version=version)
    return version
