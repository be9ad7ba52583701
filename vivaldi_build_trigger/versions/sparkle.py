"""Reads the latest published Vivaldi version from its Sparkle appcast feed."""

from xml.etree import ElementTree

import httpx
import structlog

from vivaldi_build_trigger.builds.models import BUILD_TYPE_SOURCES, BuildType
from vivaldi_build_trigger.utils.constants import SPARKLE_NAMESPACE
from vivaldi_build_trigger.versions.exceptions import RequiredDataAbsentError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

ENCLOSURE_PATH = "channel/item/enclosure"
VERSION_ATTRIBUTE = f"{{{SPARKLE_NAMESPACE}}}version"


def parse_appcast_version(appcast: bytes, source: str) -> str:
    """Returns the sparkle:version of the first enclosure at /rss/channel/item.

    Raises:
        RequiredDataAbsentError: If the document is not XML or the attribute is missing.
    """
    try:
        root = ElementTree.fromstring(appcast)
    except ElementTree.ParseError as e:
        raise RequiredDataAbsentError(source, f"document is not well-formed XML ({e})") from e

    if root.tag != "rss":
        raise RequiredDataAbsentError(source, f"root element is <{root.tag}>, expected <rss>")

    enclosure = root.find(ENCLOSURE_PATH)
    if enclosure is None:
        raise RequiredDataAbsentError(source, "no /rss/channel/item/enclosure element")

    version = enclosure.get(VERSION_ATTRIBUTE)
    if version is None:
        raise RequiredDataAbsentError(source, "enclosure has no sparkle:version attribute")
    return version


# about 550ms without an existing connection, about 180ms with keep-alive
async def get_latest_vivaldi_version(http_client: httpx.AsyncClient, build_type: BuildType) -> str:
    """Fetch the latest published Vivaldi version for a build type."""
    appcast_url = BUILD_TYPE_SOURCES[build_type].appcast_url
    response = await http_client.get(appcast_url)
    response.raise_for_status()

    version = parse_appcast_version(response.content, source=appcast_url)
    logger.info("Latest Vivaldi version", build_type=build_type.value, version=version)
    return version
