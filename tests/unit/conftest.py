"""Fixtures for unit tests."""

from types import SimpleNamespace
from typing import Any, Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import structlog

from vivaldi_build_trigger.builds.models import BUILD_TYPE_SOURCES, BuildType
from vivaldi_build_trigger.github.adapter import GitHubKitAdapter
from vivaldi_build_trigger.utils.constants import DEFAULT_TEST_DATA_URL
from vivaldi_build_trigger.versions.baseline import get_tested_version_url

APPCAST_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:sparkle="http://www.andymatuschak.org/xml-namespaces/sparkle">
  <channel>
    <title>Vivaldi</title>
    <item>
      <title>Vivaldi {version}</title>
      <enclosure url="https://downloads.vivaldi.com/stable/Vivaldi.{version}.x64.exe" sparkle:version="{version}" length="0" type="application/octet-stream" />
    </item>
  </channel>
</rss>
"""


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_appcast() -> Callable[[str], str]:
    """Returns a function rendering a Sparkle appcast announcing a version."""

    def _make_appcast(version: str) -> str:
        return APPCAST_TEMPLATE.format(version=version)

    return _make_appcast


@pytest.fixture
def make_version_feeds(make_appcast: Callable[[str], str]) -> Callable[..., tuple[httpx.AsyncClient, list[str]]]:
    """Returns a function building an HTTP client that serves appcasts and tested version files.

    The second element of the returned tuple records every requested URL.
    """

    def _make_version_feeds(latest: dict[BuildType, str], tested: dict[BuildType, str]) -> tuple[httpx.AsyncClient, list[str]]:
        responses: dict[str, httpx.Response] = {}
        for build_type, version in latest.items():
            responses[BUILD_TYPE_SOURCES[build_type].appcast_url] = httpx.Response(200, text=make_appcast(version))
        for build_type, version in tested.items():
            responses[get_tested_version_url(DEFAULT_TEST_DATA_URL, build_type)] = httpx.Response(200, text=f"{version}\n")
        requested_urls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested_urls.append(str(request.url))
            return responses.get(str(request.url), httpx.Response(404, text="Not Found"))

        return httpx.AsyncClient(transport=httpx.MockTransport(handler)), requested_urls

    return _make_version_feeds


@pytest.fixture
def make_github_adapter() -> Callable[..., GitHubKitAdapter]:
    """Returns a function building an adapter whose GitHub Actions API calls are mocked."""

    def _make_github_adapter(run_statuses: list[Any] | None = None) -> GitHubKitAdapter:
        adapter = GitHubKitAdapter(MagicMock(), "Aldaviva", "VivaldiCustomLauncher")
        runs = [SimpleNamespace(status=status) for status in (run_statuses or [])]
        adapter.client.rest.return_value.actions.async_list_workflow_runs_for_repo = AsyncMock(
            return_value=SimpleNamespace(parsed_data=SimpleNamespace(total_count=len(runs), workflow_runs=runs))
        )
        adapter.client.rest.return_value.actions.async_create_workflow_dispatch = AsyncMock(return_value=SimpleNamespace(status_code=204))
        return adapter

    return _make_github_adapter
