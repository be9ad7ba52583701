"""Unit tests for the shared HTTP client settings."""

import ssl

import httpx
import pytest

from vivaldi_build_trigger.utils.http import HttpClientSettings, create_http_client


def test_ssl_context_enforces_tls_floor() -> None:
    """Test that the SSL context refuses protocols older than TLS 1.2."""
    context = HttpClientSettings().create_ssl_context()
    assert context.minimum_version == ssl.TLSVersion.TLSv1_2
    assert context.verify_mode == ssl.CERT_REQUIRED


def test_user_agent_identifies_the_project() -> None:
    """Test the default User-Agent header value."""
    user_agent = HttpClientSettings().user_agent
    assert user_agent.startswith("vivaldi-build-trigger/")
    assert user_agent.endswith("(+mailto:ben@aldaviva.com)")


@pytest.mark.asyncio
async def test_http_client_sends_user_agent() -> None:
    """Test that every request carries the configured User-Agent."""
    seen_user_agents: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_user_agents.append(request.headers["User-Agent"])
        return httpx.Response(200)

    settings = HttpClientSettings(user_agent="test-agent/1.0")
    async with create_http_client(settings, transport=httpx.MockTransport(handler)) as client:
        await client.get("https://example.com/")

    assert seen_user_agents == ["test-agent/1.0"]


def test_async_transport_applies_connection_limit_and_tls_floor() -> None:
    """Test that the pooled transport is capped at the configured connection count."""
    transport = HttpClientSettings(max_connections=4).create_async_transport()
    pool = transport._pool
    assert pool._max_connections == 4
    assert pool._ssl_context.minimum_version == ssl.TLSVersion.TLSv1_2
