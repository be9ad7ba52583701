"""Transport settings shared by every HTTP client in one invocation."""

import ssl
from dataclasses import dataclass, field

import httpx

from vivaldi_build_trigger import __version__
from vivaldi_build_trigger.utils.constants import CONTACT, DEFAULT_TIMEOUT_SECONDS, MAX_CONNECTIONS_PER_SERVER


@dataclass(frozen=True)
class HttpClientSettings:
    """Immutable HTTP client configuration, constructed once per invocation."""

    max_connections: int = MAX_CONNECTIONS_PER_SERVER
    minimum_tls_version: ssl.TLSVersion = ssl.TLSVersion.TLSv1_2
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = field(default=f"vivaldi-build-trigger/{__version__} ({CONTACT})")

    def create_ssl_context(self) -> ssl.SSLContext:
        """Returns a verifying SSL context that refuses protocols below the TLS floor."""
        context = ssl.create_default_context()
        context.minimum_version = self.minimum_tls_version
        return context

    def create_async_transport(self) -> httpx.AsyncHTTPTransport:
        """Returns a connection-pooling transport capped at ``max_connections`` and bound to the TLS floor."""
        return httpx.AsyncHTTPTransport(
            limits=httpx.Limits(max_connections=self.max_connections),
            verify=self.create_ssl_context(),
        )


def create_http_client(settings: HttpClientSettings, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Returns the client used for plain (non-GitHub-API) requests.

    Tests pass a ``transport`` to serve canned responses.
    """
    return httpx.AsyncClient(
        transport=transport or settings.create_async_transport(),
        headers={"User-Agent": settings.user_agent},
        timeout=settings.timeout,
    )
