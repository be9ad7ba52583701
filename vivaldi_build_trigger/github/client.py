"""Sets up the githubkit client."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generator, TypeAlias

import httpx
from githubkit import GitHub
from githubkit.auth import BaseAuthStrategy, UnauthAuthStrategy

from vivaldi_build_trigger.utils.http import HttpClientSettings

if TYPE_CHECKING:
    from githubkit import GitHubCore


class BearerTokenAuth(httpx.Auth):
    """Sends the access token in a bearer Authorization header."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


@dataclass
class BearerTokenAuthStrategy(BaseAuthStrategy):
    """Access token authentication using the Bearer scheme."""

    token: str

    def get_auth_flow(self, github: "GitHubCore") -> httpx.Auth:
        return BearerTokenAuth(self.token)


GitHubClient: TypeAlias = GitHub[BearerTokenAuthStrategy] | GitHub[UnauthAuthStrategy]


def get_github_client(
    github_access_token: str | None,
    github_api_url: str,
    http_settings: HttpClientSettings,
    async_transport: httpx.AsyncBaseTransport | None = None,
) -> GitHubClient:
    """Returns a GitHub client, authenticated with a bearer token when one is given.

    A missing token is not rejected; requests are then sent unauthenticated.
    Requests go through a transport capped at ``http_settings.max_connections``
    unless ``async_transport`` is given. Enter the client with ``async with``
    so that every request shares that transport's connection pool.
    """
    # Disable HTTP caching to always get fresh data, and never retry on our behalf
    auth = BearerTokenAuthStrategy(github_access_token) if github_access_token else UnauthAuthStrategy()
    return GitHub(
        auth=auth,
        base_url=github_api_url,
        user_agent=http_settings.user_agent,
        timeout=http_settings.timeout,
        ssl_verify=http_settings.create_ssl_context(),
        async_transport=async_transport or http_settings.create_async_transport(),
        http_cache=False,
        auto_retry=False,
    )
