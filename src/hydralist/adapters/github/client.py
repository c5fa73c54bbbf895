"""HTTP client for the GitHub repositories API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from hydralist.adapters.http_resilience import ResilienceConfig, ResilientClient
from hydralist.config.errors import MissingConfigurationError
from hydralist.config.github import GITHUB_API_BASE_URL, GitHubConfig, get_github_config
from hydralist.domain.ports.fetching import MetadataFetchError

from .schema import GitHubErrorResponse, GitHubRepository
from .translator import parse_repo_metadata

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Sequence

    from hydralist.domain.metadata import RepoMetadata

log = getLogger(__name__)


class GitHubAPIError(MetadataFetchError):
    """Raised when the GitHub API cannot deliver a repository."""

    def __init__(
        self,
        message: str,
        *,
        reference: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reference = reference
        self.status_code = status_code


class BearerTokenAuth(httpx.Auth):
    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def build_auth(config: GitHubConfig) -> httpx.Auth:
    """Token auth when available, otherwise OAuth app client credentials."""

    if config.access_token:
        return BearerTokenAuth(config.access_token)
    if config.client_id and config.client_secret:
        return httpx.BasicAuth(config.client_id, config.client_secret)
    raise MissingConfigurationError("Missing GitHub credentials")


def split_reference(reference: str) -> tuple[str, str]:
    owner, _, name = reference.strip().strip("/").partition("/")
    if not owner or not name or "/" in name:
        msg = f"Invalid GitHub repository reference: {reference!r}"
        raise GitHubAPIError(msg, reference=reference)
    return owner, name


def with_cache_ttl(resilience: ResilienceConfig, cache_ms: int) -> ResilienceConfig:
    """Apply a caller supplied cache lifetime; non-positive values disable caching."""

    cache = resilience.cache
    if cache is None or not cache.enabled:
        return resilience
    if cache_ms <= 0:
        return replace(resilience, cache=replace(cache, enabled=False))
    return replace(resilience, cache=replace(cache, default_ttl_seconds=cache_ms / 1000))


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class GitHubFetcher:
    """Fetch repository metadata for a batch of ``owner/name`` references."""

    config: GitHubConfig = field(default_factory=get_github_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    async def __call__(
        self,
        identifiers: Sequence[str],
        *,
        cache_ms: int,
    ) -> list[RepoMetadata]:
        if not identifiers:
            return []

        auth = build_auth(self.config)
        resilience = with_cache_ttl(self.config.resilience, cache_ms)
        log.info("Fetching %d repositories from GitHub", len(identifiers))

        async with self.client_factory(resilience) as client:
            # The first failure cancels the remaining requests before the client closes.
            try:
                async with asyncio.TaskGroup() as group:
                    tasks = [
                        group.create_task(
                            self._fetch_repository(client=client, reference=reference, auth=auth)
                        )
                        for reference in identifiers
                    ]
            except ExceptionGroup as errors:
                raise errors.exceptions[0]  # noqa: B904

        return [parse_repo_metadata(task.result()) for task in tasks]

    async def _fetch_repository(
        self,
        *,
        client: ResilientClient,
        reference: str,
        auth: httpx.Auth,
    ) -> GitHubRepository:
        owner, name = split_reference(reference)
        base_url = (self.config.resilience.base_url or GITHUB_API_BASE_URL).rstrip("/")

        try:
            response = await client.get(f"{base_url}/repos/{owner}/{name}", auth=auth)
        except httpx.HTTPError as exc:
            raise GitHubAPIError(
                f"Request for {reference} failed: {exc}", reference=reference
            ) from exc

        if response.is_error:
            message = _error_message(response)
            log.error(f"GitHub API error {response.status_code} for {reference}: {message}")
            raise GitHubAPIError(
                f"GitHub API error {response.status_code} for {reference}: {message}",
                reference=reference,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise GitHubAPIError(
                f"GitHub returned invalid JSON for {reference}", reference=reference
            ) from exc
        if not isinstance(payload, dict):
            raise GitHubAPIError("Unexpected GitHub response payload", reference=reference)

        try:
            return GitHubRepository.model_validate(payload)
        except ValidationError as exc:
            raise GitHubAPIError(
                f"Unexpected GitHub response payload for {reference}", reference=reference
            ) from exc


def _error_message(response: httpx.Response) -> str:
    try:
        return GitHubErrorResponse.model_validate(response.json()).message
    except (ValueError, ValidationError):
        return response.reason_phrase
