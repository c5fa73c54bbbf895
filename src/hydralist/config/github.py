"""GitHub configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars
from .errors import MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_TIMEOUT_SECONDS = 15.0

_TOKEN_VAR = "GITHUB_ACCESS_TOKEN"
_CLIENT_ID_VAR = "GITHUB_CLIENT_ID"
_CLIENT_SECRET_VAR = "GITHUB_CLIENT_SECRET"


def default_github_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="github",
        base_url=GITHUB_API_BASE_URL,
        timeout_seconds=GITHUB_TIMEOUT_SECONDS,
        follow_redirects=True,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        cache=CacheConfig(enabled=True, backend="sqlite"),
        default_headers={
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": "hydralist",
        },
    )


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Credentials and HTTP settings for the GitHub REST API.

    Either ``access_token`` or the ``client_id``/``client_secret`` pair must be
    set; an access token takes precedence when both are present.
    """

    access_token: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    resilience: ResilienceConfig = field(default_factory=default_github_resilience)

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_token) or bool(self.client_id and self.client_secret)

    def require_credentials(self) -> None:
        if not self.has_credentials:
            raise MissingConfigurationError(
                f"Missing configuration for: {_TOKEN_VAR} "
                f"(or {_CLIENT_ID_VAR} and {_CLIENT_SECRET_VAR})"
            )


def get_github_config(*, resilience: ResilienceConfig | None = None) -> GitHubConfig:
    """Load GitHub credentials from the environment, failing fast when absent.

    Without an access token both client credential variables are required, and
    every missing one is named in the error.
    """

    resilience = resilience or default_github_resilience()
    token = optional_env_var(_TOKEN_VAR)
    if token is not None:
        return GitHubConfig(
            access_token=token,
            client_id=optional_env_var(_CLIENT_ID_VAR),
            client_secret=optional_env_var(_CLIENT_SECRET_VAR),
            resilience=resilience,
        )

    try:
        values = require_env_vars([_CLIENT_ID_VAR, _CLIENT_SECRET_VAR])
    except MissingConfigurationError as exc:
        raise MissingConfigurationError(f"{exc} (or set {_TOKEN_VAR})") from exc
    return GitHubConfig(
        client_id=values[_CLIENT_ID_VAR],
        client_secret=values[_CLIENT_SECRET_VAR],
        resilience=resilience,
    )
