from __future__ import annotations

from dataclasses import replace

import pytest

from hydralist.config.github import GitHubConfig, default_github_resilience
from hydralist.config.http_resilience import CacheConfig


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path_factory: pytest.TempPathFactory,
) -> None:
    for name in ("GITHUB_ACCESS_TOKEN", "GITHUB_CLIENT_ID", "GITHUB_CLIENT_SECRET"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HYDRALIST_DATA_DIR", str(tmp_path_factory.mktemp("data")))


@pytest.fixture
def github_config() -> GitHubConfig:
    resilience = replace(
        default_github_resilience(),
        ratelimit=None,
        cache=CacheConfig(backend="memory"),
    )
    return GitHubConfig(access_token="test-token", resilience=resilience)
