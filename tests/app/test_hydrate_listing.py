from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from hydralist.app import hydrate_listing_file
from hydralist.config.errors import MissingConfigurationError
from hydralist.config.github import GitHubConfig
from hydralist.domain.metadata import RepoMetadata
from tests.helpers.repos import FakeRepoMetadataFetcher, RecordingLog


@pytest.fixture
def listing_path(tmp_path: Path) -> Path:
    path = tmp_path / "listing.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Zeta", "github": "user/zeta", "description": "Zeta tool"},
                {"name": "alpha", "website": "https://alpha.example"},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_hydrate_listing_file_writes_both_views(
    listing_path: Path,
    tmp_path: Path,
    github_config: GitHubConfig,
) -> None:
    fetcher = FakeRepoMetadataFetcher(
        repos=[
            RepoMetadata(
                full_name="user/zeta",
                description="zeta TOOL",
                language="Python",
                stargazers_count=3,
            )
        ]
    )
    log = RecordingLog()
    raw_path = tmp_path / "raw.json"
    hydrated_path = tmp_path / "hydrated.json"

    outcome = hydrate_listing_file(
        listing_path,
        raw_path=raw_path,
        hydrated_path=hydrated_path,
        corrective=True,
        cache_ms=5000,
        config=github_config,
        fetcher=fetcher,
        log_callback=log,
    )

    raw = json.loads(raw_path.read_text(encoding="utf-8"))
    hydrated = json.loads(hydrated_path.read_text(encoding="utf-8"))
    assert raw == [
        {"name": "alpha", "website": "https://alpha.example"},
        {"name": "Zeta", "github": "user/zeta"},
    ]
    assert [entry["name"] for entry in hydrated] == ["alpha", "Zeta"]
    assert hydrated[1]["description"] == "Zeta tool"
    assert hydrated[1]["language"] == "Python"
    assert hydrated[1]["stars"] == 3
    assert list(hydrated[1])[0] == "id"
    assert fetcher.calls == [(["user/zeta"], 5000)]
    assert len(outcome.result.raw) == 2
    assert log.levels("note")


def test_hydrate_listing_file_requires_credentials(listing_path: Path) -> None:
    fetcher = FakeRepoMetadataFetcher()

    with pytest.raises(MissingConfigurationError):
        hydrate_listing_file(listing_path, fetcher=fetcher)

    assert fetcher.calls == []


def test_hydrate_listing_file_rejects_config_without_credentials(
    listing_path: Path,
) -> None:
    with pytest.raises(MissingConfigurationError):
        hydrate_listing_file(
            listing_path, config=GitHubConfig(), fetcher=FakeRepoMetadataFetcher()
        )


def test_hydrate_listing_file_logs_each_event_once(
    listing_path: Path,
    tmp_path: Path,
    github_config: GitHubConfig,
    caplog: pytest.LogCaptureFixture,
) -> None:
    fetcher = FakeRepoMetadataFetcher(repos=[RepoMetadata(full_name="user/zeta", language="Go")])
    caplog.set_level(logging.DEBUG)

    hydrate_listing_file(
        listing_path,
        raw_path=tmp_path / "raw.json",
        hydrated_path=tmp_path / "hydrated.json",
        config=github_config,
        fetcher=fetcher,
    )

    messages = [record.getMessage() for record in caplog.records]
    assert messages.count("info: added language on user/zeta from the github data") == 1
    assert messages.count("info: Fetching the github information, all 1 of them") == 1
