from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from hydralist.config.errors import MissingConfigurationError
from hydralist.domain.ports.fetching import MetadataFetchError
from hydralist.ui import cli


def test_cli_passes_options_to_hydration(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_hydrate(source: Path, **kwargs: Any) -> None:
        captured["source"] = source
        captured.update(kwargs)

    monkeypatch.setattr(cli, "hydrate_listing_file", fake_hydrate)

    cli.main(
        [
            "listing.json",
            "--raw",
            "out/raw.json",
            "--hydrated",
            "out/hydrated.json",
            "--corrective",
            "--cache-hours",
            "2",
        ]
    )

    assert captured == {
        "source": Path("listing.json"),
        "raw_path": Path("out/raw.json"),
        "hydrated_path": Path("out/hydrated.json"),
        "corrective": True,
        "cache_ms": 7_200_000,
    }


def test_cli_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_hydrate(source: Path, **kwargs: Any) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli, "hydrate_listing_file", fake_hydrate)

    cli.main(["listing.json"])

    assert captured["raw_path"] is None
    assert captured["hydrated_path"] is None
    assert captured["corrective"] is False
    assert captured["cache_ms"] == 86_400_000


def test_cli_exits_with_2_on_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_hydrate(_source: Path, **_kwargs: Any) -> None:
        raise MissingConfigurationError("Missing configuration for: GITHUB_ACCESS_TOKEN")

    monkeypatch.setattr(cli, "hydrate_listing_file", fake_hydrate)

    with pytest.raises(SystemExit) as exc:
        cli.main(["listing.json"])

    assert exc.value.code == 2


def test_cli_exits_with_1_on_fetch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_hydrate(_source: Path, **_kwargs: Any) -> None:
        raise MetadataFetchError("GitHub API error 502")

    monkeypatch.setattr(cli, "hydrate_listing_file", fake_hydrate)

    with pytest.raises(SystemExit) as exc:
        cli.main(["listing.json"])

    assert exc.value.code == 1


def test_cli_rejects_negative_cache_hours() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["listing.json", "--cache-hours", "-1"])

    assert exc.value.code == 2
