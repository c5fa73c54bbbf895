"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from hydralist.adapters.github import GitHubFetcher
from hydralist.adapters.listing_file import load_listing, write_listing
from hydralist.common.logging import logging_callback
from hydralist.config.github import get_github_config
from hydralist.domain.reconciliation import (
    ONE_DAY_MS,
    ReconcileOptions,
    ReconcileResult,
    Reconciler,
)

if TYPE_CHECKING:
    from pathlib import Path

    from hydralist.config.github import GitHubConfig
    from hydralist.domain.ports.fetching import RepoMetadataFetcher
    from hydralist.domain.reconciliation import LogCallback


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HydrateListingResult:
    source: Path
    raw_path: Path | None
    hydrated_path: Path | None
    result: ReconcileResult


def hydrate_listing_file(
    source: Path,
    *,
    raw_path: Path | None = None,
    hydrated_path: Path | None = None,
    corrective: bool = False,
    cache_ms: int = ONE_DAY_MS,
    config: GitHubConfig | None = None,
    fetcher: RepoMetadataFetcher | None = None,
    log_callback: LogCallback | None = None,
) -> HydrateListingResult:
    """Hydrate the listing at ``source`` and write the requested output views."""

    effective_config = config or get_github_config()
    effective_fetcher = fetcher or GitHubFetcher(config=effective_config)
    reconciler = Reconciler(fetcher=effective_fetcher, config=effective_config)

    records = load_listing(source)
    log.info(
        "Starting listing hydration: source=%s, entries=%d, corrective=%s, cache_ms=%d",
        source,
        len(records),
        corrective,
        cache_ms,
    )

    options = ReconcileOptions(
        corrective=corrective,
        cache_ms=cache_ms,
        log=log_callback or logging_callback(log),
    )
    result = asyncio.run(reconciler.reconcile(records, options))

    if raw_path is not None:
        write_listing(result.raw, raw_path)
    if hydrated_path is not None:
        write_listing(result.hydrated, hydrated_path)

    log.info(f"Finished listing hydration: raw={len(result.raw)}, hydrated={len(result.hydrated)}")
    return HydrateListingResult(
        source=source,
        raw_path=raw_path,
        hydrated_path=hydrated_path,
        result=result,
    )
