"""Ports for fetching external repository metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hydralist.domain.metadata import RepoMetadata


class MetadataFetchError(RuntimeError):
    """Raised by fetchers when remote metadata cannot be retrieved."""


class RepoMetadataFetcher(Protocol):
    """Callable port resolving repository references to their metadata in one batch."""

    async def __call__(
        self,
        identifiers: Sequence[str],
        *,
        cache_ms: int,
    ) -> Sequence[RepoMetadata]: ...


__all__ = ["MetadataFetchError", "RepoMetadataFetcher"]
