"""Ports the domain depends on."""

from __future__ import annotations

from .fetching import MetadataFetchError, RepoMetadataFetcher

__all__ = ["MetadataFetchError", "RepoMetadataFetcher"]
