"""Public interface for the GitHub adapter."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubFetcher, build_auth, split_reference, with_cache_ttl
from .schema import GitHubLicense, GitHubRepository
from .translator import parse_repo_metadata

__all__ = [
    "GitHubAPIError",
    "GitHubFetcher",
    "GitHubLicense",
    "GitHubRepository",
    "build_auth",
    "parse_repo_metadata",
    "split_reference",
    "with_cache_ttl",
]
