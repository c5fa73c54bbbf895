"""Repository metadata as reported by the source host."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RepoMetadata:
    full_name: str
    description: str | None = None
    language: str | None = None
    license_key: str | None = None
    homepage: str | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    forks_count: int | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def lookup_key(self) -> str:
        return self.full_name.lower()
