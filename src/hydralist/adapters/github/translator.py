"""Translate GitHub payloads into domain metadata."""

from __future__ import annotations

from collections.abc import Mapping

from hydralist.domain.metadata import RepoMetadata

from .schema import GitHubRepository


def parse_repo_metadata(payload: GitHubRepository | Mapping[str, object]) -> RepoMetadata:
    repo = (
        payload
        if isinstance(payload, GitHubRepository)
        else GitHubRepository.model_validate(payload)
    )
    return RepoMetadata(
        full_name=repo.full_name,
        description=repo.description,
        language=repo.language,
        license_key=repo.license.key if repo.license else None,
        homepage=repo.homepage,
        stargazers_count=repo.stargazers_count,
        watchers_count=repo.watchers_count,
        forks_count=repo.forks_count,
        created_at=repo.created_at,
        updated_at=repo.updated_at,
    )
