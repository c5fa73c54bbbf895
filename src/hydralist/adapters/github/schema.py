"""Pydantic models describing the GitHub repository payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GitHubLicense(GitHubBaseModel):
    key: str | None = None
    name: str | None = None
    spdx_id: str | None = None


class GitHubRepository(GitHubBaseModel):
    """Subset of ``GET /repos/{owner}/{repo}`` used for listings."""

    full_name: str
    description: str | None = None
    language: str | None = None
    license: GitHubLicense | None = None
    homepage: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    created_at: str | None = None
    updated_at: str | None = None

    _normalize_text = field_validator("description", "homepage", "language", mode="before")(
        _blank_to_none
    )


class GitHubErrorResponse(GitHubBaseModel):
    message: str
    documentation_url: str | None = None
