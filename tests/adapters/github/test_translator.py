from __future__ import annotations

from hydralist.adapters.github import GitHubRepository, parse_repo_metadata
from tests.helpers.repos import make_repo_payload


def test_parse_repo_metadata_maps_listing_fields() -> None:
    metadata = parse_repo_metadata(make_repo_payload("Owner/Project"))

    assert metadata.full_name == "Owner/Project"
    assert metadata.lookup_key == "owner/project"
    assert metadata.description == "A sample project"
    assert metadata.language == "Python"
    assert metadata.license_key == "mit"
    assert metadata.homepage == "https://foo.example.com"
    assert metadata.stargazers_count == 42
    assert metadata.watchers_count == 42
    assert metadata.forks_count == 7
    assert metadata.created_at == "2015-01-01T00:00:00Z"
    assert metadata.updated_at == "2024-06-01T12:00:00Z"


def test_parse_repo_metadata_handles_missing_license_and_blank_text() -> None:
    payload = make_repo_payload(license=None, homepage="", description="   ", language=None)

    metadata = parse_repo_metadata(GitHubRepository.model_validate(payload))

    assert metadata.license_key is None
    assert metadata.homepage is None
    assert metadata.description is None
    assert metadata.language is None


def test_schema_ignores_unmodeled_keys() -> None:
    repo = GitHubRepository.model_validate(make_repo_payload(topics=["cli"], archived=True))

    assert not hasattr(repo, "topics")
