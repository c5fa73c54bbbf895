"""Reconcile a local listing with repository metadata from the source host.

One pass produces two views of the same entries:

- ``raw``: the local data without identifiers, optionally trimmed of values the
  remote already supplies (corrective mode)
- ``hydrated``: the local data plus a content-derived ``id`` and any fields the
  remote could fill in

Local values always win in the hydrated view; remote data never writes into the
raw view, it can only cause deletions there.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final, Literal

from hydralist.config.errors import MissingConfigurationError

from .listing import ListingRecord, LookupKey, derive_identifier
from .ordering import sort_records

if TYPE_CHECKING:
    from hydralist.config.github import GitHubConfig

    from .metadata import RepoMetadata
    from .ports.fetching import RepoMetadataFetcher

type LogLevel = Literal["info", "warn", "note"]
type LogCallback = Callable[[LogLevel, str], None]

ONE_DAY_MS: Final[int] = 1000 * 60 * 60 * 24

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconcileOptions:
    corrective: bool = False
    cache_ms: int = ONE_DAY_MS
    log: LogCallback | None = None

    def emit(self, level: LogLevel, message: str) -> None:
        if self.log is not None:
            self.log(level, message)


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    hydrated: list[ListingRecord]
    raw: list[ListingRecord]


@dataclass(slots=True)
class _Arena:
    """Per-call record storage keyed by lookup key; entries are replaced, never mutated."""

    raw: dict[LookupKey, ListingRecord] = field(default_factory=dict)
    hydrated: dict[LookupKey, ListingRecord] = field(default_factory=dict)
    identifiers: dict[LookupKey, str] = field(default_factory=dict)

    def __contains__(self, key: LookupKey) -> bool:
        return key in self.raw


def remote_fields(repo: RepoMetadata) -> dict[str, object]:
    """Listing fields offered by ``repo``, in merge order.

    A homepage pointing back at the repository itself is dropped since it adds
    nothing over the ``github`` reference.
    """

    homepage = repo.homepage
    if homepage and f"github.com/{repo.lookup_key}" in homepage.lower():
        homepage = None
    return {
        "description": repo.description,
        "language": repo.language,
        "license": repo.license_key,
        "website": homepage,
        "stars": repo.stargazers_count,
        "watchers": repo.watchers_count,
        "forks": repo.forks_count,
        "created_at": repo.created_at,
        "updated_at": repo.updated_at,
    }


def _same_value(local: object, remote: object) -> bool:
    return str(local).lower() == str(remote).lower()


class Reconciler:
    """Merge listing records with metadata from a single batched fetch."""

    def __init__(self, *, fetcher: RepoMetadataFetcher, config: GitHubConfig | None) -> None:
        if config is None:
            raise MissingConfigurationError("Missing GitHub configuration")
        config.require_credentials()
        self._fetcher = fetcher

    async def reconcile(
        self,
        records: Iterable[ListingRecord | Mapping[str, object]],
        options: ReconcileOptions | None = None,
    ) -> ReconcileResult:
        options = options or ReconcileOptions()
        arena = self._prepare(records, options)

        identifiers = list(arena.identifiers.values())
        options.emit("info", f"Fetching the github information, all {len(identifiers)} of them")
        repos = await self._fetcher(identifiers, cache_ms=options.cache_ms)

        for repo in repos:
            self._merge(arena, repo, options)

        return ReconcileResult(
            hydrated=sort_records(arena.hydrated.values()),
            raw=sort_records(arena.raw.values()),
        )

    def _prepare(
        self,
        records: Iterable[ListingRecord | Mapping[str, object]],
        options: ReconcileOptions,
    ) -> _Arena:
        arena = _Arena()
        for index, item in enumerate(records):
            record = item if isinstance(item, ListingRecord) else ListingRecord.from_mapping(item)
            key = record.lookup_key(index)
            if key in arena:
                log.warning("Duplicate listing key %r; keeping entry at index %d", key, index)
                options.emit("warn", f"{key} is listed more than once, keeping the last entry")

            raw = record.without_field("id")
            identifier = derive_identifier(record.identity())
            arena.raw[key] = raw
            arena.hydrated[key] = raw.with_field("id", identifier)
            if record.github:
                arena.identifiers[key] = record.github
        return arena

    def _merge(self, arena: _Arena, repo: RepoMetadata, options: ReconcileOptions) -> None:
        key = repo.lookup_key
        # The listing may still use a repository's old name after a rename.
        if key not in arena:
            options.emit("warn", f"{repo.full_name} is missing, likely due to rename")
            return

        raw = arena.raw[key]
        hydrated = arena.hydrated[key]
        for name, value in remote_fields(repo).items():
            if not value:
                continue
            local = raw.get(name)
            if options.corrective and local and _same_value(local, value):
                options.emit(
                    "note",
                    f"trimming {name} on {repo.full_name} as it is the same as the github data: "
                    f"{value}",
                )
                raw = raw.without_field(name)
            if not hydrated.has(name):
                options.emit("info", f"added {name} on {repo.full_name} from the github data")
                hydrated = hydrated.with_field(name, value)

        arena.raw[key] = raw
        arena.hydrated[key] = hydrated


async def reconcile(
    records: Iterable[ListingRecord | Mapping[str, object]],
    *,
    fetcher: RepoMetadataFetcher,
    config: GitHubConfig | None,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """Build a :class:`Reconciler` and run it once."""

    reconciler = Reconciler(fetcher=fetcher, config=config)
    return await reconciler.reconcile(records, options)
