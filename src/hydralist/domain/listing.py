"""Listing records and their canonical field layout."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Final

KEY_ORDER: Final[tuple[str, ...]] = (
    "id",
    "name",
    "github",
    "gitlab",
    "bitbucket",
    "website",
    "license",
    "language",
    "description",
    "created_at",
    "updated_at",
    "abandoned",
    "is",
    "extensible",
    "stars",
    "forks",
    "watchers",
)

# Serialized keys that are not valid Python identifiers.
_ATTRIBUTE_NAMES: Final[Mapping[str, str]] = {"is": "is_"}

type LookupKey = str | int

IDENTITY_KEYS: Final[tuple[str, ...]] = ("name", "website", "github")


def _attribute(key: str) -> str:
    return _ATTRIBUTE_NAMES.get(key, key)


def _frozen_extras(extras: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType(dict(extras))


@dataclass(frozen=True, slots=True, kw_only=True)
class ListingRecord:
    """A single project entry of a listing.

    Fields in ``KEY_ORDER`` are modelled explicitly; ``None`` means the field is
    absent. Any other keys found in the source data are kept in ``extras`` and
    written back after the canonical ones, in their original order.

    ``explicit_nulls`` remembers canonical keys the source gave as ``null``. They
    are never serialized but still count towards the identifier.
    """

    id: str | None = None
    name: str | None = None
    github: str | None = None
    gitlab: str | None = None
    bitbucket: str | None = None
    website: str | None = None
    license: str | None = None
    language: str | None = None
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    abandoned: object = None
    is_: object = None
    extensible: object = None
    stars: int | None = None
    forks: int | None = None
    watchers: int | None = None
    extras: Mapping[str, object] = field(default_factory=lambda: _frozen_extras({}))
    explicit_nulls: frozenset[str] = frozenset()

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ListingRecord:
        known: dict[str, object] = {}
        extras: dict[str, object] = {}
        nulls: set[str] = set()
        for key, value in data.items():
            if key in KEY_ORDER:
                known[_attribute(key)] = value
                if value is None:
                    nulls.add(key)
            else:
                extras[key] = value
        return cls(
            **known,  # type: ignore[arg-type]
            extras=_frozen_extras(extras),
            explicit_nulls=frozenset(nulls),
        )

    def get(self, key: str) -> object:
        if key in KEY_ORDER:
            return getattr(self, _attribute(key))
        return self.extras.get(key)

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def with_field(self, key: str, value: object) -> ListingRecord:
        """Return a copy with ``key`` set to ``value`` (``None`` removes it)."""

        if key in KEY_ORDER:
            return replace(
                self,
                **{_attribute(key): value},
                explicit_nulls=self.explicit_nulls - {key},
            )
        extras = dict(self.extras)
        if value is None:
            extras.pop(key, None)
        else:
            extras[key] = value
        return replace(self, extras=_frozen_extras(extras))

    def without_field(self, key: str) -> ListingRecord:
        return self.with_field(key, None)

    def to_dict(self) -> dict[str, object]:
        """Serialize with canonical keys first, then extras."""

        result: dict[str, object] = {}
        for key in KEY_ORDER:
            value = getattr(self, _attribute(key))
            if value is not None:
                result[key] = value
        for key, value in self.extras.items():
            if key not in result:
                result[key] = value
        return result

    def lookup_key(self, index: int) -> LookupKey:
        """Correlation key: the lowercased GitHub reference, else the input position."""

        if self.github:
            return self.github.lower()
        return index

    def identity(self) -> dict[str, object]:
        """Identifying members, including those given explicitly as ``null``."""

        return {
            key: self.get(key)
            for key in IDENTITY_KEYS
            if self.has(key) or key in self.explicit_nulls
        }


def derive_identifier(fields: Mapping[str, object]) -> str:
    """Content hash identifying a listing entry across runs.

    md5 over the compact JSON of ``{name, website, github}``. Members missing from
    ``fields`` are omitted; members present with ``None`` are serialized as
    ``null``.
    """

    payload = {key: fields[key] for key in IDENTITY_KEYS if key in fields}
    encoded = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return hashlib.md5(encoded.encode("utf-8")).hexdigest()  # noqa: S324
