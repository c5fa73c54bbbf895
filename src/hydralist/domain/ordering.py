"""Deterministic ordering of listing records."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .listing import ListingRecord

_DIGITS = re.compile(r"(\d+)")

type NaturalKey = tuple[str | int, ...]


def natural_key(value: object) -> NaturalKey:
    """Case-insensitive key where digit runs compare by magnitude.

    ``re.split`` with a capturing group always yields text at even positions and
    digits at odd ones, so keys of different values never compare str to int.
    """

    text = "" if value is None else str(value).casefold()
    return tuple(
        int(part) if index % 2 else part for index, part in enumerate(_DIGITS.split(text))
    )


def record_sort_key(record: ListingRecord) -> tuple[NaturalKey, NaturalKey]:
    return natural_key(record.name), natural_key(record.github)


def sort_records(records: Iterable[ListingRecord]) -> list[ListingRecord]:
    """Sort by name, then GitHub reference, both in case-insensitive natural order."""

    return sorted(records, key=record_sort_key)
