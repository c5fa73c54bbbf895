"""Read and write listing JSON files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

from hydralist.domain.listing import ListingRecord

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

log = getLogger(__name__)


class ListingFormatError(ValueError):
    """Raised when a listing file is not a JSON array of objects."""


def parse_listing(text: str, *, source: str = "<string>") -> list[ListingRecord]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ListingFormatError(f"{source}: invalid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise ListingFormatError(f"{source}: expected a JSON array of listing entries")

    records: list[ListingRecord] = []
    for index, entry in enumerate(cast(list[object], payload)):
        if not isinstance(entry, Mapping):
            raise ListingFormatError(f"{source}: entry {index} is not an object")
        records.append(ListingRecord.from_mapping(cast(Mapping[str, object], entry)))
    return records


def load_listing(path: Path) -> list[ListingRecord]:
    records = parse_listing(path.read_text(encoding="utf-8"), source=str(path))
    log.debug("Loaded %d listing entries from %s", len(records), path)
    return records


def dump_listing(records: Iterable[ListingRecord]) -> str:
    """Canonically ordered JSON, tab indented, with a trailing newline."""

    payload = [record.to_dict() for record in records]
    return json.dumps(payload, indent="\t", ensure_ascii=False) + "\n"


def write_listing(records: Iterable[ListingRecord], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_listing(records), encoding="utf-8")
    log.info("Wrote %s", path)
