from __future__ import annotations

from hydralist.domain.listing import ListingRecord
from hydralist.domain.ordering import natural_key, sort_records


def _names(records: list[ListingRecord]) -> list[str | None]:
    return [record.name for record in records]


def test_natural_key_compares_digit_runs_by_magnitude() -> None:
    assert natural_key("item 2") < natural_key("item 10")
    assert natural_key("Alpha") == natural_key("alpha")
    assert natural_key(None) == natural_key("")


def test_sort_records_is_case_insensitive_and_natural() -> None:
    records = [
        ListingRecord(name="plugin10"),
        ListingRecord(name="Plugin2"),
        ListingRecord(name="alpha"),
        ListingRecord(name="Beta"),
    ]

    assert _names(sort_records(records)) == ["alpha", "Beta", "Plugin2", "plugin10"]


def test_sort_records_breaks_ties_on_github_reference() -> None:
    records = [
        ListingRecord(name="Same", github="org/repo10"),
        ListingRecord(name="same", github="Org/repo9"),
        ListingRecord(name="Same", github="another/repo"),
    ]

    assert [record.github for record in sort_records(records)] == [
        "another/repo",
        "Org/repo9",
        "org/repo10",
    ]


def test_sort_records_is_idempotent() -> None:
    records = [
        ListingRecord(name="b1"),
        ListingRecord(name="B10"),
        ListingRecord(name="a", github="x/2"),
        ListingRecord(name="a", github="x/10"),
        ListingRecord(github="nameless/entry"),
    ]

    once = sort_records(records)

    assert sort_records(once) == once
    assert once[0].name is None
