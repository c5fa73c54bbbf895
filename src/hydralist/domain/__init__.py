"""Listing domain: records, ordering and reconciliation."""

from __future__ import annotations

from .listing import KEY_ORDER, ListingRecord, LookupKey, derive_identifier
from .metadata import RepoMetadata
from .ordering import natural_key, sort_records
from .reconciliation import (
    ONE_DAY_MS,
    LogCallback,
    LogLevel,
    ReconcileOptions,
    Reconciler,
    ReconcileResult,
    reconcile,
)

__all__ = [
    "KEY_ORDER",
    "ONE_DAY_MS",
    "ListingRecord",
    "LogCallback",
    "LogLevel",
    "LookupKey",
    "ReconcileOptions",
    "ReconcileResult",
    "Reconciler",
    "RepoMetadata",
    "derive_identifier",
    "natural_key",
    "reconcile",
    "sort_records",
]
