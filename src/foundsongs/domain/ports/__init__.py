"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CatalogFetcher, RawItem
from .persistence import KeyValueRepository
from .unit_of_work import (
    RepositoryCollection,
    SnapshotRepositories,
    SnapshotUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "CatalogFetcher",
    "KeyValueRepository",
    "RawItem",
    "RepositoryCollection",
    "SnapshotRepositories",
    "SnapshotUnitOfWork",
    "UnitOfWork",
]
