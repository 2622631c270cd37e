"""SQLAlchemy adapter package for foundsongs."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, stored_value_table
from .repositories import SqlAlchemyKeyValueRepository
from .unit_of_work import SqlAlchemySnapshotUnitOfWork, shutdown, startup

__all__ = [
    "SqlAlchemyKeyValueRepository",
    "SqlAlchemySnapshotUnitOfWork",
    "create_all_tables",
    "metadata",
    "shutdown",
    "startup",
    "stored_value_table",
]
