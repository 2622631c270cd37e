from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from foundsongs.adapters.sqlalchemy.mappings import create_all_tables
from foundsongs.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemySnapshotUnitOfWork,
    shutdown,
    startup,
)
from tests.helpers.records import (
    FakeSnapshotUnitOfWork,
    InMemoryKeyValueRepository,
    make_raw_item,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def search_payload() -> dict[str, object]:
    return {
        "resultCount": 3,
        "results": [
            make_raw_item(artist_name="Ryan Dempsey", track_name="Song A"),
            make_raw_item(artist_name="Other", track_name="Song B"),
            make_raw_item(
                artist_name="Dempsey & The Breakpoints",
                track_name="Song C",
                collectionCensoredName=None,
                isStreamable=False,
            ),
        ],
    }


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemySnapshotUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemySnapshotUnitOfWork:
        return SqlAlchemySnapshotUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def memory_repository() -> InMemoryKeyValueRepository:
    return InMemoryKeyValueRepository()


@pytest.fixture
def fake_unit_of_work(
    memory_repository: InMemoryKeyValueRepository,
) -> Callable[[], FakeSnapshotUnitOfWork]:
    return lambda: FakeSnapshotUnitOfWork(memory_repository)
