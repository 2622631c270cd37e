from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from foundsongs.domain.errors import EncodingFailedError
from foundsongs.domain.records import Record
from foundsongs.domain.result_store import ResultStore
from tests.helpers.records import make_record

if TYPE_CHECKING:
    from collections.abc import Callable

    from foundsongs.adapters.sqlalchemy.unit_of_work import SqlAlchemySnapshotUnitOfWork
    from tests.helpers.records import FakeSnapshotUnitOfWork, InMemoryKeyValueRepository


def test_save_writes_snapshot_under_key(
    fake_unit_of_work: Callable[[], FakeSnapshotUnitOfWork],
    memory_repository: InMemoryKeyValueRepository,
) -> None:
    store = ResultStore(unit_of_work_factory=fake_unit_of_work, key="foundSongs")

    store.save([make_record(), Record.blank()])

    assert list(memory_repository.values) == ["foundSongs"]
    stored = json.loads(memory_repository.values["foundSongs"])
    assert [item["trackName"] for item in stored] == ["Song A", ""]


def test_load_without_snapshot_returns_none(
    fake_unit_of_work: Callable[[], FakeSnapshotUnitOfWork],
) -> None:
    store = ResultStore(unit_of_work_factory=fake_unit_of_work, key="foundSongs")

    assert store.load() is None


def test_save_failure_leaves_previous_snapshot(
    fake_unit_of_work: Callable[[], FakeSnapshotUnitOfWork],
) -> None:
    store = ResultStore(unit_of_work_factory=fake_unit_of_work, key="foundSongs")
    store.save([make_record()])

    with pytest.raises(EncodingFailedError):
        store.save([make_record(track_name=123)])

    assert store.load() == [make_record()]


def test_round_trip_through_sqlite(
    sqlite_unit_of_work: Callable[[], SqlAlchemySnapshotUnitOfWork],
) -> None:
    store = ResultStore(unit_of_work_factory=sqlite_unit_of_work, key="foundSongs")
    first = [make_record(track_name="Old")]
    second = [make_record(), Record.blank(), make_record(track_censored_name=None)]

    store.save(first)
    store.save(second)

    assert store.load() == second
