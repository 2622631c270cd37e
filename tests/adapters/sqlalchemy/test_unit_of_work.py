from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from foundsongs.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemySnapshotUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)
from foundsongs.domain.errors import PersistError, StorageUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemySnapshotUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert is_started()


def test_startup_uses_database_uri() -> None:
    startup(database_uri="sqlite+pysqlite:///:memory:")

    assert is_started()
    shutdown()
    assert not is_started()


def test_startup_reports_unreachable_database(tmp_path: Path) -> None:
    uri = f"sqlite+pysqlite:///{tmp_path / 'missing' / 'songs.db'}"

    with pytest.raises(StorageUnavailableError) as excinfo:
        startup(database_uri=uri)

    assert isinstance(excinfo.value, PersistError)
    assert not is_started()


def test_startup_reports_invalid_database_uri() -> None:
    with pytest.raises(StorageUnavailableError):
        startup(database_uri="not a database uri")

    assert not is_started()


def test_unit_of_work_commits_values(
    sqlite_unit_of_work: Callable[[], SqlAlchemySnapshotUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.values.put("foundSongs", b"[]")
        uow.commit()

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.values.get("foundSongs") == b"[]"


def test_unit_of_work_rolls_back_on_error(
    sqlite_unit_of_work: Callable[[], SqlAlchemySnapshotUnitOfWork],
) -> None:
    with pytest.raises(RuntimeError, match="boom"), sqlite_unit_of_work() as uow:
        uow.repositories.values.put("foundSongs", b"[]")
        raise RuntimeError("boom")

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.values.get("foundSongs") is None


def test_repositories_unavailable_outside_context(
    sqlite_unit_of_work: Callable[[], SqlAlchemySnapshotUnitOfWork],
) -> None:
    uow = sqlite_unit_of_work()

    with pytest.raises(StartupError):
        _ = uow.repositories
