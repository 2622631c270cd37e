from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from foundsongs.domain.errors import StorageWriteError
from foundsongs.domain.ports.unit_of_work import SnapshotRepositories
from foundsongs.domain.records import Record

if TYPE_CHECKING:
    from types import TracebackType

    from foundsongs.domain.ports.fetching import RawItem


def make_raw_item(
    *,
    artist_name: str = "Ryan Dempsey",
    track_name: str = "Song A",
    **overrides: object,
) -> dict[str, object]:
    item: dict[str, object] = {
        "wrapperType": "track",
        "kind": "song",
        "artistId": "1442331213",
        "collectionId": "1589317112",
        "trackId": "1589317115",
        "artistName": artist_name,
        "collectionName": "Breakpoints",
        "trackName": track_name,
        "collectionCensoredName": "Breakpoints",
        "trackCensoredName": track_name,
        "isStreamable": True,
    }
    item.update(overrides)
    return item


def make_record(**overrides: object) -> Record:
    values: dict[str, object] = {
        "artist_id": "1442331213",
        "collection_id": "1589317112",
        "track_id": "1589317115",
        "artist_name": "Ryan Dempsey",
        "collection_name": "Breakpoints",
        "track_name": "Song A",
        "collection_censored_name": "Breakpoints",
        "track_censored_name": "Song A",
        "is_streamable": True,
    }
    values.update(overrides)
    return Record(**values)  # type: ignore[arg-type]


@dataclass
class FakeCatalogFetcher:
    items: list[RawItem] = field(default_factory=list["RawItem"])
    error: Exception | None = None
    calls: int = 0

    async def fetch_async(self) -> list[RawItem]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)


@dataclass
class InMemoryKeyValueRepository:
    values: dict[str, bytes] = field(default_factory=dict[str, bytes])
    fail_writes: bool = False

    def put(self, key: str, value: bytes) -> None:
        if self.fail_writes:
            raise StorageWriteError(f"refusing to write {key!r}")
        self.values[key] = value

    def get(self, key: str) -> bytes | None:
        return self.values.get(key)


class FakeSnapshotUnitOfWork:
    def __init__(self, repository: InMemoryKeyValueRepository) -> None:
        self._repositories = SnapshotRepositories(values=repository)
        self.committed = False

    @property
    def repositories(self) -> SnapshotRepositories:
        return self._repositories

    def __enter__(self) -> FakeSnapshotUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        return False

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        return None
