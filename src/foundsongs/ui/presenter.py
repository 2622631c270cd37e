"""List presenter backing the found songs screen."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from foundsongs.domain.errors import FetchError, PersistError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from foundsongs.domain.ports.fetching import CatalogFetcher, RawItem
    from foundsongs.domain.records import Record
    from foundsongs.domain.result_store import ResultStore

    type RecordFilter = Callable[[Sequence[RawItem]], list[Record]]
    type ReloadCallback = Callable[[ListPresenter], None]

log = getLogger(__name__)


class ScreenState(StrEnum):
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True, slots=True)
class Row:
    title: str
    subtitle: str


def row_for(record: Record) -> Row:
    return Row(title=record.track_name, subtitle=record.artist_name)


class ListPresenter:
    """Binds the filtered record sequence to rows of (title, subtitle).

    The screen starts ``EMPTY`` and moves to ``LOADED`` once a fetch has been
    filtered and stored. Failures are logged and leave the current rows untouched.
    """

    def __init__(
        self,
        *,
        fetcher: CatalogFetcher,
        store: ResultStore,
        record_filter: RecordFilter,
        on_reload: ReloadCallback | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._record_filter = record_filter
        self._on_reload = on_reload
        self._records: list[Record] = []
        self._task: asyncio.Task[None] | None = None
        self.state = ScreenState.EMPTY

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    @property
    def row_count(self) -> int:
        return len(self._records)

    def row(self, index: int) -> Row:
        return row_for(self._records[index])

    def rows(self) -> list[Row]:
        return [self.row(index) for index in range(self.row_count)]

    def start(self) -> asyncio.Task[None]:
        """Schedule a load on the running loop; a second call reuses the pending task."""

        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self.load())
        return self._task

    async def load(self) -> None:
        try:
            raw_items = await self._fetcher.fetch_async()
        except FetchError as exc:
            log.warning("Catalog fetch failed, keeping %s rows: %s", self.row_count, exc)
            return

        records = self._record_filter(raw_items)

        try:
            self._store.save(records)
        except PersistError as exc:
            log.warning("Could not store found songs: %s", exc)

        self._apply(records)

    def _apply(self, records: list[Record]) -> None:
        self._records = records
        self.state = ScreenState.LOADED
        log.debug("Presenter loaded %s rows", self.row_count)
        if self._on_reload is not None:
            self._on_reload(self)
