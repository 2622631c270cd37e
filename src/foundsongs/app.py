"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from foundsongs.adapters.itunes import (
    ITunesSearchClient,
    filter_records,
    should_cache_search_payload,
)
from foundsongs.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemySnapshotUnitOfWork,
    is_started,
    startup,
)
from foundsongs.config.catalog import get_catalog_config
from foundsongs.domain.result_store import ResultStore
from foundsongs.ui.presenter import ListPresenter

if TYPE_CHECKING:
    from foundsongs.config.catalog import CatalogConfig
    from foundsongs.domain.ports.fetching import CatalogFetcher
    from foundsongs.domain.ports.unit_of_work import SnapshotUnitOfWork
    from foundsongs.domain.records import Record
    from foundsongs.ui.presenter import ReloadCallback

UnitOfWorkFactory = Callable[[], "SnapshotUnitOfWork"]

log = getLogger(__name__)


def _default_unit_of_work() -> SnapshotUnitOfWork:
    # Started on first use; start-up failures surface from the persist step.
    if not is_started():
        startup()
    return SqlAlchemySnapshotUnitOfWork()


def _ensure_storage(unit_of_work_factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    return unit_of_work_factory or _default_unit_of_work


def build_result_store(
    *,
    config: CatalogConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ResultStore:
    effective_config = config or get_catalog_config()
    return ResultStore(
        unit_of_work_factory=_ensure_storage(unit_of_work_factory),
        key=effective_config.storage_key,
    )


def build_found_songs_presenter(
    *,
    config: CatalogConfig | None = None,
    fetcher: CatalogFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    on_reload: ReloadCallback | None = None,
) -> ListPresenter:
    """Wire the catalog client, record filter and result store into a presenter."""

    effective_config = config or get_catalog_config(cache_predicate=should_cache_search_payload)
    return ListPresenter(
        fetcher=fetcher or ITunesSearchClient(config=effective_config),
        store=build_result_store(
            config=effective_config, unit_of_work_factory=unit_of_work_factory
        ),
        record_filter=partial(filter_records, artist_substring=effective_config.artist_substring),
        on_reload=on_reload,
    )


def show_found_songs(
    *,
    config: CatalogConfig | None = None,
    fetcher: CatalogFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    on_reload: ReloadCallback | None = None,
) -> ListPresenter:
    """Create the screen, run its single load, and return the presenter."""

    presenter = build_found_songs_presenter(
        config=config,
        fetcher=fetcher,
        unit_of_work_factory=unit_of_work_factory,
        on_reload=on_reload,
    )

    async def _run() -> None:
        await presenter.start()

    log.info("Loading found songs")
    asyncio.run(_run())
    log.info("Found songs screen is %s: rows=%s", presenter.state, presenter.row_count)
    return presenter


def load_stored_songs(
    *,
    config: CatalogConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Record] | None:
    """Read back the last stored snapshot, if any."""

    store = build_result_store(config=config, unit_of_work_factory=unit_of_work_factory)
    return store.load()
