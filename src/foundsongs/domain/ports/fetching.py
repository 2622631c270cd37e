"""Ports for fetching raw catalog search results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

type RawItem = Mapping[str, object]


@runtime_checkable
class CatalogFetcher(Protocol):
    """Asynchronous port returning the undecoded ``results`` entries of one search."""

    async def fetch_async(self) -> list[RawItem]: ...


__all__ = ["CatalogFetcher", "RawItem"]
