"""HTTP client for the iTunes Search API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from foundsongs.adapters.http_resilience import ResilientClient
from foundsongs.config.catalog import CatalogConfig
from foundsongs.domain.errors import CatalogTransportError, MalformedPayloadError

from .schema import SearchResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from foundsongs.config.http_resilience import ResilienceConfig
    from foundsongs.domain.ports.fetching import CatalogFetcher, RawItem

log = getLogger(__name__)


def should_cache_search_payload(payload: object) -> bool:
    """Only complete search envelopes are worth keeping in the response cache."""

    try:
        SearchResponse.model_validate(payload)
    except ValidationError:
        return False
    return True


class ITunesSearchClient:
    """Issues the fixed catalog search and returns the raw ``results`` entries."""

    def __init__(
        self,
        *,
        config: CatalogConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or CatalogConfig()
        self._resilience = self._config.resilience
        self._client_factory = client_factory or ResilientClient

    def fetch(self) -> list[RawItem]:
        return asyncio.run(self.fetch_async())

    async def fetch_async(self) -> list[RawItem]:
        params = httpx.QueryParams(self._config.search_params())
        async with self._client_factory(self._resilience) as client:
            response = await self._perform_request(client=client, params=params)
        return self._parse_results(response)

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        params: httpx.QueryParams,
    ) -> httpx.Response:
        try:
            response = await client.get(
                self._config.search_path,
                params=params,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            log.error("iTunes search failed with HTTP %s", status)
            raise CatalogTransportError(str(exc), status_code=status) from exc
        except httpx.HTTPError as exc:
            log.error("iTunes search transport error: %s", exc)
            raise CatalogTransportError(str(exc) or type(exc).__name__) from exc
        return response

    def _parse_results(self, response: httpx.Response) -> list[RawItem]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedPayloadError("iTunes response body is not valid JSON") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
            raise MalformedPayloadError("Unexpected iTunes response payload")

        try:
            parsed = SearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise MalformedPayloadError(
                "iTunes response contains non-object search results"
            ) from exc

        log.debug("iTunes search returned %s results", len(parsed.results))
        return list(parsed.results)


if TYPE_CHECKING:
    _fetcher_check: CatalogFetcher = ITunesSearchClient()
