"""iTunes catalog search configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from .http_resilience import ShouldCacheHook

ITUNES_BASE_URL: Final[str] = "https://itunes.apple.com"
ITUNES_SEARCH_PATH: Final[str] = "/search"
ITUNES_TIMEOUT_SECONDS: Final[float] = 30.0

DEFAULT_SEARCH_TERM: Final[str] = "breakpoints"
DEFAULT_MEDIA: Final[str] = "music"
DEFAULT_ENTITY: Final[str] = "song"
DEFAULT_ARTIST_SUBSTRING: Final[str] = "Dempsey"
DEFAULT_STORAGE_KEY: Final[str] = "foundSongs"

HTTP_CACHE_ENV_VAR: Final[str] = "FOUNDSONGS_HTTP_CACHE"
_CACHE_BACKENDS: Final[frozenset[str]] = frozenset({"memory", "sqlite"})


def default_catalog_resilience(
    *, cache: CacheConfig | None = None
) -> ResilienceConfig:
    # Apple documents roughly 20 calls per minute for the search endpoint.
    return ResilienceConfig(
        name="itunes",
        base_url=ITUNES_BASE_URL,
        timeout_seconds=ITUNES_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=0),
        ratelimit=RateLimit(max_calls=20, per_seconds=60.0),
        cache=cache or CacheConfig(enabled=False),
        default_headers={"Accept": "application/json"},
    )


def get_http_cache_config(*, should_cache: ShouldCacheHook | None = None) -> CacheConfig:
    """Build the response cache settings from ``FOUNDSONGS_HTTP_CACHE``.

    Unset means no caching; ``memory`` and ``sqlite`` select the hishel backend.
    """

    backend = optional_env_var(HTTP_CACHE_ENV_VAR)
    if backend is None or backend.lower() == "off":
        return CacheConfig(enabled=False)
    backend = backend.lower()
    if backend not in _CACHE_BACKENDS:
        raise ConfigurationError(f"Unknown {HTTP_CACHE_ENV_VAR} backend: {backend}")
    return CacheConfig(
        enabled=True,
        backend="sqlite" if backend == "sqlite" else "memory",
        should_cache=should_cache,
    )


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Fixed query and filtering constants for the found songs screen."""

    search_path: str = ITUNES_SEARCH_PATH
    term: str = DEFAULT_SEARCH_TERM
    media: str = DEFAULT_MEDIA
    entity: str = DEFAULT_ENTITY
    artist_substring: str = DEFAULT_ARTIST_SUBSTRING
    storage_key: str = DEFAULT_STORAGE_KEY
    resilience: ResilienceConfig = field(default_factory=default_catalog_resilience)

    def search_params(self) -> dict[str, str]:
        return {"term": self.term, "media": self.media, "entity": self.entity}


def get_catalog_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> CatalogConfig:
    return CatalogConfig(
        resilience=resilience
        or default_catalog_resilience(cache=get_http_cache_config(should_cache=cache_predicate))
    )
