"""Culture reference data (locales, currencies, markets) with caching."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from skyscanner.models import (
    CurrenciesResponse,
    LocalesResponse,
    MarketsResponse,
    NearestCultureResponse,
)

from ...infrastructure.cache_service import CacheService
from ..ports.skyscanner_api import SkyscannerApiProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CultureService:
    """Serve culture data from cache, fetching from the API on a miss."""

    def __init__(self, skyscanner_api: SkyscannerApiProtocol, cache: CacheService) -> None:
        self._api = skyscanner_api
        self._cache = cache

    async def locales(self) -> LocalesResponse:
        return await self._cached("locales", self._api.list_locales)

    async def currencies(self) -> CurrenciesResponse:
        return await self._cached("currencies", self._api.list_currencies)

    async def markets(self, locale: str) -> MarketsResponse:
        return await self._cached(
            f"markets:{locale}",
            lambda: self._api.list_markets(locale),
        )

    async def nearest_culture(self, ip_address: str) -> NearestCultureResponse:
        return await self._cached(
            f"nearestculture:{ip_address}",
            lambda: self._api.nearest_culture(ip_address),
        )

    async def _cached(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        """Errors from fetch propagate and are never cached."""
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("culture cache hit", extra={"cache_key": key})
            return cached

        result = await fetch()
        self._cache.set(key, result)
        logger.info("culture data fetched", extra={"cache_key": key})
        return result
