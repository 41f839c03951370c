"""Cache service for culture reference data."""

from __future__ import annotations

from typing import Any

from cachetools import TTLCache

from ..config import get_settings


class CacheService:
    """
    TTL-based in-memory cache with a bounded size.

    Works within a single process; each worker keeps its own copy.
    """

    def __init__(self, ttl: int | None = None, size: int | None = None) -> None:
        """
        Initialize cache with configurable TTL and size.

        Args:
            ttl: Entry TTL in seconds (default from config)
            size: Max number of entries (default from config)
        """
        settings = get_settings()
        self._cache: TTLCache[str, Any] = TTLCache(
            maxsize=size or settings.culture_cache_size,
            ttl=ttl or settings.culture_cache_ttl,
        )

    def get(self, key: str) -> Any | None:
        """
        Get cached value by key.

        Returns:
            Cached value or None if not found/expired
        """
        return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = value

    def clear(self) -> None:
        """Clear all entries."""
        self._cache.clear()
