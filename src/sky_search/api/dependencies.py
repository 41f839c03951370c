"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from sky_search.config import get_settings
from sky_search.domain.ports.skyscanner_api import SkyscannerApiProtocol
from sky_search.domain.services.converter import ItineraryConverter
from sky_search.domain.services.culture import CultureService
from sky_search.domain.services.flight_search import FlightSearchService
from sky_search.infrastructure.cache_service import CacheService
from skyscanner import SkyscannerClient


@lru_cache(maxsize=1)
def get_converter() -> ItineraryConverter:
    return ItineraryConverter()


@lru_cache(maxsize=1)
def get_skyscanner_api() -> SkyscannerApiProtocol:
    """Return Skyscanner client built from settings (singleton, holds no per-call state)."""
    return SkyscannerClient(get_settings().client_config())


@lru_cache(maxsize=1)
def get_cache_service() -> CacheService:
    """Return cache service instance (singleton)."""
    return CacheService()


def get_flight_service(
    skyscanner_api: SkyscannerApiProtocol = Depends(get_skyscanner_api),
    converter: ItineraryConverter = Depends(get_converter),
) -> FlightSearchService:
    """Assemble the flight search service."""
    return FlightSearchService(skyscanner_api=skyscanner_api, converter=converter)


def get_culture_service(
    skyscanner_api: SkyscannerApiProtocol = Depends(get_skyscanner_api),
    cache: CacheService = Depends(get_cache_service),
) -> CultureService:
    """Assemble the culture data service."""
    return CultureService(skyscanner_api=skyscanner_api, cache=cache)
