"""Tests for FlightSearchService and CultureService."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from skyscanner import VendorError
from skyscanner.enums import ResponseStatus
from skyscanner.models import (
    AutoSuggestFlightsRequest,
    AutoSuggestFlightsResponse,
    AutoSuggestQuery,
    CreatePollResponse,
    CreateSearchRequest,
    CurrenciesResponse,
    LocalDatetime,
    LocalesResponse,
    MarketsResponse,
    NearestCultureResponse,
    PlaceId,
    QueryLeg,
    SearchQuery,
)
from sky_search.domain.services.culture import CultureService
from sky_search.domain.services.flight_search import FlightSearchService
from sky_search.infrastructure.cache_service import CacheService


@dataclass
class FakeSkyscannerApi:
    """Simple fake to simulate Skyscanner API answers."""

    search_payload: dict[str, Any]
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def _answer(self, name: str) -> None:
        await asyncio.sleep(0)
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    async def create_search(self, query):
        await self._answer("create")
        return CreatePollResponse.model_validate(self.search_payload)

    async def poll_search(self, session_token):
        await self._answer(f"poll:{session_token}")
        return CreatePollResponse.model_validate(self.search_payload)

    async def list_locales(self):
        await self._answer("locales")
        return LocalesResponse.model_validate({"locales": [{"code": "en-GB", "name": "English"}]})

    async def list_currencies(self):
        await self._answer("currencies")
        return CurrenciesResponse()

    async def list_markets(self, locale):
        await self._answer(f"markets:{locale}")
        return MarketsResponse.model_validate({"markets": [{"code": "UK", "name": "United Kingdom"}]})

    async def nearest_culture(self, ip_address):
        await self._answer(f"nearest:{ip_address}")
        return NearestCultureResponse()

    async def autosuggest_flights(self, request):
        await self._answer("autosuggest")
        return AutoSuggestFlightsResponse.model_validate({"places": [{"name": "London"}]})


def _create_request() -> CreateSearchRequest:
    return CreateSearchRequest(
        query=SearchQuery(
            market="UK",
            locale="en-GB",
            currency="GBP",
            query_legs=[
                QueryLeg(
                    origin_place_id=PlaceId(iata="LHR"),
                    destination_place_id=PlaceId(iata="BCN"),
                    date=LocalDatetime(year=2025, month=12, day=17),
                )
            ],
        )
    )


@pytest.mark.asyncio
async def test_create_returns_upstream_response(search_response_builder) -> None:
    api = FakeSkyscannerApi(search_payload=search_response_builder())
    service = FlightSearchService(api)

    response = await service.create(_create_request())

    assert response.session_token == "token-1"
    assert api.calls == ["create"]


@pytest.mark.asyncio
async def test_get_offers_polls_once(search_response_builder) -> None:
    payload = search_response_builder()
    payload["status"] = "RESULT_STATUS_COMPLETE"
    api = FakeSkyscannerApi(search_payload=payload)
    service = FlightSearchService(api)

    response = await service.get_offers("token-1", sort="cheapest")

    assert api.calls == ["poll:token-1"]
    assert response.complete is True
    assert response.status is ResponseStatus.COMPLETE
    assert [offer.itinerary_id for offer in response.offers] == ["it-2", "it-1"]


@pytest.mark.asyncio
async def test_vendor_errors_propagate(search_response_builder, caplog) -> None:
    api = FakeSkyscannerApi(
        search_payload=search_response_builder(),
        error=VendorError(404, "session not found", 404),
    )
    service = FlightSearchService(api)

    with caplog.at_level("INFO"), pytest.raises(VendorError):
        await service.poll("expired")

    assert "poll_search finished" not in caplog.text


@pytest.mark.asyncio
async def test_suggest_places(search_response_builder) -> None:
    api = FakeSkyscannerApi(search_payload=search_response_builder())
    service = FlightSearchService(api)
    request = AutoSuggestFlightsRequest(
        query=AutoSuggestQuery(market="UK", locale="en-GB", search_term="Lon")
    )

    response = await service.suggest_places(request)

    assert response.places[0].name == "London"


@pytest.mark.asyncio
async def test_culture_service_caches_reference_data(search_response_builder) -> None:
    api = FakeSkyscannerApi(search_payload=search_response_builder())
    service = CultureService(api, CacheService(ttl=60, size=10))

    first = await service.markets("en-GB")
    second = await service.markets("en-GB")
    await service.markets("es-ES")
    await service.locales()
    await service.locales()

    assert first == second
    assert api.calls == ["markets:en-GB", "markets:es-ES", "locales"]


@pytest.mark.asyncio
async def test_culture_service_does_not_cache_errors(search_response_builder) -> None:
    api = FakeSkyscannerApi(
        search_payload=search_response_builder(),
        error=VendorError(500, "upstream down", 500),
    )
    service = CultureService(api, CacheService(ttl=60, size=10))

    for _ in range(2):
        with pytest.raises(VendorError):
            await service.locales()

    assert api.calls == ["locales", "locales"]


@pytest.mark.asyncio
async def test_culture_service_keys_by_argument(search_response_builder) -> None:
    api = FakeSkyscannerApi(search_payload=search_response_builder())
    cache = CacheService(ttl=60, size=10)
    service = CultureService(api, cache)

    await service.markets("en-GB")
    await service.nearest_culture("81.2.69.142")

    assert cache.get("markets:en-GB") is not None
    assert cache.get("nearestculture:81.2.69.142") is not None
    assert cache.get("markets:es-ES") is None
