"""API routes for the Sky Search gateway."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from sky_search.api.dependencies import get_culture_service, get_flight_service
from sky_search.domain.models import OffersResponse
from sky_search.domain.services.converter import SortBy
from sky_search.domain.services.culture import CultureService
from sky_search.domain.services.flight_search import FlightSearchService
from skyscanner.models import (
    AutoSuggestFlightsRequest,
    AutoSuggestFlightsResponse,
    CreatePollResponse,
    CreateSearchRequest,
    CurrenciesResponse,
    LocalesResponse,
    MarketsResponse,
    NearestCultureResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/search/create",
    response_model=CreatePollResponse,
    response_model_by_alias=True,
    tags=["search"],
)
async def create_search(
    request: CreateSearchRequest,
    service: FlightSearchService = Depends(get_flight_service),
) -> CreatePollResponse:
    """
    Create a live search session.

    Returns the session token and the first, usually incomplete, results.
    """
    logger.info(
        "create_search called",
        extra={"event": "create", "market": request.query.market, "legs": len(request.query.query_legs)},
    )
    return await service.create(request)


@router.post(
    "/search/poll/{session_token}",
    response_model=CreatePollResponse,
    response_model_by_alias=True,
    tags=["search"],
)
async def poll_search(
    session_token: str,
    service: FlightSearchService = Depends(get_flight_service),
) -> CreatePollResponse:
    """Poll a live search session once; call again until status is complete."""
    logger.info("poll_search called", extra={"event": "poll", "session_token": session_token})
    return await service.poll(session_token)


@router.get("/search/poll/{session_token}/offers", response_model=OffersResponse, tags=["search"])
async def get_offers(
    session_token: str,
    sort: SortBy = Query(default="best", description="Vendor ranking to order offers by"),
    service: FlightSearchService = Depends(get_flight_service),
) -> OffersResponse:
    """Poll a live search session once and return flattened offers."""
    response = await service.get_offers(session_token, sort=sort)
    logger.info(
        "get_offers finished",
        extra={
            "session_token": session_token,
            "complete": response.complete,
            "offers_count": len(response.offers),
        },
    )
    return response


@router.get(
    "/culture/locales",
    response_model=LocalesResponse,
    response_model_by_alias=True,
    tags=["culture"],
)
async def list_locales(service: CultureService = Depends(get_culture_service)) -> LocalesResponse:
    return await service.locales()


@router.get(
    "/culture/currencies",
    response_model=CurrenciesResponse,
    response_model_by_alias=True,
    tags=["culture"],
)
async def list_currencies(
    service: CultureService = Depends(get_culture_service),
) -> CurrenciesResponse:
    return await service.currencies()


@router.get(
    "/culture/markets/{locale}",
    response_model=MarketsResponse,
    response_model_by_alias=True,
    tags=["culture"],
)
async def list_markets(
    locale: str,
    service: CultureService = Depends(get_culture_service),
) -> MarketsResponse:
    return await service.markets(locale)


@router.get(
    "/culture/nearestculture",
    response_model=NearestCultureResponse,
    response_model_by_alias=True,
    tags=["culture"],
)
async def nearest_culture(
    ip: str = Query(description="Client IP address"),
    service: CultureService = Depends(get_culture_service),
) -> NearestCultureResponse:
    """Best-guess market, locale and currency for an IP address."""
    return await service.nearest_culture(ip)


@router.post(
    "/autosuggest/flights",
    response_model=AutoSuggestFlightsResponse,
    response_model_by_alias=True,
    tags=["places"],
)
async def autosuggest_flights(
    request: AutoSuggestFlightsRequest,
    service: FlightSearchService = Depends(get_flight_service),
) -> AutoSuggestFlightsResponse:
    return await service.suggest_places(request)
