"""Application service orchestrating live flight searches with Skyscanner."""

from __future__ import annotations

import logging

from skyscanner.models import (
    AutoSuggestFlightsRequest,
    AutoSuggestFlightsResponse,
    CreatePollResponse,
    CreateSearchRequest,
    SessionToken,
)

from ..models import OffersResponse
from ..ports.skyscanner_api import SkyscannerApiProtocol
from .converter import ItineraryConverter, SortBy

logger = logging.getLogger(__name__)


class FlightSearchService:
    """
    Create and poll live searches and adapt their results.

    Polling until completion is left to the caller: every method issues
    exactly one upstream request.
    """

    def __init__(
        self,
        skyscanner_api: SkyscannerApiProtocol,
        converter: ItineraryConverter | None = None,
    ) -> None:
        self._api = skyscanner_api
        self._converter = converter or ItineraryConverter()

    async def create(self, request: CreateSearchRequest) -> CreatePollResponse:
        """Create a live search session."""
        response = await self._api.create_search(request)
        logger.info(
            "create_search finished",
            extra={
                "session_token": response.session_token,
                "status": response.status,
                "itineraries": self._count_itineraries(response),
            },
        )
        return response

    async def poll(self, session_token: SessionToken) -> CreatePollResponse:
        """Poll a live search session once."""
        response = await self._api.poll_search(session_token)
        logger.info(
            "poll_search finished",
            extra={
                "session_token": session_token,
                "status": response.status,
                "itineraries": self._count_itineraries(response),
            },
        )
        return response

    async def get_offers(self, session_token: SessionToken, sort: SortBy = "best") -> OffersResponse:
        """Poll once and return flattened offers."""
        response = await self.poll(session_token)
        offers = self._converter.convert(response, sort=sort)
        logger.debug(
            "offers converted",
            extra={"session_token": session_token, "offers": len(offers), "sort": sort},
        )
        return OffersResponse(
            session_token=response.session_token or session_token,
            status=response.status,
            complete=response.is_complete,
            offers=offers,
        )

    async def suggest_places(self, request: AutoSuggestFlightsRequest) -> AutoSuggestFlightsResponse:
        """Suggest places for a partial search term."""
        return await self._api.autosuggest_flights(request)

    @staticmethod
    def _count_itineraries(response: CreatePollResponse) -> int:
        if response.content is None or response.content.results is None:
            return 0
        return len(response.content.results.itineraries)
