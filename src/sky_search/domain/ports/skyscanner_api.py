"""Contracts for the external Skyscanner API provider."""

from __future__ import annotations

from typing import Protocol

from skyscanner.models import (
    AutoSuggestFlightsRequest,
    AutoSuggestFlightsResponse,
    CreatePollResponse,
    CreateSearchRequest,
    CurrenciesResponse,
    LocalesResponse,
    MarketsResponse,
    NearestCultureResponse,
    SearchQuery,
    SessionToken,
)


class SkyscannerApiProtocol(Protocol):
    """Port describing interactions with the Skyscanner API."""

    async def create_search(
        self, query: SearchQuery | CreateSearchRequest
    ) -> CreatePollResponse:
        """Create a live search session."""

    async def poll_search(self, session_token: SessionToken) -> CreatePollResponse:
        """Return the current state of a live search."""

    async def list_locales(self) -> LocalesResponse:
        """List supported locales."""

    async def list_currencies(self) -> CurrenciesResponse:
        """List supported currencies."""

    async def list_markets(self, locale: str) -> MarketsResponse:
        """List supported markets for a locale."""

    async def nearest_culture(self, ip_address: str) -> NearestCultureResponse:
        """Guess market, locale and currency for an IP address."""

    async def autosuggest_flights(
        self, request: AutoSuggestFlightsRequest
    ) -> AutoSuggestFlightsResponse:
        """Suggest places for a search term."""
