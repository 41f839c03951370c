"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from copy import deepcopy
from typing import Any

import httpx
import pytest

from skyscanner import ClientConfig, SkyscannerClient

BASE_SEARCH_RESPONSE: dict[str, Any] = {
    "sessionToken": "token-1",
    "status": "RESULT_STATUS_INCOMPLETE",
    "action": "RESULT_ACTION_REPLACED",
    "content": {
        "results": {
            "itineraries": {
                "it-1": {
                    "pricingOptions": [
                        {
                            "price": {"amount": "125500", "unit": "PRICE_UNIT_MILLI"},
                            "agentIds": ["agent-1"],
                            "items": [
                                {
                                    "price": {"amount": "125500", "unit": "PRICE_UNIT_MILLI"},
                                    "agentId": "agent-1",
                                    "deepLink": "https://example.test/book/1",
                                    "fares": [
                                        {
                                            "segmentId": "seg-1",
                                            "bookingCode": "Y",
                                            "fareBasisCode": "YOW",
                                        }
                                    ],
                                }
                            ],
                            "transferType": "TRANSFER_TYPE_MANAGED",
                        },
                        {
                            "price": {"amount": "13000", "unit": "PRICE_UNIT_CENTI"},
                            "agentIds": ["agent-2"],
                            "items": [],
                            "transferType": "TRANSFER_TYPE_MANAGED",
                        },
                    ],
                    "legIds": ["leg-1"],
                    "sustainabilityData": {"isEcoContender": True, "ecoContenderDelta": 12.5},
                },
                "it-2": {
                    "pricingOptions": [
                        {
                            "price": {"amount": "99", "unit": "PRICE_UNIT_WHOLE"},
                            "agentIds": ["agent-2"],
                            "items": [],
                            "transferType": "TRANSFER_TYPE_SELF_TRANSFER",
                        }
                    ],
                    "legIds": ["leg-1"],
                    "sustainabilityData": {"isEcoContender": False, "ecoContenderDelta": 0},
                },
            },
            "legs": {
                "leg-1": {
                    "originPlaceId": "95565050",
                    "destinationPlaceId": "95673529",
                    "departureDateTime": {
                        "year": 2025, "month": 12, "day": 17, "hour": 15, "minute": 30, "second": 0,
                    },
                    "arrivalDateTime": {
                        "year": 2025, "month": 12, "day": 17, "hour": 18, "minute": 45, "second": 0,
                    },
                    "durationInMinutes": 135,
                    "stopCount": 0,
                    "marketingCarrierIds": ["carrier-1"],
                    "operatingCarrierIds": ["carrier-1"],
                    "segmentIds": ["seg-1"],
                }
            },
            "segments": {
                "seg-1": {
                    "originPlaceId": "95565050",
                    "destinationPlaceId": "95673529",
                    "departureDateTime": {
                        "year": 2025, "month": 12, "day": 17, "hour": 15, "minute": 30, "second": 0,
                    },
                    "arrivalDateTime": {
                        "year": 2025, "month": 12, "day": 17, "hour": 18, "minute": 45, "second": 0,
                    },
                    "durationInMinutes": 135,
                    "marketingFlightNumber": "1234",
                    "marketingCarrierIds": ["carrier-1"],
                    "operatingCarrierIds": ["carrier-1"],
                }
            },
            "places": {
                "95565050": {
                    "entityId": "95565050",
                    "parentId": "27544008",
                    "name": "London Heathrow",
                    "type": "PLACE_TYPE_AIRPORT",
                    "iata": "LHR",
                },
                "95673529": {
                    "entityId": "95673529",
                    "parentId": "27539733",
                    "name": "Barcelona",
                    "type": "PLACE_TYPE_AIRPORT",
                    "iata": "BCN",
                },
            },
            "carriers": {
                "carrier-1": {
                    "name": "Vueling",
                    "allianceId": "",
                    "imageUrl": "https://example.test/vy.png",
                    "iata": "VY",
                }
            },
            "agents": {
                "agent-1": {
                    "name": "Example Travel",
                    "type": "AGENT_TYPE_TRAVEL_AGENT",
                    "imageUrl": "",
                    "feedbackCount": 10,
                    "rating": 4.5,
                    "ratingBreakdown": {"customerService": 4.1},
                    "isOptimisedForMobile": True,
                },
                "agent-2": {"name": "Vueling", "type": "AGENT_TYPE_AIRLINE"},
            },
            "alliances": {},
        },
        "stats": {
            "itineraries": {
                "minDuration": 135,
                "maxDuration": 135,
                "total": {"count": 2, "minPrice": {"amount": "99", "unit": "PRICE_UNIT_WHOLE"}},
                "hasChangeAirportTransfer": False,
            }
        },
        "sortingOptions": {
            "best": [{"score": 0.9, "itineraryId": "it-1"}, {"score": 0.6, "itineraryId": "it-2"}],
            "cheapest": [{"score": 1.0, "itineraryId": "it-2"}],
            "fastest": [],
        },
    },
}


@pytest.fixture
def search_response_builder() -> Callable[[], dict[str, Any]]:
    """Return a factory that produces independent copies of the sample search response."""

    def _builder() -> dict[str, Any]:
        return deepcopy(BASE_SEARCH_RESPONSE)

    return _builder


@pytest.fixture
def client_factory() -> Callable[..., tuple[SkyscannerClient, list[httpx.Request]]]:
    """
    Return a factory building a client whose network is a handler function.

    The factory returns the client and the list of requests it sent.
    """

    def _factory(
        handler: Callable[[httpx.Request], Any],
        query_timeout: float = 15.0,
        api_key: str = "secret-key",
    ) -> tuple[SkyscannerClient, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        async def _recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        config = ClientConfig(api_key=api_key, query_timeout=query_timeout)
        client = SkyscannerClient(config, transport=httpx.MockTransport(_recording_handler))
        return client, sent

    return _factory
