"""Flattened flight offer views served by the gateway."""

from __future__ import annotations

from pydantic import BaseModel

from skyscanner.enums import ResponseStatus, TransferType


class OfferSegment(BaseModel):
    origin: str
    destination: str
    departure: str
    arrival: str
    duration: int
    flight_number: str
    marketing_carrier: str
    operating_carrier: str


class OfferLeg(BaseModel):
    origin: str
    destination: str
    departure: str
    arrival: str
    duration: int
    stop_count: int
    carriers: list[str]
    segments: list[OfferSegment]


class FlightOffer(BaseModel):
    itinerary_id: str
    legs: list[OfferLeg]
    price: float
    agents: list[str]
    deep_link: str
    transfer_type: TransferType
    is_eco_contender: bool
    score: float | None = None


class OffersResponse(BaseModel):
    session_token: str
    status: ResponseStatus
    complete: bool
    offers: list[FlightOffer]
