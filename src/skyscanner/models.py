"""Pydantic models mirroring the Skyscanner partners API v3 JSON schema."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import (
    AgentType,
    CabinClass,
    PlaceType,
    PriceUnit,
    ResponseAction,
    ResponseStatus,
    TransferType,
)
from .pricing import to_float

SessionToken = str


class SkyscannerModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ErrorResponse(SkyscannerModel):
    """Error envelope, either sent by the API or synthesized by the client."""

    code: int = Field(default=0, strict=True)
    message: str = ""


# Shared value types


class Price(SkyscannerModel):
    amount: str = ""
    unit: PriceUnit = PriceUnit.UNSPECIFIED

    def to_float(self) -> float:
        """Return the price as a decimal value, honouring its unit."""
        return to_float(self.amount, self.unit)


class LocalDatetime(SkyscannerModel):
    """Date and time without a timezone."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_date(cls, value: date) -> LocalDatetime:
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def from_datetime(cls, value: datetime) -> LocalDatetime:
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )

    def to_datetime(self) -> datetime:
        """Naive datetime; raises ValueError for zero or invalid components."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)


# Requests


class PlaceId(SkyscannerModel):
    """Place reference in a query, by IATA code or entity ID."""

    iata: str | None = None
    entity_id: str | None = None
    date: LocalDatetime | None = None


class QueryLeg(SkyscannerModel):
    origin_place_id: PlaceId
    destination_place_id: PlaceId | None = None
    date: LocalDatetime


class SearchQuery(SkyscannerModel):
    """Live search query. Unset optional filters are omitted from the body."""

    market: str = Field(min_length=1)
    locale: str = Field(min_length=1)
    currency: str = Field(min_length=1)
    query_legs: list[QueryLeg] = Field(alias="query_legs", min_length=1)
    adults: int = Field(default=1, ge=1)

    cabin_class: CabinClass | None = None
    children_ages: list[int] | None = None
    included_carriers_ids: list[str] | None = None
    excluded_carriers_ids: list[str] | None = None
    included_agents_ids: list[str] | None = None
    excluded_agents_ids: list[str] | None = None
    include_sustainability_data: bool | None = None
    nearby_airports: bool | None = None


class CreateSearchRequest(SkyscannerModel):
    query: SearchQuery


class PollSearchRequest(SkyscannerModel):
    session_token: SessionToken = Field(min_length=1)


class AutoSuggestQuery(SkyscannerModel):
    market: str = Field(min_length=1)
    locale: str = Field(min_length=1)
    search_term: str = Field(min_length=1)
    included_entity_types: list[PlaceType] | None = None


class AutoSuggestFlightsRequest(SkyscannerModel):
    query: AutoSuggestQuery
    limit: int = Field(default=7, ge=1, le=50)
    is_destination: bool | None = None


# Live search results


class SustainabilityData(SkyscannerModel):
    is_eco_contender: bool = False
    eco_contender_delta: float = 0.0


class LivePricingOptionItemFare(SkyscannerModel):
    segment_id: str = ""
    booking_code: str = ""
    fare_basis_code: str = ""


class LivePricingOptionItem(SkyscannerModel):
    price: Price = Field(default_factory=Price)
    agent_id: str = ""
    deep_link: str = ""
    fares: list[LivePricingOptionItemFare] = Field(default_factory=list)


class PricingOption(SkyscannerModel):
    price: Price = Field(default_factory=Price)
    agent_ids: list[str] = Field(default_factory=list)
    items: list[LivePricingOptionItem] = Field(default_factory=list)
    transfer_type: TransferType = TransferType.UNSPECIFIED


class ItineraryResult(SkyscannerModel):
    pricing_options: list[PricingOption] = Field(default_factory=list)
    leg_ids: list[str] = Field(default_factory=list)
    sustainability_data: SustainabilityData = Field(default_factory=SustainabilityData)


class FlightLeg(SkyscannerModel):
    origin_place_id: str = ""
    destination_place_id: str = ""
    departure_date_time: LocalDatetime = Field(default_factory=LocalDatetime)
    arrival_date_time: LocalDatetime = Field(default_factory=LocalDatetime)
    duration_in_minutes: int = 0
    stop_count: int = 0
    marketing_carrier_ids: list[str] = Field(default_factory=list)
    operating_carrier_ids: list[str] = Field(default_factory=list)
    segment_ids: list[str] = Field(default_factory=list)


class Segment(SkyscannerModel):
    origin_place_id: str = ""
    destination_place_id: str = ""
    departure_date_time: LocalDatetime = Field(default_factory=LocalDatetime)
    arrival_date_time: LocalDatetime = Field(default_factory=LocalDatetime)
    duration_in_minutes: int = 0
    marketing_flight_number: str = ""
    marketing_carrier_ids: list[str] = Field(default_factory=list)
    operating_carrier_ids: list[str] = Field(default_factory=list)


class Place(SkyscannerModel):
    """
    Named location node.

    entity_id is internal to Skyscanner APIs; parent_id points at the
    enclosing place (an airport's city, a city's country). iata is only set
    for airports and cities.
    """

    entity_id: str = ""
    parent_id: str = ""
    name: str = ""
    type: PlaceType = PlaceType.UNSPECIFIED
    iata: str = ""


class Carrier(SkyscannerModel):
    name: str = ""
    alliance_id: str = ""
    image_url: str = ""
    iata: str = ""


class AgentRatingBreakdown(SkyscannerModel):
    customer_service: float = 0.0
    reliable_prices: float = 0.0
    clear_extra_fees: float = 0.0
    ease_of_booking: float = 0.0
    other: float = 0.0


class Agent(SkyscannerModel):
    name: str = ""
    type: AgentType = AgentType.UNSPECIFIED
    image_url: str = ""
    feedback_count: int = 0
    rating: float = 0.0
    rating_breakdown: AgentRatingBreakdown = Field(default_factory=AgentRatingBreakdown)
    is_optimised_for_mobile: bool = False


class Alliance(SkyscannerModel):
    name: str = ""


class Results(SkyscannerModel):
    """Normalized search entities keyed by synthetic IDs."""

    itineraries: dict[str, ItineraryResult] = Field(default_factory=dict)
    legs: dict[str, FlightLeg] = Field(default_factory=dict)
    segments: dict[str, Segment] = Field(default_factory=dict)
    places: dict[str, Place] = Field(default_factory=dict)
    carriers: dict[str, Carrier] = Field(default_factory=dict)
    agents: dict[str, Agent] = Field(default_factory=dict)
    alliances: dict[str, Alliance] = Field(default_factory=dict)


class ItinerarySummary(SkyscannerModel):
    count: int = 0
    min_price: Price = Field(default_factory=Price)


class ItineraryStopTicketStats(SkyscannerModel):
    single_ticket: ItinerarySummary = Field(default_factory=ItinerarySummary)
    multi_ticket_non_npt: ItinerarySummary = Field(default_factory=ItinerarySummary)
    multi_ticket_npt: ItinerarySummary = Field(default_factory=ItinerarySummary)


class ItineraryStopSummaryStats(SkyscannerModel):
    total: ItinerarySummary = Field(default_factory=ItinerarySummary)
    ticket_types: ItineraryStopTicketStats = Field(default_factory=ItineraryStopTicketStats)


class ItineraryStopStats(SkyscannerModel):
    direct: ItineraryStopSummaryStats = Field(default_factory=ItineraryStopSummaryStats)
    one_stop: ItineraryStopSummaryStats = Field(default_factory=ItineraryStopSummaryStats)
    two_plus_stops: ItineraryStopSummaryStats = Field(default_factory=ItineraryStopSummaryStats)


class ItineraryStats(SkyscannerModel):
    min_duration: int = 0
    max_duration: int = 0
    total: ItinerarySummary = Field(default_factory=ItinerarySummary)
    stops: ItineraryStopStats = Field(default_factory=ItineraryStopStats)
    has_change_airport_transfer: bool = False


class Stats(SkyscannerModel):
    itineraries: ItineraryStats = Field(default_factory=ItineraryStats)


class SortingOptionItem(SkyscannerModel):
    score: float = 0.0
    itinerary_id: str = ""


class SortingOptions(SkyscannerModel):
    best: list[SortingOptionItem] = Field(default_factory=list)
    cheapest: list[SortingOptionItem] = Field(default_factory=list)
    fastest: list[SortingOptionItem] = Field(default_factory=list)


class Content(SkyscannerModel):
    results: Results | None = None
    stats: Stats | None = None
    sorting_options: SortingOptions | None = None


class CreatePollResponse(SkyscannerModel):
    """Result of both create and poll: current state of a live search."""

    session_token: SessionToken = ""
    status: ResponseStatus = ResponseStatus.UNSPECIFIED
    action: ResponseAction = ResponseAction.UNSPECIFIED
    content: Content | None = None

    @property
    def is_complete(self) -> bool:
        return self.status is ResponseStatus.COMPLETE


# Culture reference data


class Locale(SkyscannerModel):
    code: str = ""
    name: str = ""


class Currency(SkyscannerModel):
    code: str = ""
    symbol: str = ""
    thousands_separator: str = ""
    decimal_separator: str = ""
    symbol_on_left: bool = False
    space_between_amount_and_symbol: bool = False
    decimal_digits: int = 0


class Market(SkyscannerModel):
    code: str = ""
    name: str = ""
    currency: str = ""


class LocalesResponse(SkyscannerModel):
    status: ResponseStatus = ResponseStatus.UNSPECIFIED
    locales: list[Locale] = Field(default_factory=list)


class CurrenciesResponse(SkyscannerModel):
    status: ResponseStatus = ResponseStatus.UNSPECIFIED
    currencies: list[Currency] = Field(default_factory=list)


class MarketsResponse(SkyscannerModel):
    status: ResponseStatus = ResponseStatus.UNSPECIFIED
    markets: list[Market] = Field(default_factory=list)


class NearestCultureResponse(SkyscannerModel):
    status: ResponseStatus = ResponseStatus.UNSPECIFIED
    market: Market = Field(default_factory=Market)
    locale: Locale = Field(default_factory=Locale)
    currency: Currency = Field(default_factory=Currency)


# Autosuggest


class AutoSuggestPlace(SkyscannerModel):
    entity_id: str = ""
    iata_code: str = ""
    parent_id: str = ""
    name: str = ""
    country_id: str = ""
    country_name: str = ""
    city_name: str = ""
    location: str = ""
    hierarchy: str = ""
    type: PlaceType = PlaceType.UNSPECIFIED
    highlighting: list[list[int]] = Field(default_factory=list)


class AutoSuggestFlightsResponse(SkyscannerModel):
    places: list[AutoSuggestPlace] = Field(default_factory=list)
