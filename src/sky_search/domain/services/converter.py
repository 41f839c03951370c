"""Conversion utilities for flattening live search results into offers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from skyscanner.models import (
    CreatePollResponse,
    ItineraryResult,
    LocalDatetime,
    PricingOption,
    Results,
    SortingOptions,
)
from skyscanner.pricing import PriceParseError

from ..models import FlightOffer, OfferLeg, OfferSegment

logger = logging.getLogger(__name__)

SortBy = Literal["best", "cheapest", "fastest"]


@dataclass(slots=True)
class ItineraryConverter:
    """Pure conversion helpers to keep service orchestration slim."""

    def convert(self, response: CreatePollResponse, sort: SortBy = "best") -> list[FlightOffer]:
        """Convert search content into offers ordered by the requested criterion."""
        content = response.content
        if content is None or content.results is None:
            return []

        results = content.results
        offers: dict[str, FlightOffer] = {}
        for itinerary_id, itinerary in results.itineraries.items():
            offer = self._build_offer(itinerary_id, itinerary, results)
            if offer is not None:
                offers[itinerary_id] = offer
        return self._order(offers, content.sorting_options, sort)

    def _build_offer(
        self,
        itinerary_id: str,
        itinerary: ItineraryResult,
        results: Results,
    ) -> FlightOffer | None:
        # IDs are the server's contract; itineraries with dangling ones are dropped
        if not itinerary.leg_ids or any(leg_id not in results.legs for leg_id in itinerary.leg_ids):
            return None

        cheapest = self._cheapest_option(itinerary_id, itinerary.pricing_options)
        if cheapest is None:
            return None
        option, price = cheapest

        return FlightOffer(
            itinerary_id=itinerary_id,
            legs=[self._build_leg(leg_id, results) for leg_id in itinerary.leg_ids],
            price=price,
            agents=[self._agent_name(agent_id, results) for agent_id in option.agent_ids],
            deep_link=next((item.deep_link for item in option.items if item.deep_link), ""),
            transfer_type=option.transfer_type,
            is_eco_contender=itinerary.sustainability_data.is_eco_contender,
        )

    def _build_leg(self, leg_id: str, results: Results) -> OfferLeg:
        leg = results.legs[leg_id]
        segments = [
            self._build_segment(segment_id, results)
            for segment_id in leg.segment_ids
            if segment_id in results.segments
        ]
        return OfferLeg(
            origin=self._place_label(leg.origin_place_id, results),
            destination=self._place_label(leg.destination_place_id, results),
            departure=self._format_date(leg.departure_date_time),
            arrival=self._format_date(leg.arrival_date_time),
            duration=leg.duration_in_minutes,
            stop_count=leg.stop_count,
            carriers=[self._carrier_label(cid, results) for cid in leg.marketing_carrier_ids],
            segments=segments,
        )

    def _build_segment(self, segment_id: str, results: Results) -> OfferSegment:
        segment = results.segments[segment_id]
        marketing = segment.marketing_carrier_ids[0] if segment.marketing_carrier_ids else ""
        operating = segment.operating_carrier_ids[0] if segment.operating_carrier_ids else marketing
        return OfferSegment(
            origin=self._place_label(segment.origin_place_id, results),
            destination=self._place_label(segment.destination_place_id, results),
            departure=self._format_date(segment.departure_date_time),
            arrival=self._format_date(segment.arrival_date_time),
            duration=segment.duration_in_minutes,
            flight_number=segment.marketing_flight_number,
            marketing_carrier=self._carrier_label(marketing, results) if marketing else "",
            operating_carrier=self._carrier_label(operating, results) if operating else "",
        )

    @staticmethod
    def _cheapest_option(
        itinerary_id: str, options: list[PricingOption]
    ) -> tuple[PricingOption, float] | None:
        priced: list[tuple[PricingOption, float]] = []
        for option in options:
            try:
                priced.append((option, option.price.to_float()))
            except PriceParseError:
                logger.warning(
                    "skipping pricing option with invalid amount",
                    extra={"itinerary_id": itinerary_id, "amount": option.price.amount},
                )
        if not priced:
            return None
        return min(priced, key=lambda pair: pair[1])

    @staticmethod
    def _order(
        offers: dict[str, FlightOffer],
        sorting: SortingOptions | None,
        sort: SortBy,
    ) -> list[FlightOffer]:
        ranked: list[FlightOffer] = []
        if sorting is not None:
            for item in getattr(sorting, sort):
                offer = offers.pop(item.itinerary_id, None)
                if offer is not None:
                    ranked.append(offer.model_copy(update={"score": item.score}))
        rest = sorted(offers.values(), key=lambda offer: (offer.price, offer.itinerary_id))
        return ranked + rest

    @staticmethod
    def _place_label(place_id: str, results: Results) -> str:
        place = results.places.get(place_id)
        if place is None:
            return place_id
        return place.iata or place.name or place_id

    @staticmethod
    def _carrier_label(carrier_id: str, results: Results) -> str:
        carrier = results.carriers.get(carrier_id)
        if carrier is None:
            return carrier_id
        return carrier.name or carrier.iata or carrier_id

    @staticmethod
    def _agent_name(agent_id: str, results: Results) -> str:
        agent = results.agents.get(agent_id)
        return agent.name if agent is not None and agent.name else agent_id

    @staticmethod
    def _format_date(value: LocalDatetime) -> str:
        try:
            return value.to_datetime().isoformat()
        except ValueError:
            return ""
