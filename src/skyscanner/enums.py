"""Vendor enumerations used across Skyscanner requests and results."""

from __future__ import annotations

from enum import StrEnum


class _VendorEnum(StrEnum):
    """Enum that decodes unknown wire values to its UNSPECIFIED member."""

    @classmethod
    def _missing_(cls, value: object) -> _VendorEnum | None:
        return cls.__members__.get("UNSPECIFIED")


class CabinClass(_VendorEnum):
    UNSPECIFIED = "CABIN_CLASS_UNSPECIFIED"
    ECONOMY = "CABIN_CLASS_ECONOMY"
    PREMIUM_ECONOMY = "CABIN_CLASS_PREMIUM_ECONOMY"
    BUSINESS = "CABIN_CLASS_BUSINESS"
    FIRST = "CABIN_CLASS_FIRST"


class ResponseStatus(_VendorEnum):
    UNSPECIFIED = "RESULT_STATUS_UNSPECIFIED"
    COMPLETE = "RESULT_STATUS_COMPLETE"
    INCOMPLETE = "RESULT_STATUS_INCOMPLETE"
    FAILED = "RESULT_STATUS_FAILED"


class ResponseAction(_VendorEnum):
    UNSPECIFIED = "RESULT_ACTION_UNSPECIFIED"
    REPLACED = "RESULT_ACTION_REPLACED"
    NOT_MODIFIED = "RESULT_ACTION_NOT_MODIFIED"
    OMITTED = "RESULT_ACTION_OMITTED"


class PriceUnit(_VendorEnum):
    """Scale of a price amount relative to the whole currency unit."""

    UNSPECIFIED = "PRICE_UNIT_UNSPECIFIED"
    WHOLE = "PRICE_UNIT_WHOLE"  # 1, e.g. a whole pound or euro
    CENTI = "PRICE_UNIT_CENTI"  # 100, e.g. cents
    MILLI = "PRICE_UNIT_MILLI"  # 1000
    MICRO = "PRICE_UNIT_MICRO"  # 1000000


class TransferType(_VendorEnum):
    """
    How connections between legs are protected.

    MANAGED: protected transfer managed by the agent, missed connections are
    rebooked at no extra cost.
    SELF_TRANSFER: unprotected, travellers hold several booking references.
    PROTECTED_SELF_TRANSFER: self transfer protected by the travel agent
    rather than the airline.
    """

    UNSPECIFIED = "TRANSFER_TYPE_UNSPECIFIED"
    MANAGED = "TRANSFER_TYPE_MANAGED"
    SELF_TRANSFER = "TRANSFER_TYPE_SELF_TRANSFER"
    # TODO: confirm the wire value against the partners API reference;
    # it currently shares the UNSPECIFIED literal and is an alias of it.
    PROTECTED_SELF_TRANSFER = "TRANSFER_TYPE_UNSPECIFIED"


class PlaceType(_VendorEnum):
    UNSPECIFIED = "PLACE_TYPE_UNSPECIFIED"
    AIRPORT = "PLACE_TYPE_AIRPORT"
    CITY = "PLACE_TYPE_CITY"
    COUNTRY = "PLACE_TYPE_COUNTRY"
    CONTINENT = "PLACE_TYPE_CONTINENT"


class AgentType(_VendorEnum):
    UNSPECIFIED = "AGENT_TYPE_UNSPECIFIED"
    TRAVEL_AGENT = "AGENT_TYPE_TRAVEL_AGENT"
    AIRLINE = "AGENT_TYPE_AIRLINE"
