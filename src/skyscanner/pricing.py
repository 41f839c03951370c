"""Price amount normalization."""

from __future__ import annotations

import re

from .enums import PriceUnit

_AMOUNT_RE = re.compile(r"[+-]?[0-9]+")

_UNIT_SCALE: dict[str, int] = {
    PriceUnit.CENTI: 100,
    PriceUnit.MILLI: 1_000,
    PriceUnit.MICRO: 1_000_000,
}


class PriceParseError(ValueError):
    """Raised when a price amount is not an integer string."""


def scale_factor(unit: PriceUnit | str | None) -> int:
    """Return the divisor for a price unit; unknown units count as whole."""
    if unit is None:
        return 1
    return _UNIT_SCALE.get(unit, 1)


def to_float(amount: str, unit: PriceUnit | str | None = PriceUnit.WHOLE) -> float:
    """
    Convert a vendor price amount into a decimal value.

    Args:
        amount: Integer amount as sent by the API, e.g. "123450"
        unit: Scale of the amount (whole, centi, milli, micro)

    Returns:
        amount / scale factor, or 0.0 for an empty amount

    Raises:
        PriceParseError: amount is not an integer string
    """
    if amount == "":
        return 0.0
    if not _AMOUNT_RE.fullmatch(amount):
        raise PriceParseError(f"invalid price amount: {amount!r}")
    return int(amount) / scale_factor(unit)
