"""Typed client for the Skyscanner partners API v3."""

from .client import AUTH_HEADER, BASE_URL, ClientConfig, SkyscannerClient, build_url
from .errors import INTERNAL_ERROR_CODE, InternalClientError, SkyscannerError, VendorError
from .pricing import PriceParseError, to_float

__all__ = [
    "AUTH_HEADER",
    "BASE_URL",
    "ClientConfig",
    "INTERNAL_ERROR_CODE",
    "InternalClientError",
    "PriceParseError",
    "SkyscannerClient",
    "SkyscannerError",
    "VendorError",
    "build_url",
    "to_float",
]
