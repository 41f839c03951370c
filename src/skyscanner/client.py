"""HTTP client for the Skyscanner partners API v3."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from .errors import InternalClientError, VendorError
from .models import (
    AutoSuggestFlightsRequest,
    AutoSuggestFlightsResponse,
    CreatePollResponse,
    CreateSearchRequest,
    CurrenciesResponse,
    LocalesResponse,
    MarketsResponse,
    NearestCultureResponse,
    PollSearchRequest,
    SearchQuery,
    SessionToken,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://partners.api.skyscanner.net/apiservices/v3"
AUTH_HEADER = "x-api-key"
DEFAULT_QUERY_TIMEOUT = 15.0

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ClientConfig(BaseModel):
    """Static client configuration, read-only after construction."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    query_timeout: float = Field(default=DEFAULT_QUERY_TIMEOUT, gt=0)
    base_url: str = BASE_URL


def build_url(base: str, path: str) -> str:
    """Join base URL and path with exactly one slash between them."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class SkyscannerClient:
    """
    Typed client for the Skyscanner flights and culture endpoints.

    Every operation returns its typed response or raises a SkyscannerError:
    VendorError when the API rejected the call, InternalClientError when the
    call could not be built, sent, or decoded. Nothing is retried.

    Each call opens and closes its own connection and is bounded as a whole
    by `config.query_timeout`.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            config: API key, timeout and base URL
            transport: Optional httpx transport, used by tests to stub the network
        """
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def create_search(
        self, query: SearchQuery | CreateSearchRequest
    ) -> CreatePollResponse:
        """Create a live search session and return its first results."""
        request = query if isinstance(query, CreateSearchRequest) else CreateSearchRequest(query=query)
        return await self._execute(
            "POST",
            "/flights/live/search/create",
            CreatePollResponse,
            payload=request,
        )

    async def poll_search(
        self, session_token: SessionToken | PollSearchRequest
    ) -> CreatePollResponse:
        """Return the current state of the live search behind a session token."""
        if isinstance(session_token, PollSearchRequest):
            session_token = session_token.session_token
        logger.debug("polling search", extra={"session_token": session_token})
        return await self._execute(
            "POST",
            f"/flights/live/search/poll/{session_token}",
            CreatePollResponse,
        )

    async def list_locales(self) -> LocalesResponse:
        """Locales that content can be translated to."""
        return await self._execute("GET", "/culture/locales", LocalesResponse)

    async def list_currencies(self) -> CurrenciesResponse:
        """Supported currencies and their formatting rules."""
        return await self._execute("GET", "/culture/currencies", CurrenciesResponse)

    async def list_markets(self, locale: str) -> MarketsResponse:
        """Market countries, with names translated to the given locale."""
        return await self._execute("GET", f"/culture/markets/{locale}", MarketsResponse)

    async def nearest_culture(self, ip_address: str) -> NearestCultureResponse:
        """Best-guess market, locale and currency for an IP address."""
        return await self._execute(
            "GET",
            "/culture/nearestculture",
            NearestCultureResponse,
            params={"ipAddress": ip_address},
        )

    async def autosuggest_flights(
        self, request: AutoSuggestFlightsRequest
    ) -> AutoSuggestFlightsResponse:
        """Places matching a search term, ranked by relevance."""
        return await self._execute(
            "POST",
            "/autosuggest/flights",
            AutoSuggestFlightsResponse,
            payload=request,
        )

    async def _execute(
        self,
        method: str,
        path: str,
        response_model: type[ResponseT],
        payload: BaseModel | None = None,
        params: dict[str, Any] | None = None,
    ) -> ResponseT:
        """Serialize, send, check status and decode one request."""
        content = self._serialize(payload)
        url = build_url(self._config.base_url, path)
        logger.debug("skyscanner request", extra={"method": method, "url": url})

        try:
            async with asyncio.timeout(self._config.query_timeout):
                async with self._open() as http:
                    request = http.build_request(method, url, content=content, params=params)
                    response = await http.send(request, stream=True)
                    try:
                        return await self._read_response(response, response_model)
                    finally:
                        await response.aclose()
        except VendorError as e:
            logger.warning(
                "skyscanner request rejected",
                extra={"method": method, "url": url, "code": e.code, "error": e.message},
            )
            raise
        except InternalClientError as e:
            logger.error(
                "skyscanner response unusable",
                extra={"method": method, "url": url, "code": e.code, "error": e.message},
            )
            raise
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            # token, locale or API key that cannot be put into a URL or header
            logger.error(
                "skyscanner request could not be built",
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise InternalClientError(f"request doing error: {e}") from e
        except TimeoutError as e:
            logger.error("skyscanner request timed out", extra={"method": method, "url": url})
            raise InternalClientError(
                f"request doing error: timed out after {self._config.query_timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "skyscanner transport error",
                exc_info=True,
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise InternalClientError(f"request doing error: {e}") from e

    def _open(self) -> httpx.AsyncClient:
        # Fresh client per call; the whole-call timeout replaces httpx's per-phase ones.
        return httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                AUTH_HEADER: self._config.api_key,
                "Connection": "close",
            },
            timeout=None,
            transport=self._transport,
        )

    @staticmethod
    def _serialize(payload: BaseModel | None) -> bytes:
        if payload is None:
            return b""
        try:
            return payload.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.error("request marshalling failed", extra={"error": str(e)})
            raise InternalClientError(f"request marshalling error: {e}") from e

    @staticmethod
    async def _read_response(
        response: httpx.Response, response_model: type[ResponseT]
    ) -> ResponseT:
        if response.status_code != httpx.codes.OK:
            try:
                body = await response.aread()
            except httpx.HTTPError as e:
                raise VendorError(
                    response.status_code,
                    f"response reading error: {e}",
                    response.status_code,
                ) from e
            raise VendorError.from_body(response.status_code, body)

        try:
            body = await response.aread()
            return response_model.model_validate_json(body)
        except (httpx.HTTPError, ValueError) as e:
            raise InternalClientError(f"response decoding error: {e}") from e
