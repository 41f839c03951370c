"""Map Skyscanner client errors onto gateway HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from skyscanner import InternalClientError, VendorError

logger = logging.getLogger(__name__)


async def vendor_error_handler(request: Request, exc: VendorError) -> JSONResponse:
    """Relay the vendor's error status and envelope unchanged."""
    logger.warning(
        "upstream rejected request",
        extra={"path": request.url.path, "status_code": exc.status_code, "code": exc.code},
    )
    # non-200 successes and redirects are not errors a client can act on
    status_code = exc.status_code if exc.status_code >= 400 else status.HTTP_502_BAD_GATEWAY
    return JSONResponse(status_code=status_code, content=exc.envelope.model_dump())


async def internal_error_handler(request: Request, exc: InternalClientError) -> JSONResponse:
    logger.error(
        "upstream call failed",
        extra={"path": request.url.path, "error": exc.message},
    )
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=exc.envelope.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VendorError, vendor_error_handler)
    app.add_exception_handler(InternalClientError, internal_error_handler)
