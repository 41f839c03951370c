"""Error types raised by the Skyscanner client."""

from __future__ import annotations

from http import HTTPStatus

from .models import ErrorResponse

INTERNAL_ERROR_CODE = int(HTTPStatus.INTERNAL_SERVER_ERROR)


class SkyscannerError(Exception):
    """Base error carrying a numeric code and a message."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    @property
    def envelope(self) -> ErrorResponse:
        return ErrorResponse(code=self.code, message=self.message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InternalClientError(SkyscannerError):
    """
    The call never reached the API or its answer could not be used.

    Raised for request serialization, transport and timeout failures, and for
    success responses whose body does not decode.
    """

    def __init__(self, message: str) -> None:
        super().__init__(INTERNAL_ERROR_CODE, message)


class VendorError(SkyscannerError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, code: int, message: str, status_code: int) -> None:
        super().__init__(code, message)
        self.status_code = status_code

    @classmethod
    def from_body(cls, status_code: int, body: bytes) -> VendorError:
        """
        Build the error from a response body.

        A structured `{code, message}` body is propagated verbatim; anything
        else keeps the HTTP status as code and the raw text as message.
        """
        try:
            envelope = ErrorResponse.model_validate_json(body)
        except ValueError:
            return cls(status_code, body.decode("utf-8", errors="replace"), status_code)
        return cls(envelope.code, envelope.message, status_code)
