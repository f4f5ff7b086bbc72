"""Error taxonomy for the Capital.com request pipeline.

Every failure surfaced by the client is a :class:`CapitalComError`. The
subclasses identify the stage that failed; each keeps the underlying cause
(also chained through ``__cause__``) and renders as
``"<description>: <cause>"``. Nothing here is retried: the caller decides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError


class CapitalComError(Exception):
    """Base class for all client errors."""

    description = "capital.com client error"

    def __init__(self, cause: BaseException | str | None = None) -> None:
        self.cause = cause if isinstance(cause, BaseException) else None
        message = self.description
        if cause is not None and str(cause):
            message = f"{message}: {cause}"
        super().__init__(message)
        if self.cause is not None:
            self.__cause__ = self.cause


class RequestPayloadEncodingError(CapitalComError):
    """The request body could not be serialized to JSON."""

    description = "failed to encode request payload"


class RequestCreationError(CapitalComError):
    """The HTTP request could not be built (bad URL, header or method)."""

    description = "failed to create an HTTP request"


class HTTPTransportError(CapitalComError):
    """The request was sent but no response arrived (network, timeout)."""

    description = "HTTP request error"


class ResponsePayloadDecodingError(CapitalComError):
    """A response body did not match the expected shape."""

    description = "failed to decode response payload"


class PasswordEncodingError(CapitalComError):
    """The login password could not be encrypted with the server key."""

    description = "failed to encode password"


class PublicKeyTypeError(TypeError):
    """The server-issued key parsed fine but is not an RSA public key."""


class APIError(CapitalComError):
    """The API answered with a non-OK status."""

    def __init__(self, status_code: int, error_code: str = "") -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.cause = None
        Exception.__init__(
            self,
            f"API returned an error, statusCode: {status_code}, errorCode: {error_code}",
        )


class ErrorResponsePayload(BaseModel):
    """The small envelope 4xx responses carry."""

    error_code: str | None = Field(default="", alias="errorCode")


def classify_error_response(status_code: int, body: bytes | str) -> CapitalComError:
    """Map a non-OK response to the matching error.

    Only client errors (4xx) are guaranteed to carry a JSON body with an
    ``errorCode``; anything else gets an :class:`APIError` with an empty code.
    A 4xx body that cannot be decoded yields a
    :class:`ResponsePayloadDecodingError` instead of an :class:`APIError`.
    """
    if status_code < 400 or status_code >= 500:
        return APIError(status_code, "")

    try:
        envelope = ErrorResponsePayload.model_validate_json(body)
    except ValidationError as exc:
        return ResponsePayloadDecodingError(exc)

    return APIError(status_code, envelope.error_code or "")


__all__ = [
    "APIError",
    "CapitalComError",
    "ErrorResponsePayload",
    "HTTPTransportError",
    "PasswordEncodingError",
    "PublicKeyTypeError",
    "RequestCreationError",
    "RequestPayloadEncodingError",
    "ResponsePayloadDecodingError",
    "classify_error_response",
]
