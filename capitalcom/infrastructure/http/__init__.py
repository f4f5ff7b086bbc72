"""HTTP adapters for the Capital.com API.

This package provides the request executor, the session token store and the
error taxonomy shared by every resource service.
"""

from .client import (
    API_PATH_V1,
    DEFAULT_TIMEOUT_SECONDS,
    HOST_DEMO,
    HOST_LIVE,
    ApiResponse,
    CapitalHttpClient,
    encode_body,
)
from .errors import (
    APIError,
    CapitalComError,
    HTTPTransportError,
    PasswordEncodingError,
    RequestCreationError,
    RequestPayloadEncodingError,
    ResponsePayloadDecodingError,
    classify_error_response,
)
from .tokens import (
    HEADER_API_KEY,
    HEADER_CST,
    HEADER_SECURITY_TOKEN,
    SessionTokens,
    TokenPair,
)

__all__ = [
    "API_PATH_V1",
    "APIError",
    "ApiResponse",
    "CapitalComError",
    "CapitalHttpClient",
    "DEFAULT_TIMEOUT_SECONDS",
    "HEADER_API_KEY",
    "HEADER_CST",
    "HEADER_SECURITY_TOKEN",
    "HOST_DEMO",
    "HOST_LIVE",
    "HTTPTransportError",
    "PasswordEncodingError",
    "RequestCreationError",
    "RequestPayloadEncodingError",
    "ResponsePayloadDecodingError",
    "SessionTokens",
    "TokenPair",
    "classify_error_response",
    "encode_body",
]
