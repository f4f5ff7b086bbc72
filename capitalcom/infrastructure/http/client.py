"""HTTP request executor for the Capital.com REST API.

This module centralises HTTP access to the API host. It owns a
:class:`requests.Session`, serialises request bodies to JSON, sends one
request per call (no retries), classifies non-OK responses and decodes OK
responses into pydantic models. Session tokens are not handled here: callers
pass the authentication headers in and refresh their token store from
:attr:`ApiResponse.headers` afterwards.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Sequence, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests import Session
from requests.structures import CaseInsensitiveDict

from capitalcom.infrastructure.observability import (
    get_logger,
    log_context,
    log_exception,
    record_api_request,
    redact_headers,
)

from .errors import (
    HTTPTransportError,
    RequestCreationError,
    RequestPayloadEncodingError,
    ResponsePayloadDecodingError,
    classify_error_response,
)

logger = get_logger(__name__)

HOST_DEMO = "https://demo-api-capital.backend-capital.com"
HOST_LIVE = "https://api-capital.backend-capital.com"
API_PATH_V1 = "/api/v1"

DEFAULT_TIMEOUT_SECONDS = 10.0

ModelT = TypeVar("ModelT", bound=BaseModel)

HeaderMapping = Mapping[str, str | Sequence[str]]


@dataclass(frozen=True)
class ApiResponse(Generic[ModelT]):
    """Decoded payload plus the response metadata callers need."""

    payload: ModelT
    status_code: int
    headers: Mapping[str, str]


def encode_body(body: BaseModel | Mapping[str, Any] | None) -> bytes | None:
    """Serialise a request body to JSON bytes.

    Pydantic models are dumped with their wire aliases and without unset
    optional fields.

    Raises:
        RequestPayloadEncodingError: If the body cannot be represented as JSON.
    """
    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            data: Any = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            data = body
        return json.dumps(data).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RequestPayloadEncodingError(exc) from exc


def _endpoint_label(path: str) -> str:
    head = path.split("?", 1)[0].strip("/").split("/", 1)[0]
    return f"/{head}"


class CapitalHttpClient:
    """Sends single JSON requests to ``host + api_path`` and decodes replies."""

    def __init__(
        self,
        *,
        host: str = HOST_DEMO,
        api_path: str = API_PATH_V1,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Session | None = None,
    ) -> None:
        self.host = host.rstrip("/")
        self.api_path = api_path
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.host}{self.api_path}{path}"

    def close(self) -> None:
        self.session.close()

    # -------------------- request helpers --------------------
    def _prepare_headers(self, extra: HeaderMapping | None) -> dict[str, str]:
        """Overlay caller headers on the defaults.

        A string value replaces the default for that name. A sequence of
        values is sent as one comma-joined field, in the given order.
        """
        from capitalcom import __version__

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"capitalcom-python/{__version__}",
        }
        for name, value in (extra or {}).items():
            if isinstance(value, str):
                headers[name] = value
            else:
                headers[name] = ", ".join(value)
        return headers

    def _prepare_request(
        self,
        method: str,
        path: str,
        data: bytes | None,
        params: Mapping[str, str] | None,
        headers: HeaderMapping | None,
    ) -> requests.PreparedRequest:
        request = requests.Request(
            method=method.upper(),
            url=self.url_for(path),
            headers=self._prepare_headers(headers),
            params=dict(params) if params else None,
            data=data,
        )
        try:
            return self.session.prepare_request(request)
        except (requests.RequestException, ValueError) as exc:
            raise RequestCreationError(exc) from exc

    def execute(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        *,
        body: BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
        headers: HeaderMapping | None = None,
        timeout: float | None = None,
    ) -> ApiResponse[ModelT]:
        """Send one request and decode a 200 response into ``response_model``.

        Args:
            method: HTTP method.
            path: Resource path below the API prefix, e.g. ``"/positions"``.
            response_model: Pydantic model the OK body must match.
            body: Optional JSON body (pydantic model or mapping).
            params: Optional query parameters.
            headers: Extra headers; they override the defaults. A sequence
                value sends every item in one comma-joined field.
            timeout: Seconds to wait for connect and read; defaults to the
                client timeout.

        Raises:
            RequestPayloadEncodingError: The body could not be serialised.
            RequestCreationError: The request could not be built.
            HTTPTransportError: No response was received (including timeouts).
            ResponsePayloadDecodingError: A 200 body, or a 4xx error body, did
                not decode.
            APIError: Any other non-OK status.
        """
        data = encode_body(body)
        prepared = self._prepare_request(method, path, data, params, headers)
        effective_timeout = self.timeout if timeout is None else timeout
        endpoint = _endpoint_label(path)

        with log_context(method=prepared.method, path=path):
            logger.debug(
                "sending a request to %s headers=%s",
                prepared.url,
                redact_headers(dict(prepared.headers)),
            )
            started = time.perf_counter()
            try:
                settings = self.session.merge_environment_settings(
                    prepared.url, {}, None, None, None
                )
                response = self.session.send(
                    prepared, timeout=effective_timeout, **settings
                )
            except requests.RequestException as exc:
                record_api_request(
                    endpoint, prepared.method or method, 0, time.perf_counter() - started
                )
                error = HTTPTransportError(exc)
                log_exception(logger, "HTTP request failed", error, level=logging.WARNING)
                raise error from exc

            with response:
                duration = time.perf_counter() - started
                record_api_request(
                    endpoint, prepared.method or method, response.status_code, duration
                )
                logger.debug(
                    "received a response status=%d in %.3fs",
                    response.status_code,
                    duration,
                )

                if response.status_code != requests.codes.ok:
                    error = classify_error_response(
                        response.status_code, response.content
                    )
                    log_exception(
                        logger,
                        "API request unsuccessful",
                        error,
                        level=logging.WARNING,
                        status=response.status_code,
                    )
                    raise error

                try:
                    payload = response_model.model_validate_json(response.content)
                except ValidationError as exc:
                    error = ResponsePayloadDecodingError(exc)
                    log_exception(
                        logger,
                        f"could not decode {response_model.__name__}",
                        error,
                        level=logging.WARNING,
                    )
                    raise error from exc

                return ApiResponse(
                    payload=payload,
                    status_code=response.status_code,
                    headers=CaseInsensitiveDict(response.headers),
                )

    # -------------------- convenience --------------------
    def get(
        self, path: str, response_model: type[ModelT], **kwargs: Any
    ) -> ApiResponse[ModelT]:
        return self.execute("GET", path, response_model, **kwargs)

    def post(
        self, path: str, response_model: type[ModelT], **kwargs: Any
    ) -> ApiResponse[ModelT]:
        return self.execute("POST", path, response_model, **kwargs)

    def put(
        self, path: str, response_model: type[ModelT], **kwargs: Any
    ) -> ApiResponse[ModelT]:
        return self.execute("PUT", path, response_model, **kwargs)

    def delete(
        self, path: str, response_model: type[ModelT], **kwargs: Any
    ) -> ApiResponse[ModelT]:
        return self.execute("DELETE", path, response_model, **kwargs)


__all__ = [
    "API_PATH_V1",
    "ApiResponse",
    "CapitalHttpClient",
    "DEFAULT_TIMEOUT_SECONDS",
    "HOST_DEMO",
    "HOST_LIVE",
    "encode_body",
]
