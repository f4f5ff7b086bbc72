from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter

from capitalcom import CapitalClient
from capitalcom.infrastructure.http import API_PATH_V1, HOST_DEMO
from capitalcom.infrastructure.observability import get_registry

TOKEN_HEADERS = {"X-SECURITY-TOKEN": "KeySecurityToken", "CST": "CST"}


class TrackedResponse(Response):
    def __init__(self) -> None:
        super().__init__()
        self.was_closed = False

    def close(self) -> None:
        self.was_closed = True
        super().close()


class FakeApi(BaseAdapter):
    """Transport adapter answering from a route table instead of the network."""

    def __init__(self) -> None:
        super().__init__()
        self.routes: dict[tuple[str, str], list[tuple[int, Any, dict, Exception | None]]] = {}
        self.requests: list[PreparedRequest] = []
        self.timeouts: list[Any] = []
        self.responses: list[TrackedResponse] = []

    def add(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        status: int = 200,
        headers: dict[str, str] | None = None,
        raises: Exception | None = None,
    ) -> None:
        """Queue a reply; the last queued reply for a route is repeated."""
        key = (method.upper(), API_PATH_V1 + path)
        self.routes.setdefault(key, []).append((status, body, dict(headers or {}), raises))

    def send(
        self,
        request: PreparedRequest,
        stream: bool = False,
        timeout: Any = None,
        verify: Any = True,
        cert: Any = None,
        proxies: Any = None,
    ) -> Response:
        self.requests.append(request)
        self.timeouts.append(timeout)
        key = (request.method or "", urlsplit(request.url or "").path)
        queue = self.routes.get(key)
        if not queue:
            status, body, headers, raises = 404, {"errorCode": "error.not-found"}, {}, None
        elif len(queue) > 1:
            status, body, headers, raises = queue.pop(0)
        else:
            status, body, headers, raises = queue[0]
        if raises is not None:
            raise raises

        response = TrackedResponse()
        if isinstance(body, bytes):
            response._content = body
        elif body is None:
            response._content = b""
        else:
            response._content = json.dumps(body).encode("utf-8")
        response._content_consumed = True
        response.status_code = status
        response.reason = "OK" if status == 200 else "Error"
        response.headers.update(headers)
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        self.responses.append(response)
        return response

    def close(self) -> None:
        pass

    # helpers for assertions
    @property
    def last(self) -> PreparedRequest:
        return self.requests[-1]

    def last_json(self) -> Any:
        body = self.last.body
        if body is None:
            return None
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return json.loads(body)

    def last_query(self) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self.last.url or "").query)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def http_session(fake_api: FakeApi) -> requests.Session:
    session = requests.Session()
    session.trust_env = False
    session.mount("https://", fake_api)
    return session


@pytest.fixture
def client(http_session: requests.Session) -> CapitalClient:
    return CapitalClient(
        "apikey",
        identifier="client@example.com",
        password="password",
        host=HOST_DEMO,
        session=http_session,
    )


@pytest.fixture
def logged_in(client: CapitalClient, fake_api: FakeApi) -> CapitalClient:
    fake_api.add("POST", "/session", {"currentAccountId": "acc-1"}, headers=TOKEN_HEADERS)
    client.login()
    return client


@pytest.fixture(autouse=True)
def reset_metrics():
    get_registry().reset()
    yield
    get_registry().reset()
