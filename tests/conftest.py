"""Shared pytest fixtures for nutanix-client test suites."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from pathlib import Path
import sys
from typing import Any

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from nutanix_client import Credentials  # noqa: E402
from nutanix_client import NutanixClient  # noqa: E402

ENDPOINT = "https://prism.example.com"
BASE_URL = "https://prism.example.com:9440/api/nutanix/v3"


def build_response(
    status_code: int,
    body: Any = None,
    *,
    url: str = f"{BASE_URL}/vms",
) -> requests.Response:
    """Build a real ``requests.Response`` backed by an in-memory body."""
    if body is None:
        raw = b""
    elif isinstance(body, bytes):
        raw = body
    else:
        raw = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.raw = io.BytesIO(raw)
    return response


class SessionStub:
    """Records every dispatched request and answers from a list or a callable."""

    def __init__(self, responder: list[requests.Response] | Callable[[dict[str, Any]], requests.Response]) -> None:
        self._responder = responder
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        call = {"method": method, "url": url, **kwargs}
        data = kwargs.get("data")
        headers = kwargs.get("headers") or {}
        if isinstance(data, bytes) and headers.get("Content-Type") == "application/json":
            call["json"] = json.loads(data)
        self.calls.append(call)

        if callable(self._responder):
            return self._responder(call)
        return self._responder.pop(0)


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def make_client() -> Callable[..., tuple[NutanixClient, SessionStub]]:
    """Return a factory building a client wired to a recording session stub."""

    def factory(responder: Any, **overrides: Any) -> tuple[NutanixClient, SessionStub]:
        session = SessionStub(responder)
        client = NutanixClient(
            endpoint=ENDPOINT,
            credentials=Credentials(username="admin", password="top-secret"),
            session=session,  # type: ignore[arg-type]
            **overrides,
        )
        return client, session

    return factory
