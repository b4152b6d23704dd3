"""Request construction against the primary or a cluster-scoped endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO
from typing import Any
from urllib.parse import quote
from urllib.parse import urljoin

from pydantic import BaseModel
from requests.auth import HTTPBasicAuth

from nutanix_client.core.config import Credentials
from nutanix_client.core.errors import NutanixRequestBuildError

logger = logging.getLogger(__name__)

MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_UPLOAD = "application/octet-stream"


@dataclass(frozen=True)
class UploadFile:
    """Raw payload streamed as-is instead of being JSON encoded."""

    body: bytes | IO[bytes]
    content_type: str = MEDIA_TYPE_UPLOAD


@dataclass(frozen=True)
class VersionedRequest:
    """A fully built request, ready for dispatch."""

    method: str
    url: str
    headers: Mapping[str, str]
    body: bytes | IO[bytes] | None
    auth: HTTPBasicAuth


def format_path(template: str, *args: str) -> str:
    """Substitute URL-quoted path segments into a ``%s`` path template."""
    expected = template.count("%s")
    if expected != len(args):
        raise NutanixRequestBuildError(
            f"Path template {template!r} expects {expected} argument(s), got {len(args)}",
        )
    segments: list[str] = []
    for arg in args:
        if not isinstance(arg, str) or not arg:
            raise NutanixRequestBuildError(f"Invalid path argument {arg!r} for {template!r}")
        segments.append(quote(arg, safe=""))
    return template % tuple(segments)


def encode_json_body(body: Any) -> bytes:
    """Serialize a request body as JSON bytes."""
    try:
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = body
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise NutanixRequestBuildError("Request body could not be encoded as JSON") from exc


class RequestBuilder:
    """Compose versioned URLs and attach auth, user agent and content headers."""

    def __init__(
        self,
        *,
        base_url: str,
        port: int,
        credentials: Credentials,
        user_agent: str,
        api_path: str,
        legacy_api_path: str,
    ) -> None:
        self._base_url = base_url
        self._port = port
        self._auth = HTTPBasicAuth(credentials.username, credentials.password)
        self._user_agent = user_agent
        self._api_path = api_path.strip("/")
        self._legacy_api_path = legacy_api_path.strip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def address_base_url(self, address: str) -> str:
        """Base URL of a cluster-scoped endpoint reachable at ``address``."""
        if not address:
            raise NutanixRequestBuildError("Cluster address is required")
        return f"https://{address}:{self._port}/"

    def build(self, method: str, path: str, body: Any = None) -> VersionedRequest:
        return self._build_v3(method, self._resolve(self._base_url, self._api_path, path), body)

    def build_for_address(self, address: str, method: str, path: str, body: Any = None) -> VersionedRequest:
        base_url = self.address_base_url(address)
        return self._build_v3(method, self._resolve(base_url, self._api_path, path), body)

    def build_legacy(self, method: str, path: str, body: bytes | None = None) -> VersionedRequest:
        return self._build_legacy(method, self._resolve(self._base_url, self._legacy_api_path, path), body)

    def build_legacy_for_address(
        self,
        address: str,
        method: str,
        path: str,
        body: bytes | None = None,
    ) -> VersionedRequest:
        base_url = self.address_base_url(address)
        return self._build_legacy(method, self._resolve(base_url, self._legacy_api_path, path), body)

    @staticmethod
    def _resolve(base_url: str, api_path: str, path: str) -> str:
        if not path.startswith("/"):
            raise NutanixRequestBuildError(f"Resource path must start with '/': {path!r}")
        return urljoin(base_url, api_path + path)

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent}

    def _build_v3(self, method: str, url: str, body: Any) -> VersionedRequest:
        headers = self._headers()
        content: bytes | IO[bytes] | None
        if isinstance(body, UploadFile):
            content = body.body
            headers["Content-Type"] = body.content_type
            headers["Accept"] = MEDIA_TYPE_JSON
        elif body is None:
            content = None
            headers["Accept"] = MEDIA_TYPE_JSON
        else:
            content = encode_json_body(body)
            headers["Content-Type"] = MEDIA_TYPE_JSON
            headers["Accept"] = MEDIA_TYPE_JSON

        logger.debug("Built v3 request method=%s url=%s", method, url)
        return VersionedRequest(method=method.upper(), url=url, headers=headers, body=content, auth=self._auth)

    def _build_legacy(self, method: str, url: str, body: bytes | None) -> VersionedRequest:
        logger.debug("Built legacy request method=%s url=%s", method, url)
        return VersionedRequest(
            method=method.upper(),
            url=url,
            headers=self._headers(),
            body=body,
            auth=self._auth,
        )
