"""Error hierarchy raised by client operations."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nutanix_client.schemas.common import ErrorResponse


class NutanixClientError(RuntimeError):
    """Base error raised by client operations."""


class NutanixRequestBuildError(NutanixClientError, ValueError):
    """Raised when a request cannot be constructed; nothing was sent."""


class NutanixRequestError(NutanixClientError):
    """Raised when a request fails at the transport level (connection, TLS, timeout)."""


class NutanixStatusError(NutanixClientError):
    """Raised for 401, 404 and 5xx responses; the body is never parsed."""

    def __init__(self, *, status_code: int, url: str, body: str = "") -> None:
        message = f"statusCode: {status_code}, url: {url}"
        if body:
            message = f"{message}, response: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


class NutanixAPIError(NutanixClientError):
    """Raised when the response carries an error object whose state is ``ERROR``."""

    def __init__(self, error: ErrorResponse) -> None:
        self.error = error
        super().__init__(json.dumps(error.model_dump(mode="json", exclude_none=True), indent=2))

    @property
    def state(self) -> str | None:
        return self.error.state


class NutanixResponseError(NutanixClientError):
    """Raised when responses are malformed or cannot be decoded."""


class NutanixResponseTooLargeError(NutanixResponseError):
    """Raised when a response body exceeds the configured size bound."""


class NutanixPaginationError(NutanixClientError, TypeError):
    """Raised when a response type without list paging support reaches the paginator."""


class NutanixNotFoundError(NutanixClientError):
    """Raised when a by-name lookup matches no entities."""

    def __init__(self, *, kind: str, name: str) -> None:
        super().__init__(f"{kind} not found: {name}")
        self.kind = kind
        self.name = name


class NutanixCancelledError(NutanixClientError):
    """Raised when the caller cancelled the request context."""


class NutanixDeadlineExceededError(NutanixCancelledError):
    """Raised when the request context deadline has passed."""
