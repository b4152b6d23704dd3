"""Response classification and typed decoding.

The backend does not use one error envelope. A body may be a plain entity or
list (``entities``), a resource whose ``status`` reports success or failure,
a bare string ``status``, or a flat error object with a top-level ``state``.
Responses are therefore decoded twice: once into an untyped mapping used only
to find an error carrier, then into the caller's pydantic model.

Status codes 401, 404 and 5xx are reported before the body is looked at, even
when the body holds a well-formed error object.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from typing import TypeVar

import requests
from pydantic import BaseModel
from pydantic import ValidationError

from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixAPIError
from nutanix_client.core.errors import NutanixRequestError
from nutanix_client.core.errors import NutanixResponseError
from nutanix_client.core.errors import NutanixResponseTooLargeError
from nutanix_client.core.errors import NutanixStatusError
from nutanix_client.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ERROR_STATE = "ERROR"
HARD_FAILURE_STATUS_CODES = frozenset({401, 404})
STATUS_SNIPPET_BYTES = 2048
_CHUNK_SIZE = 64 * 1024


def is_hard_failure(status_code: int) -> bool:
    return status_code >= 500 or status_code in HARD_FAILURE_STATUS_CODES


def read_bounded(
    response: requests.Response,
    limit: int,
    ctx: RequestContext | None = None,
) -> bytes:
    """Read the whole body, refusing anything larger than ``limit`` bytes.

    ``ctx`` is checked after every chunk.
    """
    buffer = bytearray()
    try:
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            buffer.extend(chunk)
            if ctx is not None:
                ctx.check()
            if len(buffer) > limit:
                raise NutanixResponseTooLargeError(
                    f"Response body from {response.url} exceeds {limit} bytes",
                )
    except requests.RequestException as exc:
        raise NutanixRequestError("Failed to read response body") from exc
    return bytes(buffer)


def _read_snippet(response: requests.Response) -> str:
    buffer = bytearray()
    try:
        for chunk in response.iter_content(chunk_size=STATUS_SNIPPET_BYTES):
            buffer.extend(chunk)
            if len(buffer) >= STATUS_SNIPPET_BYTES:
                break
    except requests.RequestException:
        logger.debug("Could not read body of failed response url=%s", response.url)
    return bytes(buffer[:STATUS_SNIPPET_BYTES]).decode("utf-8", errors="replace")


def parse_envelope(raw: bytes) -> dict[str, Any]:
    """Decode a response body into an untyped JSON object."""
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise NutanixResponseError(f"Error unmarshalling response body: {exc}") from exc
    if not isinstance(payload, dict):
        raise NutanixResponseError("Response payload must be a JSON object")
    return payload


def _check_error_carrier(carrier: dict[str, Any]) -> None:
    try:
        error = ErrorResponse.model_validate(carrier)
    except ValidationError as exc:
        raise NutanixResponseError(f"Error object could not be decoded: {exc}") from exc
    if error.state == ERROR_STATE:
        raise NutanixAPIError(error)


def classify_envelope(payload: dict[str, Any]) -> None:
    """Raise ``NutanixAPIError`` when ``payload`` carries an error; return on success."""
    if "entities" in payload:
        return

    if "status" in payload:
        status = payload["status"]
        if isinstance(status, dict):
            _check_error_carrier(status)
        return

    if "state" in payload:
        _check_error_carrier(payload)


def decode_payload(payload: dict[str, Any], output_type: type[ModelT]) -> ModelT:
    try:
        return output_type.model_validate(payload)
    except ValidationError as exc:
        raise NutanixResponseError(f"Error decoding response into {output_type.__name__}: {exc}") from exc


def decode_response(
    response: requests.Response,
    *,
    method: str,
    output_type: type[ModelT] | None,
    max_response_bytes: int,
    ctx: RequestContext | None = None,
) -> ModelT | dict[str, Any] | None:
    """Classify a completed exchange and decode its body.

    Returns ``None`` for successful deletes and empty bodies, the untyped
    payload when ``output_type`` is ``None``, and a validated model otherwise.
    """
    status_code = response.status_code
    logger.debug("Response status=%s url=%s", status_code, response.url)

    if 200 <= status_code <= 299 and method.upper() == "DELETE":
        return None

    if is_hard_failure(status_code):
        raise NutanixStatusError(status_code=status_code, url=response.url, body=_read_snippet(response))

    raw = read_bounded(response, max_response_bytes, ctx)
    if not raw.strip():
        return None

    payload = parse_envelope(raw)
    classify_envelope(payload)

    if output_type is None:
        return payload
    return decode_payload(payload, output_type)
