"""Client configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from functools import lru_cache
import os

from nutanix_client import __version__

DEFAULT_PORT = 9440
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_PAGE_SIZE = 500
DEFAULT_API_PATH = "api/nutanix/v3"
DEFAULT_LEGACY_API_PATH = "PrismGateway/services/rest/v2.0"
DEFAULT_USER_AGENT = f"nutanix-client/{__version__}"
DEFAULT_MAX_RESPONSE_BYTES = 16 * 1024 * 1024


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    return float(raw)


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw)


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def redact_secret(secret: str) -> str:
    """Return a non-recoverable placeholder for sensitive values."""
    if not secret:
        return "<empty>"
    return "<redacted>"


def normalize_endpoint(endpoint: str) -> str:
    """Return ``endpoint`` with a scheme and without a trailing slash."""
    normalized = endpoint.strip().rstrip("/")
    if normalized and "://" not in normalized:
        normalized = f"https://{normalized}"
    return normalized


@dataclass(frozen=True)
class Credentials:
    """Basic authentication credentials attached to every request."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ClientSettings:
    """Runtime settings for a Prism Central client."""

    endpoint: str
    username: str
    password: str = field(repr=False)
    port: int = DEFAULT_PORT
    verify_tls: bool = True
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    page_size: int = DEFAULT_PAGE_SIZE
    api_path: str = DEFAULT_API_PATH
    legacy_api_path: str = DEFAULT_LEGACY_API_PATH
    user_agent: str = DEFAULT_USER_AGENT
    max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES

    @property
    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)

    def safe_for_logging(self) -> dict[str, str | int | float | bool]:
        """Return client settings safe for logs."""
        return {
            "endpoint": self.endpoint,
            "username": self.username,
            "password": redact_secret(self.password),
            "port": self.port,
            "verify_tls": self.verify_tls,
            "timeout_seconds": self.timeout_seconds,
            "page_size": self.page_size,
            "api_path": self.api_path,
            "legacy_api_path": self.legacy_api_path,
            "user_agent": self.user_agent,
            "max_response_bytes": self.max_response_bytes,
        }


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Load client settings from the environment."""
    return ClientSettings(
        endpoint=normalize_endpoint(os.getenv("NUTANIX_ENDPOINT", "")),
        username=os.getenv("NUTANIX_USERNAME", ""),
        password=os.getenv("NUTANIX_PASSWORD", ""),
        port=_get_int_env("NUTANIX_PORT", DEFAULT_PORT),
        verify_tls=_get_bool_env("NUTANIX_VERIFY_TLS", True),
        timeout_seconds=_get_float_env("NUTANIX_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        page_size=_get_int_env("NUTANIX_PAGE_SIZE", DEFAULT_PAGE_SIZE),
        max_response_bytes=_get_int_env("NUTANIX_MAX_RESPONSE_BYTES", DEFAULT_MAX_RESPONSE_BYTES),
    )
