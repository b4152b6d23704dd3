"""Unit tests for client configuration loading."""

from __future__ import annotations

import pytest

from nutanix_client import NutanixClient
from nutanix_client.core.config import ClientSettings
from nutanix_client.core.config import Credentials
from nutanix_client.core.config import get_client_settings
from nutanix_client.core.config import normalize_endpoint
from nutanix_client.core.config import redact_secret


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_client_settings.cache_clear()
    yield
    get_client_settings.cache_clear()


def test_settings_load_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUTANIX_ENDPOINT", "prism.example.com/")
    monkeypatch.setenv("NUTANIX_USERNAME", "admin")
    monkeypatch.setenv("NUTANIX_PASSWORD", "secret")
    monkeypatch.setenv("NUTANIX_VERIFY_TLS", "false")
    monkeypatch.setenv("NUTANIX_PAGE_SIZE", "100")
    monkeypatch.setenv("NUTANIX_TIMEOUT_SECONDS", "5.5")

    settings = get_client_settings()

    assert settings.endpoint == "https://prism.example.com"
    assert settings.credentials == Credentials(username="admin", password="secret")
    assert settings.verify_tls is False
    assert settings.page_size == 100
    assert settings.timeout_seconds == 5.5
    assert settings.port == 9440


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NUTANIX_VERIFY_TLS", "NUTANIX_PAGE_SIZE", "NUTANIX_PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_client_settings()

    assert settings.verify_tls is True
    assert settings.page_size == 500
    assert settings.api_path == "api/nutanix/v3"
    assert settings.legacy_api_path == "PrismGateway/services/rest/v2.0"


def test_safe_for_logging_redacts_password() -> None:
    settings = ClientSettings(endpoint="https://prism", username="admin", password="secret")

    safe = settings.safe_for_logging()

    assert safe["password"] == "<redacted>"
    assert "secret" not in repr(settings)
    assert "secret" not in repr(settings.credentials)


def test_redact_secret_marks_empty_values() -> None:
    assert redact_secret("") == "<empty>"


def test_normalize_endpoint_keeps_explicit_scheme() -> None:
    assert normalize_endpoint("http://10.0.0.1/") == "http://10.0.0.1"


def test_client_from_settings_uses_configured_base_url() -> None:
    settings = ClientSettings(endpoint="https://prism.example.com", username="admin", password="x", port=9441, page_size=50)

    client = NutanixClient.from_settings(settings)

    assert client.base_url == "https://prism.example.com:9441/"
    assert client.page_size == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"endpoint": ""},
        {"timeout_seconds": 0},
        {"page_size": 0},
        {"max_response_bytes": -1},
    ],
)
def test_client_rejects_invalid_configuration(overrides: dict) -> None:
    kwargs = {"endpoint": "https://prism", "credentials": Credentials(username="a", password="b")}
    kwargs.update(overrides)

    with pytest.raises(ValueError):
        NutanixClient(**kwargs)
