"""Typed client for the Nutanix Prism Central REST API."""

__version__ = "0.1.0"

from nutanix_client.client import NutanixClient  # noqa: E402
from nutanix_client.core.config import ClientSettings  # noqa: E402
from nutanix_client.core.config import Credentials  # noqa: E402
from nutanix_client.core.config import get_client_settings  # noqa: E402
from nutanix_client.core.context import RequestContext  # noqa: E402
from nutanix_client.core.errors import NutanixAPIError  # noqa: E402
from nutanix_client.core.errors import NutanixCancelledError  # noqa: E402
from nutanix_client.core.errors import NutanixClientError  # noqa: E402
from nutanix_client.core.errors import NutanixDeadlineExceededError  # noqa: E402
from nutanix_client.core.errors import NutanixNotFoundError  # noqa: E402
from nutanix_client.core.errors import NutanixPaginationError  # noqa: E402
from nutanix_client.core.errors import NutanixRequestBuildError  # noqa: E402
from nutanix_client.core.errors import NutanixRequestError  # noqa: E402
from nutanix_client.core.errors import NutanixResponseError  # noqa: E402
from nutanix_client.core.errors import NutanixResponseTooLargeError  # noqa: E402
from nutanix_client.core.errors import NutanixStatusError  # noqa: E402
from nutanix_client.transport.builder import UploadFile  # noqa: E402

__all__ = [
    "ClientSettings",
    "Credentials",
    "NutanixAPIError",
    "NutanixCancelledError",
    "NutanixClient",
    "NutanixClientError",
    "NutanixDeadlineExceededError",
    "NutanixNotFoundError",
    "NutanixPaginationError",
    "NutanixRequestBuildError",
    "NutanixRequestError",
    "NutanixResponseError",
    "NutanixResponseTooLargeError",
    "NutanixStatusError",
    "RequestContext",
    "UploadFile",
    "__version__",
    "get_client_settings",
]
