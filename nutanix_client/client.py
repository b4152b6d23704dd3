"""Prism Central API client: request dispatch, cluster endpoint resolution and paged listing."""

from __future__ import annotations

import logging
from typing import Any
from typing import TypeVar

import requests
from pydantic import BaseModel

from nutanix_client.core.config import DEFAULT_API_PATH
from nutanix_client.core.config import DEFAULT_LEGACY_API_PATH
from nutanix_client.core.config import DEFAULT_MAX_RESPONSE_BYTES
from nutanix_client.core.config import DEFAULT_PAGE_SIZE
from nutanix_client.core.config import DEFAULT_PORT
from nutanix_client.core.config import DEFAULT_TIMEOUT_SECONDS
from nutanix_client.core.config import DEFAULT_USER_AGENT
from nutanix_client.core.config import ClientSettings
from nutanix_client.core.config import Credentials
from nutanix_client.core.config import normalize_endpoint
from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixPaginationError
from nutanix_client.core.errors import NutanixRequestError
from nutanix_client.core.errors import NutanixResponseError
from nutanix_client.resources.availability_zones import AvailabilityZoneClient
from nutanix_client.resources.categories import CategoryClient
from nutanix_client.resources.clusters import ClusterClient
from nutanix_client.resources.images import ImageClient
from nutanix_client.resources.projects import ProjectClient
from nutanix_client.resources.recovery_points import VMRecoveryPointClient
from nutanix_client.resources.snapshots import SnapshotClient
from nutanix_client.resources.subnets import SubnetClient
from nutanix_client.resources.tasks import TaskClient
from nutanix_client.resources.vms import VMClient
from nutanix_client.schemas.common import DSMetadata
from nutanix_client.schemas.common import PageableList
from nutanix_client.transport.builder import RequestBuilder
from nutanix_client.transport.builder import VersionedRequest
from nutanix_client.transport.decoder import decode_response
from nutanix_client.transport.pagination import paginate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
ListT = TypeVar("ListT", bound=PageableList)


class NutanixClient:
    """Typed client for the Prism Central v3 API.

    Configuration is fixed at construction and the instance holds no other
    mutable state, so one client can be shared across threads; connection
    reuse is left to the underlying ``requests.Session``.
    """

    def __init__(
        self,
        *,
        endpoint: str,
        credentials: Credentials,
        port: int = DEFAULT_PORT,
        verify_tls: bool = True,
        timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = DEFAULT_PAGE_SIZE,
        api_path: str = DEFAULT_API_PATH,
        legacy_api_path: str = DEFAULT_LEGACY_API_PATH,
        user_agent: str = DEFAULT_USER_AGENT,
        max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
        session: requests.Session | None = None,
    ) -> None:
        normalized = normalize_endpoint(endpoint)
        if not normalized:
            raise ValueError("endpoint is required")
        if port <= 0:
            raise ValueError("port must be positive")
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        if max_response_bytes <= 0:
            raise ValueError("max_response_bytes must be positive")

        self._builder = RequestBuilder(
            base_url=f"{normalized}:{port}/",
            port=port,
            credentials=credentials,
            user_agent=user_agent,
            api_path=api_path,
            legacy_api_path=legacy_api_path,
        )
        self._verify_tls = verify_tls
        self._timeout_seconds = timeout_seconds
        self._page_size = page_size
        self._max_response_bytes = max_response_bytes
        self._session = session or requests.Session()

        if not verify_tls:
            logger.warning("TLS certificate verification is disabled for %s", normalized)

        self.availability_zone = AvailabilityZoneClient(self)
        self.category = CategoryClient(self)
        self.cluster = ClusterClient(self)
        self.image = ImageClient(self)
        self.project = ProjectClient(self)
        self.snapshot = SnapshotClient(self)
        self.subnet = SubnetClient(self)
        self.task = TaskClient(self)
        self.vm = VMClient(self)
        self.vm_recovery_point = VMRecoveryPointClient(self)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        session: requests.Session | None = None,
    ) -> NutanixClient:
        logger.debug("Creating client with settings=%s", settings.safe_for_logging())
        return cls(
            endpoint=settings.endpoint,
            credentials=settings.credentials,
            port=settings.port,
            verify_tls=settings.verify_tls,
            timeout_seconds=settings.timeout_seconds,
            page_size=settings.page_size,
            api_path=settings.api_path,
            legacy_api_path=settings.legacy_api_path,
            user_agent=settings.user_agent,
            max_response_bytes=settings.max_response_bytes,
            session=session,
        )

    @property
    def base_url(self) -> str:
        return self._builder.base_url

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def send(
        self,
        request: VersionedRequest,
        output_type: type[ModelT] | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> Any:
        """Dispatch a built request once and decode the response."""
        timeout = self._timeout_seconds
        if ctx is not None:
            ctx.check()
            timeout = ctx.effective_timeout(timeout)

        try:
            response = self._session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
                auth=request.auth,
                timeout=timeout,
                verify=self._verify_tls,
                stream=True,
            )
        except requests.RequestException as exc:
            raise NutanixRequestError(f"{request.method} {request.url} failed: {exc}") from exc

        try:
            if ctx is not None:
                ctx.check()
            return decode_response(
                response,
                method=request.method,
                output_type=output_type,
                max_response_bytes=self._max_response_bytes,
                ctx=ctx,
            )
        finally:
            response.close()

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        output_type: type[ModelT] | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> Any:
        """Send a v3 request to the primary endpoint."""
        return self.send(self._builder.build(method, path, body), output_type, ctx=ctx)

    def legacy_request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        output_type: type[ModelT] | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> Any:
        """Send a legacy v2 request to the primary endpoint."""
        return self.send(self._builder.build_legacy(method, path, body), output_type, ctx=ctx)

    def resolve_cluster_address(self, cluster_uuid: str, *, ctx: RequestContext | None = None) -> str:
        """Look up the externally reachable address of a cluster.

        Errors from the lookup propagate unchanged to the caller.
        """
        cluster = self.cluster.get_by_uuid(cluster_uuid, ctx=ctx)
        address = cluster.external_ip if cluster is not None else None
        if not address:
            raise NutanixResponseError(f"Cluster {cluster_uuid} has no external IP")
        return address

    def cluster_request(
        self,
        cluster_uuid: str,
        method: str,
        path: str,
        body: Any = None,
        output_type: type[ModelT] | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> Any:
        """Send a v3 request directly to a cluster's own endpoint."""
        address = self.resolve_cluster_address(cluster_uuid, ctx=ctx)
        return self.send(self._builder.build_for_address(address, method, path, body), output_type, ctx=ctx)

    def legacy_cluster_request(
        self,
        cluster_uuid: str,
        method: str,
        path: str,
        body: bytes | None = None,
        output_type: type[ModelT] | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> Any:
        """Send a legacy v2 request directly to a cluster's own endpoint."""
        address = self.resolve_cluster_address(cluster_uuid, ctx=ctx)
        request = self._builder.build_legacy_for_address(address, method, path, body)
        return self.send(request, output_type, ctx=ctx)

    def list(
        self,
        path: str,
        opts: DSMetadata | None,
        output_type: type[ListT],
        *,
        ctx: RequestContext | None = None,
    ) -> ListT:
        """POST a list query and follow up with further pages when needed."""
        if not (isinstance(output_type, type) and issubclass(output_type, PageableList)):
            raise NutanixPaginationError(f"type not supported {getattr(output_type, '__name__', output_type)!r}")

        query = opts.model_copy() if opts is not None else DSMetadata()
        # Follow-up pages start at offset + page_size, so the first page must be a full one.
        if output_type.paginated and (query.length is None or query.length < self._page_size):
            query = query.model_copy(update={"length": self._page_size})
        first_page = self.request("POST", path, query, output_type, ctx=ctx)
        if first_page is None:
            return output_type()

        def fetch_page(offset: int) -> ListT:
            page_query = query.model_copy(update={"offset": offset, "length": self._page_size})
            page = self.request("POST", path, page_query, output_type, ctx=ctx)
            return page if page is not None else output_type()

        return paginate(first_page, fetch_page, page_size=self._page_size, ctx=ctx)
