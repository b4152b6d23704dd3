"""Shared building blocks for per-kind resource clients."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel

from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixNotFoundError
from nutanix_client.schemas.common import DSMetadata
from nutanix_client.schemas.common import PageableList
from nutanix_client.transport.builder import format_path

if TYPE_CHECKING:
    from nutanix_client.client import NutanixClient

EntityT = TypeVar("EntityT", bound=BaseModel)
ListT = TypeVar("ListT", bound=PageableList)


def is_valid_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except (TypeError, ValueError, AttributeError):
        return False
    return True


def entity_uuid(entity: Any) -> str:
    """Return the UUID of an intent object, or ``entity`` itself when it is a string."""
    if isinstance(entity, str):
        return entity
    metadata = getattr(entity, "metadata", None)
    return getattr(metadata, "uuid", None) or ""


class ResourceClient(Generic[EntityT, ListT]):
    """Read operations shared by every kind: fetch by UUID and paged listing."""

    kind: ClassVar[str]
    base_path: ClassVar[str]
    entity_type: ClassVar[type[BaseModel]]
    list_type: ClassVar[type[PageableList]]

    def __init__(self, client: NutanixClient) -> None:
        self._client = client

    @property
    def list_path(self) -> str:
        return f"{self.base_path}/list"

    def single_path(self, identifier: str) -> str:
        return format_path(f"{self.base_path}/%s", identifier)

    def get_by_uuid(self, uuid: str, *, ctx: RequestContext | None = None) -> EntityT:
        return self._client.request("GET", self.single_path(uuid), output_type=self.entity_type, ctx=ctx)

    def list(self, opts: DSMetadata | None = None, *, ctx: RequestContext | None = None) -> ListT:
        """Return one listing; follow-up pages are fetched when the total exceeds a page."""
        return self._client.list(self.list_path, opts, self.list_type, ctx=ctx)

    def all(self, *, ctx: RequestContext | None = None) -> ListT:
        """Return every entity of this kind using the maximum page size."""
        return self.list(DSMetadata(length=self._client.page_size, offset=0), ctx=ctx)


class NamedResourceClient(ResourceClient[EntityT, ListT]):
    """Adds lookup by name through a ``<field>==<name>`` list filter."""

    name_filter_field: ClassVar[str] = "name"

    def get(self, id_or_name: str, *, ctx: RequestContext | None = None) -> EntityT:
        if is_valid_uuid(id_or_name):
            return self.get_by_uuid(id_or_name, ctx=ctx)
        return self.get_by_name(id_or_name, ctx=ctx)

    def get_by_name(self, name: str, *, ctx: RequestContext | None = None) -> EntityT:
        result = self.list(DSMetadata(filter=f"{self.name_filter_field}=={name}"), ctx=ctx)
        if not result.entities:
            raise NutanixNotFoundError(kind=self.kind, name=name)
        return result.entities[0]


class CreateMixin(Generic[EntityT]):
    def create(self, create_request: EntityT, *, ctx: RequestContext | None = None) -> EntityT:
        return self._client.request("POST", self.base_path, create_request, self.entity_type, ctx=ctx)


class UpdateMixin(Generic[EntityT]):
    def update(self, update_request: EntityT, *, ctx: RequestContext | None = None) -> EntityT:
        """Send ``update_request`` without its server-managed ``status`` block."""
        payload = update_request.model_copy(update={"status": None})
        path = self.single_path(entity_uuid(update_request))
        return self._client.request("PUT", path, payload, self.entity_type, ctx=ctx)


class DeleteMixin:
    def delete(self, entity: Any, *, ctx: RequestContext | None = None) -> None:
        self._client.request("DELETE", self.single_path(entity_uuid(entity)), ctx=ctx)
