"""Category key/value resource client.

Categories are addressed by key name rather than UUID.
"""

from __future__ import annotations

from nutanix_client.core.context import RequestContext
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.schemas.category import CategoryKey
from nutanix_client.schemas.category import CategoryKeyList
from nutanix_client.schemas.category import CategoryKeyStatus
from nutanix_client.schemas.category import CategoryValueList
from nutanix_client.schemas.common import DSMetadata
from nutanix_client.transport.builder import format_path


class CategoryClient(NamedResourceClient[CategoryKeyStatus, CategoryKeyList]):
    kind = "category"
    base_path = "/categories"
    entity_type = CategoryKeyStatus
    list_type = CategoryKeyList

    def create(self, create_request: CategoryKey, *, ctx: RequestContext | None = None) -> CategoryKeyStatus:
        """Create or replace a category key (``PUT /categories/{name}``)."""
        return self._client.request(
            "PUT",
            self.single_path(create_request.name),
            create_request,
            self.entity_type,
            ctx=ctx,
        )

    def delete(self, key: CategoryKeyStatus | CategoryKey | str, *, ctx: RequestContext | None = None) -> None:
        """Delete a category key given its name or a key object."""
        name = key if isinstance(key, str) else key.name
        self._client.request("DELETE", self.single_path(name or ""), ctx=ctx)

    def list_values(self, name: str, *, ctx: RequestContext | None = None) -> CategoryValueList:
        path = format_path(f"{self.base_path}/%s/list", name)
        return self._client.request("POST", path, DSMetadata(), CategoryValueList, ctx=ctx)
