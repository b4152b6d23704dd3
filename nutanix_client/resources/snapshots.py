"""v3 VM snapshot resource client."""

from __future__ import annotations

from nutanix_client.core.context import RequestContext
from nutanix_client.resources.base import DeleteMixin
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.schemas.common import ExecutionContext
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.snapshot import VMSnapshotIntent
from nutanix_client.schemas.snapshot import VMSnapshotListIntent


class SnapshotClient(DeleteMixin, NamedResourceClient[VMSnapshotIntent, VMSnapshotListIntent]):
    kind = "snapshot"
    base_path = "/vm_snapshots"
    entity_type = VMSnapshotIntent
    list_type = VMSnapshotListIntent

    def create(
        self,
        create_request: VMSnapshotIntent | None = None,
        *,
        ctx: RequestContext | None = None,
    ) -> ExecutionContext:
        """Request a snapshot; the response carries the task tracking it."""
        intent = create_request or VMSnapshotIntent()
        metadata = (intent.metadata or Metadata()).model_copy(update={"kind": "vm_snapshot"})
        payload = intent.model_copy(update={"metadata": metadata})
        return self._client.request("POST", self.base_path, payload, ExecutionContext, ctx=ctx)
