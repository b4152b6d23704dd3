"""Virtual machine resource client."""

from __future__ import annotations

from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixRequestBuildError
from nutanix_client.resources.base import CreateMixin
from nutanix_client.resources.base import DeleteMixin
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.resources.base import UpdateMixin
from nutanix_client.resources.base import entity_uuid
from nutanix_client.schemas.common import ExecutionContext
from nutanix_client.schemas.v2 import PowerState
from nutanix_client.schemas.v2 import Task
from nutanix_client.schemas.v2 import VMPowerStateCreate
from nutanix_client.schemas.vm import VMIntent
from nutanix_client.schemas.vm import VMListIntent
from nutanix_client.schemas.vm import VMRevertRequest
from nutanix_client.transport.builder import encode_json_body
from nutanix_client.transport.builder import format_path


def _cluster_uuid(vm: VMIntent) -> str:
    reference = vm.spec.cluster_reference if vm.spec else None
    if reference is None or not reference.uuid:
        raise NutanixRequestBuildError(f"VM {entity_uuid(vm)!r} has no cluster reference")
    return reference.uuid


class VMClient(
    CreateMixin[VMIntent],
    UpdateMixin[VMIntent],
    DeleteMixin,
    NamedResourceClient[VMIntent, VMListIntent],
):
    kind = "VM"
    base_path = "/vms"
    name_filter_field = "vm_name"
    entity_type = VMIntent
    list_type = VMListIntent

    def _action_path(self, vm: VMIntent | str, action: str) -> str:
        return format_path(f"{self.base_path}/%s/{action}", entity_uuid(vm))

    def clone(self, source_vm: VMIntent | str, *, ctx: RequestContext | None = None) -> Task:
        return self._client.request("POST", self._action_path(source_vm, "clone"), {}, Task, ctx=ctx)

    def create_recovery_point(self, vm: VMIntent | str, *, ctx: RequestContext | None = None) -> ExecutionContext:
        return self._client.request(
            "POST",
            self._action_path(vm, "snapshot"),
            {},
            ExecutionContext,
            ctx=ctx,
        )

    def revert_to_recovery_point(
        self,
        vm: VMIntent,
        revert_request: VMRevertRequest,
        *,
        ctx: RequestContext | None = None,
    ) -> Task:
        """Revert ``vm`` on the cluster hosting it."""
        return self._client.cluster_request(
            _cluster_uuid(vm),
            "POST",
            self._action_path(vm, "revert"),
            revert_request,
            Task,
            ctx=ctx,
        )

    def set_power_state(
        self,
        power_state: PowerState | str,
        vm: VMIntent,
        *,
        ctx: RequestContext | None = None,
    ) -> Task:
        """Apply a power transition through the cluster's legacy v2 gateway."""
        body = encode_json_body(VMPowerStateCreate(transition=power_state))
        return self._client.legacy_cluster_request(
            _cluster_uuid(vm),
            "POST",
            self._action_path(vm, "set_power_state"),
            body,
            Task,
            ctx=ctx,
        )
