"""VM recovery point resource client."""

from __future__ import annotations

from nutanix_client.resources.base import DeleteMixin
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.schemas.recovery_point import VMRecoveryPointIntent
from nutanix_client.schemas.recovery_point import VMRecoveryPointListIntent


class VMRecoveryPointClient(DeleteMixin, NamedResourceClient[VMRecoveryPointIntent, VMRecoveryPointListIntent]):
    kind = "vm recovery point"
    base_path = "/vm_recovery_points"
    entity_type = VMRecoveryPointIntent
    list_type = VMRecoveryPointListIntent
