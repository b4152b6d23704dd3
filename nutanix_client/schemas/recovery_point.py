"""Pydantic schemas for VM recovery point payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference


class VMRecoveryPointResources(NutanixModel):
    parent_vm_reference: Reference | None = None
    recovery_point_type: str | None = None
    expiration_time_usecs: int | None = None
    consistency_group_uuid: str | None = None


class VMRecoveryPoint(NutanixModel):
    name: str | None = None
    resources: VMRecoveryPointResources | None = None


class VMRecoveryPointDefStatus(EntityStatus):
    resources: VMRecoveryPointResources | None = None


class VMRecoveryPointIntent(NutanixModel):
    api_version: str | None = None
    metadata: Metadata | None = None
    spec: VMRecoveryPoint | None = None
    status: VMRecoveryPointDefStatus | None = None


class VMRecoveryPointListIntent(PageableList[VMRecoveryPointIntent]):
    pass
