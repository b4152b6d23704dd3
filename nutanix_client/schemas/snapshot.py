"""Pydantic schemas for v3 VM snapshot payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference


class VMSnapshotResources(NutanixModel):
    entity_uuid: str | None = None
    expiration_time_msecs: int | None = None
    snapshot_type: str | None = None


class VMSnapshot(NutanixModel):
    name: str | None = None
    resources: VMSnapshotResources | None = None


class VMSnapshotDefStatus(EntityStatus):
    resources: VMSnapshotResources | None = None
    snapshot_file_list: list[Reference] | None = None


class VMSnapshotIntent(NutanixModel):
    api_version: str | None = None
    metadata: Metadata | None = None
    spec: VMSnapshot | None = None
    status: VMSnapshotDefStatus | None = None


class VMSnapshotListIntent(PageableList[VMSnapshotIntent]):
    pass
