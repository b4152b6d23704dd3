"""Pydantic schemas for virtual machine payloads."""

from __future__ import annotations

import base64
import json
import uuid

from pydantic import Field

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference


class DiskAddress(NutanixModel):
    adapter_type: str | None = None
    device_index: int | None = None


class DeviceProperties(NutanixModel):
    device_type: str | None = None
    disk_address: DiskAddress | None = None


class VMDisk(NutanixModel):
    uuid: str | None = None
    disk_size_mib: int | None = None
    device_properties: DeviceProperties | None = None
    data_source_reference: Reference | None = None


class IPAddress(NutanixModel):
    ip: str | None = None
    type: str | None = None


class VMNic(NutanixModel):
    uuid: str | None = None
    nic_type: str | None = None
    mac_address: str | None = None
    subnet_reference: Reference | None = None
    ip_endpoint_list: list[IPAddress] | None = None


class GuestCustomizationCloudInit(NutanixModel):
    meta_data: str | None = None
    user_data: str | None = None


class GuestCustomization(NutanixModel):
    cloud_init: GuestCustomizationCloudInit | None = None
    is_overridable: bool | None = None


class VMResources(NutanixModel):
    num_sockets: int | None = None
    num_vcpus_per_socket: int | None = None
    memory_size_mib: int | None = None
    power_state: str | None = None
    disk_list: list[VMDisk] | None = None
    nic_list: list[VMNic] | None = None
    guest_customization: GuestCustomization | None = None


class VM(NutanixModel):
    name: str | None = None
    description: str | None = None
    cluster_reference: Reference | None = None
    resources: VMResources | None = None


class VMDefStatus(EntityStatus):
    cluster_reference: Reference | None = None
    resources: VMResources | None = None


class VMIntent(NutanixModel):
    """Virtual machine as returned by ``GET /vms/{uuid}``."""

    api_version: str | None = None
    metadata: Metadata | None = None
    spec: VM | None = None
    status: VMDefStatus | None = None


class VMListIntent(PageableList[VMIntent]):
    pass


class VMRevertRequest(NutanixModel):
    vm_recovery_point_uuid: str | None = None


class CloudInitMetadata(NutanixModel):
    """Cloud-init metadata document passed base64-encoded in guest customization."""

    ssh_authorized_key_map: dict[str, str] | None = Field(default=None, alias="public_keys")
    hostname: str = ""
    uuid: str = ""
    availability_zone: str | None = None
    project: str | None = Field(default=None, alias="project_id")

    def to_base64(self) -> str:
        if not self.uuid:
            self.uuid = str(uuid.uuid4())
        payload = self.model_dump(by_alias=True, exclude_none=True)
        return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")
