"""Pydantic schemas for subnet payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference


class IPPool(NutanixModel):
    range: str | None = None


class DHCPOptions(NutanixModel):
    domain_name: str | None = None
    domain_name_server_list: list[str] | None = None
    domain_search_list: list[str] | None = None


class IPConfig(NutanixModel):
    default_gateway_ip: str | None = None
    prefix_length: int | None = None
    subnet_ip: str | None = None
    pool_list: list[IPPool] | None = None
    dhcp_options: DHCPOptions | None = None


class SubnetResources(NutanixModel):
    subnet_type: str | None = None
    vlan_id: int | None = None
    vswitch_name: str | None = None
    ip_config: IPConfig | None = None


class Subnet(NutanixModel):
    name: str | None = None
    description: str | None = None
    cluster_reference: Reference | None = None
    resources: SubnetResources | None = None


class SubnetDefStatus(EntityStatus):
    resources: SubnetResources | None = None


class SubnetIntent(NutanixModel):
    api_version: str | None = None
    metadata: Metadata | None = None
    spec: Subnet | None = None
    status: SubnetDefStatus | None = None


class SubnetListIntent(PageableList[SubnetIntent]):
    pass
