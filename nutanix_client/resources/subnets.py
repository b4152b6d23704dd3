"""Subnet resource client."""

from __future__ import annotations

from nutanix_client.resources.base import CreateMixin
from nutanix_client.resources.base import DeleteMixin
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.resources.base import UpdateMixin
from nutanix_client.schemas.subnet import SubnetIntent
from nutanix_client.schemas.subnet import SubnetListIntent


class SubnetClient(
    CreateMixin[SubnetIntent],
    UpdateMixin[SubnetIntent],
    DeleteMixin,
    NamedResourceClient[SubnetIntent, SubnetListIntent],
):
    kind = "subnet"
    base_path = "/subnets"
    entity_type = SubnetIntent
    list_type = SubnetListIntent
