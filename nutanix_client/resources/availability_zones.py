"""Availability zone resource client."""

from __future__ import annotations

from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.schemas.availability_zone import AvailabilityZoneIntent
from nutanix_client.schemas.availability_zone import AvailabilityZoneListIntent


class AvailabilityZoneClient(NamedResourceClient[AvailabilityZoneIntent, AvailabilityZoneListIntent]):
    kind = "availability zone"
    base_path = "/availability_zones"
    entity_type = AvailabilityZoneIntent
    list_type = AvailabilityZoneListIntent
