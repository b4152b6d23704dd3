"""Pydantic schemas for availability zone payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList


class AvailabilityZoneResources(NutanixModel):
    management_plane_type: str | None = None
    management_url: str | None = None
    region: str | None = None


class AvailabilityZone(NutanixModel):
    name: str | None = None
    resources: AvailabilityZoneResources | None = None


class AvailabilityZoneIntent(NutanixModel):
    api_version: str | None = None
    metadata: Metadata | None = None
    spec: AvailabilityZone | None = None
    status: EntityStatus | None = None


class AvailabilityZoneListIntent(PageableList[AvailabilityZoneIntent]):
    pass
