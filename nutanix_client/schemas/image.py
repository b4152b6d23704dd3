"""Pydantic schemas for disk image payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList


class ImageResources(NutanixModel):
    image_type: str | None = None
    source_uri: str | None = None
    architecture: str | None = None
    size_bytes: int | None = None


class Image(NutanixModel):
    name: str | None = None
    description: str | None = None
    resources: ImageResources | None = None


class ImageDefStatus(EntityStatus):
    resources: ImageResources | None = None


class ImageIntent(NutanixModel):
    api_version: str | None = None
    metadata: Metadata | None = None
    spec: Image | None = None
    status: ImageDefStatus | None = None


class ImageListIntent(PageableList[ImageIntent]):
    pass
