"""Pydantic schemas for project payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference


class ProjectResources(NutanixModel):
    account_reference_list: list[Reference] | None = None
    subnet_reference_list: list[Reference] | None = None
    user_reference_list: list[Reference] | None = None
    default_subnet_reference: Reference | None = None
    is_default: bool | None = None


class Project(NutanixModel):
    name: str | None = None
    description: str | None = None
    resources: ProjectResources | None = None


class ProjectDefStatus(EntityStatus):
    resources: ProjectResources | None = None


class ProjectIntent(NutanixModel):
    api_version: str | None = None
    metadata: Metadata | None = None
    spec: Project | None = None
    status: ProjectDefStatus | None = None


class ProjectListIntent(PageableList[ProjectIntent]):
    pass
