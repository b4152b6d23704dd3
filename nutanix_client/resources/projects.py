"""Project resource client."""

from __future__ import annotations

from nutanix_client.resources.base import CreateMixin
from nutanix_client.resources.base import DeleteMixin
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.resources.base import UpdateMixin
from nutanix_client.schemas.project import ProjectIntent
from nutanix_client.schemas.project import ProjectListIntent


class ProjectClient(
    CreateMixin[ProjectIntent],
    UpdateMixin[ProjectIntent],
    DeleteMixin,
    NamedResourceClient[ProjectIntent, ProjectListIntent],
):
    kind = "project"
    base_path = "/projects"
    entity_type = ProjectIntent
    list_type = ProjectListIntent
