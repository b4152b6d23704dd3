"""Pydantic schemas for v3 task payloads."""

from __future__ import annotations

from typing import ClassVar

from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference


class TaskIntent(NutanixModel):
    uuid: str | None = None
    status: str | None = None
    operation_type: str | None = None
    percentage_complete: int | None = None
    progress_message: str | None = None
    error_detail: str | None = None
    error_code: str | None = None
    creation_time: str | None = None
    completion_time: str | None = None
    cluster_reference: Reference | None = None
    entity_reference_list: list[Reference] | None = None
    subtask_reference_list: list[Reference] | None = None
    api_version: str | None = None


class TaskListIntent(PageableList[TaskIntent]):
    """Task listing; the backend's task list does not page like other kinds."""

    paginated: ClassVar[bool] = False
