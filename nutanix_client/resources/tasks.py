"""Task resource client."""

from __future__ import annotations

from nutanix_client.resources.base import ResourceClient
from nutanix_client.schemas.task import TaskIntent
from nutanix_client.schemas.task import TaskListIntent


class TaskClient(ResourceClient[TaskIntent, TaskListIntent]):
    kind = "task"
    base_path = "/tasks"
    entity_type = TaskIntent
    list_type = TaskListIntent
