"""Pydantic resource schemas."""

from nutanix_client.schemas.availability_zone import AvailabilityZoneIntent
from nutanix_client.schemas.availability_zone import AvailabilityZoneListIntent
from nutanix_client.schemas.category import CategoryKey
from nutanix_client.schemas.category import CategoryKeyList
from nutanix_client.schemas.category import CategoryKeyStatus
from nutanix_client.schemas.category import CategoryValueList
from nutanix_client.schemas.cluster import ClusterIntent
from nutanix_client.schemas.cluster import ClusterListIntent
from nutanix_client.schemas.common import DSMetadata
from nutanix_client.schemas.common import ErrorResponse
from nutanix_client.schemas.common import ExecutionContext
from nutanix_client.schemas.common import ListMetadata
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import PageableList
from nutanix_client.schemas.common import Reference
from nutanix_client.schemas.image import ImageIntent
from nutanix_client.schemas.image import ImageListIntent
from nutanix_client.schemas.project import ProjectIntent
from nutanix_client.schemas.project import ProjectListIntent
from nutanix_client.schemas.recovery_point import VMRecoveryPointIntent
from nutanix_client.schemas.recovery_point import VMRecoveryPointListIntent
from nutanix_client.schemas.snapshot import VMSnapshotIntent
from nutanix_client.schemas.snapshot import VMSnapshotListIntent
from nutanix_client.schemas.subnet import SubnetIntent
from nutanix_client.schemas.subnet import SubnetListIntent
from nutanix_client.schemas.task import TaskIntent
from nutanix_client.schemas.task import TaskListIntent
from nutanix_client.schemas.v2 import PowerState
from nutanix_client.schemas.v2 import Task
from nutanix_client.schemas.vm import CloudInitMetadata
from nutanix_client.schemas.vm import VMIntent
from nutanix_client.schemas.vm import VMListIntent
from nutanix_client.schemas.vm import VMRevertRequest

__all__ = [
    "AvailabilityZoneIntent",
    "AvailabilityZoneListIntent",
    "CategoryKey",
    "CategoryKeyList",
    "CategoryKeyStatus",
    "CategoryValueList",
    "CloudInitMetadata",
    "ClusterIntent",
    "ClusterListIntent",
    "DSMetadata",
    "ErrorResponse",
    "ExecutionContext",
    "ImageIntent",
    "ImageListIntent",
    "ListMetadata",
    "Metadata",
    "PageableList",
    "PowerState",
    "ProjectIntent",
    "ProjectListIntent",
    "Reference",
    "SubnetIntent",
    "SubnetListIntent",
    "Task",
    "TaskIntent",
    "TaskListIntent",
    "VMIntent",
    "VMListIntent",
    "VMRecoveryPointIntent",
    "VMRecoveryPointListIntent",
    "VMRevertRequest",
    "VMSnapshotIntent",
    "VMSnapshotListIntent",
]
