"""Cluster resource client."""

from __future__ import annotations

from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.resources.base import UpdateMixin
from nutanix_client.schemas.cluster import ClusterIntent
from nutanix_client.schemas.cluster import ClusterListIntent


class ClusterClient(UpdateMixin[ClusterIntent], NamedResourceClient[ClusterIntent, ClusterListIntent]):
    kind = "cluster"
    base_path = "/clusters"
    entity_type = ClusterIntent
    list_type = ClusterListIntent
