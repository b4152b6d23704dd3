"""Pydantic schemas for cluster payloads."""

from __future__ import annotations

from nutanix_client.schemas.common import EntityStatus
from nutanix_client.schemas.common import Metadata
from nutanix_client.schemas.common import NutanixModel
from nutanix_client.schemas.common import PageableList


class ClusterNetwork(NutanixModel):
    external_ip: str | None = None
    external_data_services_ip: str | None = None
    name_server_ip_list: list[str] | None = None
    ntp_server_ip_list: list[str] | None = None


class ClusterConfig(NutanixModel):
    service_list: list[str] | None = None
    software_map: dict[str, dict[str, str | None]] | None = None


class ClusterResources(NutanixModel):
    network: ClusterNetwork | None = None
    config: ClusterConfig | None = None


class Cluster(NutanixModel):
    name: str | None = None
    resources: ClusterResources | None = None


class ClusterDefStatus(EntityStatus):
    resources: ClusterResources | None = None


class ClusterIntent(NutanixModel):
    """Cluster as returned by ``GET /clusters/{uuid}``."""

    api_version: str | None = None
    metadata: Metadata | None = None
    spec: Cluster | None = None
    status: ClusterDefStatus | None = None

    @property
    def external_ip(self) -> str | None:
        """Externally reachable management address of this cluster."""
        for resources in (
            self.spec.resources if self.spec else None,
            self.status.resources if self.status else None,
        ):
            if resources and resources.network and resources.network.external_ip:
                return resources.network.external_ip
        return None


class ClusterListIntent(PageableList[ClusterIntent]):
    pass
