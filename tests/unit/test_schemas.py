"""Unit tests for resource schema serialization."""

from __future__ import annotations

import base64
import json
import uuid

from nutanix_client.schemas.cluster import ClusterIntent
from nutanix_client.schemas.vm import CloudInitMetadata
from nutanix_client.schemas.vm import VMIntent
from nutanix_client.transport.builder import encode_json_body


def test_encoding_omits_unset_fields() -> None:
    payload = json.loads(encode_json_body(VMIntent.model_validate({"spec": {"name": "web"}})))

    assert payload == {"spec": {"name": "web"}}


def test_cluster_external_ip_prefers_spec_then_status() -> None:
    from_spec = ClusterIntent.model_validate({"spec": {"resources": {"network": {"external_ip": "10.0.0.1"}}}})
    from_status = ClusterIntent.model_validate({"status": {"resources": {"network": {"external_ip": "10.0.0.2"}}}})

    assert from_spec.external_ip == "10.0.0.1"
    assert from_status.external_ip == "10.0.0.2"
    assert ClusterIntent().external_ip is None


def test_cloud_init_metadata_encodes_with_generated_uuid() -> None:
    metadata = CloudInitMetadata(hostname="web-01", ssh_authorized_key_map={"admin": "ssh-ed25519 AAAA"})

    decoded = json.loads(base64.b64decode(metadata.to_base64()))

    assert decoded["hostname"] == "web-01"
    assert decoded["public_keys"] == {"admin": "ssh-ed25519 AAAA"}
    assert uuid.UUID(decoded["uuid"])
