"""Integration tests for requests routed to a cluster's own endpoint."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixCancelledError
from nutanix_client.core.errors import NutanixRequestBuildError
from nutanix_client.core.errors import NutanixRequestError
from nutanix_client.core.errors import NutanixResponseError
from nutanix_client.core.errors import NutanixStatusError
from nutanix_client.schemas.v2 import PowerState
from nutanix_client.schemas.vm import VMIntent
from nutanix_client.schemas.vm import VMRevertRequest

PRIMARY = "https://prism.example.com:9440"
CLUSTER_BODY = {
    "metadata": {"kind": "cluster", "uuid": "cluster-1"},
    "spec": {"name": "pe-01", "resources": {"network": {"external_ip": "10.1.2.3"}}},
    "status": {"state": "COMPLETE"},
}
VM = VMIntent.model_validate(
    {
        "metadata": {"kind": "vm", "uuid": "vm-1"},
        "spec": {"name": "web-01", "cluster_reference": {"kind": "cluster", "uuid": "cluster-1"}},
    }
)


def test_set_power_state_resolves_cluster_then_uses_legacy_gateway(make_client, make_response) -> None:
    client, session = make_client(
        [make_response(200, CLUSTER_BODY), make_response(201, {"task_uuid": "task-power"})]
    )

    task = client.vm.set_power_state(PowerState.ON, VM)

    assert task.task_uuid == "task-power"
    lookup, action = session.calls
    assert lookup["method"] == "GET"
    assert lookup["url"] == f"{PRIMARY}/api/nutanix/v3/clusters/cluster-1"
    assert action["url"] == "https://10.1.2.3:9440/PrismGateway/services/rest/v2.0/vms/vm-1/set_power_state"
    assert json.loads(action["data"]) == {"transition": "ON"}
    assert action["auth"].username == "admin"


def test_revert_targets_cluster_v3_endpoint(make_client, make_response) -> None:
    client, session = make_client(
        [make_response(200, CLUSTER_BODY), make_response(202, {"task_uuid": "task-revert"})]
    )

    task = client.vm.revert_to_recovery_point(VM, VMRevertRequest(vm_recovery_point_uuid="rp-9"))

    assert task.task_uuid == "task-revert"
    assert session.calls[1]["url"] == "https://10.1.2.3:9440/api/nutanix/v3/vms/vm-1/revert"
    assert session.calls[1]["json"] == {"vm_recovery_point_uuid": "rp-9"}


def test_cluster_lookup_errors_propagate_unchanged(make_client, make_response) -> None:
    client, session = make_client([make_response(401, b"unauthorized")])

    with pytest.raises(NutanixStatusError) as exc_info:
        client.vm.set_power_state(PowerState.OFF, VM)

    assert exc_info.value.status_code == 401
    assert len(session.calls) == 1


def test_cluster_without_address_is_rejected(make_client, make_response) -> None:
    client, session = make_client([make_response(200, {"metadata": {"uuid": "cluster-1"}})])

    with pytest.raises(NutanixResponseError):
        client.resolve_cluster_address("cluster-1")

    assert len(session.calls) == 1


def test_vm_without_cluster_reference_sends_nothing(make_client) -> None:
    client, session = make_client([])

    with pytest.raises(NutanixRequestBuildError):
        client.vm.set_power_state("ON", VMIntent.model_validate({"metadata": {"uuid": "vm-1"}}))

    assert session.calls == []


def test_cancelled_context_aborts_before_the_cluster_lookup(make_client) -> None:
    client, session = make_client([])
    ctx = RequestContext()
    ctx.cancel()

    with pytest.raises(NutanixCancelledError):
        client.vm.set_power_state(PowerState.ON, VM, ctx=ctx)

    assert session.calls == []


def test_context_cancelled_during_lookup_stops_the_action(make_client, make_response) -> None:
    ctx = RequestContext()

    def responder(call: dict[str, Any]) -> requests.Response:
        ctx.cancel()
        return make_response(200, CLUSTER_BODY)

    client, session = make_client(responder)

    with pytest.raises(NutanixCancelledError):
        client.vm.revert_to_recovery_point(VM, VMRevertRequest(vm_recovery_point_uuid="rp-1"), ctx=ctx)

    assert len(session.calls) == 1


class _CancellingBody:
    """Response body that cancels the context as soon as it is first read."""

    def __init__(self, ctx: RequestContext, payload: bytes) -> None:
        self._ctx = ctx
        self._payload = payload
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        self._ctx.cancel()
        chunk, self._payload = self._payload, b""
        return chunk

    def close(self) -> None:
        self.closed = True


def test_context_cancelled_while_reading_body_stops_decoding(make_client, make_response) -> None:
    ctx = RequestContext()
    body = _CancellingBody(ctx, json.dumps(CLUSTER_BODY).encode("utf-8"))
    response = make_response(200, url=f"{PRIMARY}/api/nutanix/v3/clusters/cluster-1")
    response.raw = body
    client, session = make_client([response])

    with pytest.raises(NutanixCancelledError):
        client.cluster.get_by_uuid("cluster-1", ctx=ctx)

    assert len(session.calls) == 1
    assert body.closed is True


def test_transport_failures_are_wrapped(make_client) -> None:
    def responder(_: dict[str, Any]) -> requests.Response:
        raise requests.ConnectionError("connection refused")

    client, _ = make_client(responder)

    with pytest.raises(NutanixRequestError) as exc_info:
        client.cluster.get_by_uuid("cluster-1")

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_deadline_clamps_transport_timeout(make_client, make_response) -> None:
    client, session = make_client([make_response(200, CLUSTER_BODY)], timeout_seconds=30.0)

    client.cluster.get_by_uuid("cluster-1", ctx=RequestContext(timeout_seconds=2.0))

    assert 0 < session.calls[0]["timeout"] <= 2.0


def test_tls_verification_can_be_disabled(make_client, make_response) -> None:
    client, session = make_client([make_response(200, CLUSTER_BODY)], verify_tls=False)

    client.cluster.get_by_uuid("cluster-1")

    assert session.calls[0]["verify"] is False
