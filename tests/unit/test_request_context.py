"""Unit tests for request cancellation and deadlines."""

from __future__ import annotations

import pytest

from nutanix_client.core.context import RequestContext
from nutanix_client.core.errors import NutanixCancelledError
from nutanix_client.core.errors import NutanixDeadlineExceededError


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_cancel_is_observed_by_check() -> None:
    ctx = RequestContext()
    ctx.check()

    ctx.cancel()

    assert ctx.cancelled
    with pytest.raises(NutanixCancelledError):
        ctx.check()


def test_deadline_clamps_timeout_and_expires() -> None:
    clock = _Clock()
    ctx = RequestContext(timeout_seconds=5.0, clock=clock)

    assert ctx.effective_timeout(30.0) == 5.0
    assert ctx.effective_timeout(None) == 5.0
    clock.now += 4.0
    assert ctx.effective_timeout(30.0) == 1.0

    clock.now += 1.0
    with pytest.raises(NutanixDeadlineExceededError):
        ctx.check()


def test_context_without_deadline_keeps_default_timeout() -> None:
    assert RequestContext().effective_timeout(12.0) == 12.0


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(ValueError):
        RequestContext(timeout_seconds=0)
