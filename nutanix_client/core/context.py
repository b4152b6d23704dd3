"""Caller-supplied cancellation and deadline context."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from nutanix_client.core.errors import NutanixCancelledError
from nutanix_client.core.errors import NutanixDeadlineExceededError


class RequestContext:
    """Cancellation flag plus optional deadline shared by every request of one call.

    A single context can be handed to one logical operation (a list that pages,
    a cluster-scoped call that resolves its endpoint first) and cancelled from
    another thread. The client checks it before and after every physical request
    and clamps each transport timeout to the remaining deadline.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self._clock = clock
        self._deadline = None if timeout_seconds is None else clock() + timeout_seconds
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` without one."""
        if self._deadline is None:
            return None
        return self._deadline - self._clock()

    def check(self) -> None:
        """Raise if the context is cancelled or past its deadline."""
        if self._cancelled.is_set():
            raise NutanixCancelledError("Request context was cancelled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise NutanixDeadlineExceededError("Request context deadline exceeded")

    def effective_timeout(self, default: float | None) -> float | None:
        remaining = self.remaining()
        if remaining is None:
            return default
        if default is None:
            return remaining
        return min(default, remaining)
