"""Deferred-call queue drained at the host's idle point."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable


@dataclass
class DeferredCall:
    label: str
    func: Callable[[], None]


class DeferredQueue:
    """Process-wide FIFO of zero-argument calls.

    :meth:`drain` runs the calls that were queued when it started, in
    submission order.  Calls queued while draining wait for the next drain.
    """

    def __init__(self) -> None:
        self._queue: deque[DeferredCall] = deque()

    def call_later(self, func: Callable[[], None], label: str | None = None) -> DeferredCall:
        call = DeferredCall(label=label or getattr(func, "__name__", "deferred"), func=func)
        self._queue.append(call)
        return call

    def drain(self) -> int:
        """Run one batch of queued calls and return how many ran.

        An exception from a call propagates; calls after it stay queued.
        """
        batch = len(self._queue)
        for _ in range(batch):
            call = self._queue.popleft()
            call.func()
        return batch

    @property
    def pending(self) -> list[str]:
        return [call.label for call in self._queue]

    def __len__(self) -> int:
        return len(self._queue)
