"""Time reference for the ledger.

The ledger never reads wall-clock time directly.  It asks a Clock for an
integer time reference: a block height, or unix seconds.  Issuance dates,
expiration checks and audit timestamps all use that one value, so tests
control time completely with a ManualClock.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def current_time(self) -> int: ...


class ManualClock:
    """Block-height style clock, advanced explicitly.  Never moves backwards."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("clock cannot start below zero")
        self._now = start

    def current_time(self) -> int:
        return self._now

    def advance(self, steps: int = 1) -> int:
        if steps < 0:
            raise ValueError("clock cannot move backwards")
        self._now += steps
        return self._now

    def set(self, now: int) -> None:
        if now < self._now:
            raise ValueError(f"clock cannot move backwards ({now} < {self._now})")
        self._now = now


class SystemClock:
    """Unix seconds, truncated to an integer."""

    def current_time(self) -> int:
        return int(time.time())
