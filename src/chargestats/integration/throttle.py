"""Rolling-window emission throttle for charge-session reports."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum


DEFAULT_WINDOW_SECS = 15


class ThrottleReason(StrEnum):
    """Why an invocation was accepted or rejected by the throttle."""

    FIRST_REPORT = "first_report"
    WINDOW_ELAPSED = "window_elapsed"
    WINDOW_ACTIVE = "window_active"
    CLOCK_NOT_READY = "clock_not_ready"


@dataclass(frozen=True, slots=True)
class ThrottlePolicy:
    """Runtime policy for the rolling-window filter."""

    window_secs: int = DEFAULT_WINDOW_SECS

    def __post_init__(self) -> None:
        if self.window_secs <= 0:
            raise ValueError("window_secs must be > 0")


@dataclass(frozen=True, slots=True)
class ThrottleState:
    """Boot time of the last accepted report; `None` until one is accepted."""

    last_accepted_secs: int | None = None

    @property
    def idle(self) -> bool:
        return self.last_accepted_secs is None


@dataclass(frozen=True, slots=True)
class ThrottleDecision:
    """Outcome of one throttle check and the state to carry forward."""

    accepted: bool
    reason: ThrottleReason
    state: ThrottleState


class EmissionThrottle:
    """Accept at most one report per rolling window of boot time.

    A clock reading of zero means boot time is not available yet and is always
    rejected, so an unready clock is never mistaken for an idle throttle.
    """

    def __init__(self, policy: ThrottlePolicy | None = None) -> None:
        self._policy = policy or ThrottlePolicy()

    @property
    def policy(self) -> ThrottlePolicy:
        return self._policy

    def decide(self, state: ThrottleState, now_secs: int) -> ThrottleDecision:
        """Return the decision for `now_secs` given the carried-over state."""
        if now_secs == 0:
            return ThrottleDecision(accepted=False, reason=ThrottleReason.CLOCK_NOT_READY, state=state)

        if state.last_accepted_secs is None:
            return ThrottleDecision(
                accepted=True,
                reason=ThrottleReason.FIRST_REPORT,
                state=ThrottleState(last_accepted_secs=now_secs),
            )

        if now_secs >= state.last_accepted_secs + self._policy.window_secs:
            return ThrottleDecision(
                accepted=True,
                reason=ThrottleReason.WINDOW_ELAPSED,
                state=ThrottleState(last_accepted_secs=now_secs),
            )

        return ThrottleDecision(accepted=False, reason=ThrottleReason.WINDOW_ACTIVE, state=state)


class BootClock:
    """Whole seconds since boot, including time spent suspended."""

    def __init__(self) -> None:
        self._clock_id = getattr(time, "CLOCK_BOOTTIME", time.CLOCK_MONOTONIC)

    def now_secs(self) -> int:
        return int(time.clock_gettime(self._clock_id))
