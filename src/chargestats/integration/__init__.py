"""Log-source access and emission throttling."""

from chargestats.integration.sources import (
    CONSUMED_MARKER,
    ChargeLogSources,
    LogSource,
    SourcePaths,
    is_consumed,
)
from chargestats.integration.throttle import (
    DEFAULT_WINDOW_SECS,
    BootClock,
    EmissionThrottle,
    ThrottleDecision,
    ThrottlePolicy,
    ThrottleReason,
    ThrottleState,
)

__all__ = [
    "CONSUMED_MARKER",
    "DEFAULT_WINDOW_SECS",
    "BootClock",
    "ChargeLogSources",
    "EmissionThrottle",
    "LogSource",
    "SourcePaths",
    "ThrottleDecision",
    "ThrottlePolicy",
    "ThrottleReason",
    "ThrottleState",
    "is_consumed",
]
