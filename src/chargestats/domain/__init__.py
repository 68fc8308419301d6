"""Domain models for charge sessions and voltage tiers."""

from chargestats.domain.models import (
    ADAPTER_CAPABILITY_WORDS,
    RECEIVER_STATE_WORDS,
    AdapterType,
    ChargeSession,
    HeadFormat,
    VoltageTierSample,
    WirelessTierState,
    WirelessTierStats,
)

__all__ = [
    "ADAPTER_CAPABILITY_WORDS",
    "RECEIVER_STATE_WORDS",
    "AdapterType",
    "ChargeSession",
    "HeadFormat",
    "VoltageTierSample",
    "WirelessTierState",
    "WirelessTierStats",
]
