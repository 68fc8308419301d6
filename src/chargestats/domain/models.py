"""Core domain models for charge-session telemetry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class AdapterType(IntEnum):
    """Adapter codes understood by the stats collector schema."""

    UNKNOWN = 0
    USB = 1
    USB_SDP = 2
    USB_DCP = 3
    USB_CDP = 4
    OCP = 5
    USB_PD = 6
    USB_PD_PPS = 7
    USB_C = 8
    USB_C_1_5 = 9
    USB_C_3 = 10
    USB_BRICKID = 11
    USB_HVDCP = 12
    USB_HVDCP3 = 13
    FLOAT = 14
    WLC = 15
    WLC_EPP = 16
    WLC_SPP = 17
    GPP = 18
    TEN_W = 19
    L7 = 20
    DL = 21
    WPC_EPP = 22
    WPC_GPP = 23
    WPC_10W = 24
    WPC_BPP = 25
    WPC_L7 = 26
    EXT = 27
    EXT1 = 28
    EXT2 = 29
    EXT_UNKNOWN = 30


class HeadFormat(StrEnum):
    """Charge-log head line revisions, richest first."""

    CSI = "csi"
    AACR = "aacr"
    BASELINE = "baseline"


ADAPTER_CAPABILITY_WORDS = 5
RECEIVER_STATE_WORDS = 2


@dataclass(frozen=True, slots=True)
class ChargeSession:
    """One charging session close-out parsed from the charge log head line."""

    adapter_type: int
    adapter_voltage: int
    adapter_amperage: int
    ssoc_in: int
    voltage_in: int
    ssoc_out: int
    voltage_out: int
    charge_capacity: int = 0
    csi_aggregate_status: int = 0
    csi_aggregate_type: int = 0
    adapter_capabilities: tuple[int, ...] = (0,) * ADAPTER_CAPABILITY_WORDS
    receiver_states: tuple[int, ...] = (0,) * RECEIVER_STATE_WORDS
    head_format: HeadFormat = HeadFormat.BASELINE
    has_extended_fields: bool = False

    def __post_init__(self) -> None:
        if len(self.adapter_capabilities) != ADAPTER_CAPABILITY_WORDS:
            raise ValueError(f"adapter_capabilities must hold {ADAPTER_CAPABILITY_WORDS} words")
        if len(self.receiver_states) != RECEIVER_STATE_WORDS:
            raise ValueError(f"receiver_states must hold {RECEIVER_STATE_WORDS} words")


@dataclass(frozen=True, slots=True)
class WirelessTierStats:
    """Wireless power-out statistics for one voltage tier."""

    pout_min: int = 0
    pout_avg: int = 0
    pout_max: int = 0
    of_freq: int = 0


@dataclass(frozen=True, slots=True)
class WirelessTierState:
    """Last tier state-of-charge consumed from the wireless log."""

    tier_soc: int = 0

    def __post_init__(self) -> None:
        if self.tier_soc < 0:
            raise ValueError("tier_soc must be >= 0")


@dataclass(frozen=True, slots=True)
class VoltageTierSample:
    """Battery and adapter behavior during a single charging-curve tier."""

    voltage_tier: int
    soc_in: float
    cc_in: int
    temp_in: int
    time_fast_secs: int
    time_taper_secs: int
    time_other_secs: int
    temp_min: int
    temp_avg: int
    temp_max: int
    ibatt_min: int
    ibatt_avg: int
    ibatt_max: int
    icl_min: int
    icl_avg: int
    icl_max: int
    wireless: WirelessTierStats | None = None
