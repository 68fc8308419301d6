"""Charge-log head and tier line formats."""

from __future__ import annotations

from chargestats.domain.models import HeadFormat
from chargestats.scanning import ScanFormat


_BASELINE_FIELDS = (
    "adapter_type",
    "adapter_voltage",
    "adapter_amperage",
    "ssoc_in",
    "voltage_in",
    "ssoc_out",
    "voltage_out",
)

# Newer head formats are strict supersets of older ones; keep richest first.
HEAD_FORMATS: tuple[ScanFormat, ...] = (
    ScanFormat(
        name=HeadFormat.CSI,
        template="%d,%d,%d, %d,%d,%d,%d %d %d,%d",
        field_names=_BASELINE_FIELDS + ("charge_capacity", "csi_aggregate_status", "csi_aggregate_type"),
    ),
    ScanFormat(
        name=HeadFormat.AACR,
        template="%d,%d,%d, %d,%d,%d,%d %d",
        field_names=_BASELINE_FIELDS + ("charge_capacity",),
    ),
    ScanFormat(
        name=HeadFormat.BASELINE,
        template="%d,%d,%d, %d,%d,%d,%d",
        field_names=_BASELINE_FIELDS,
    ),
)

TIER_FORMAT = ScanFormat(
    name="voltage_tier",
    template="%d, %f,%d,%d, %d,%d,%d, %d,%d,%d, %d,%d,%d, %d,%d,%d",
    field_names=(
        "voltage_tier",
        "soc_in",
        "cc_in",
        "temp_in",
        "time_fast_secs",
        "time_taper_secs",
        "time_other_secs",
        "temp_min",
        "temp_avg",
        "temp_max",
        "ibatt_min",
        "ibatt_avg",
        "ibatt_max",
        "icl_min",
        "icl_avg",
        "icl_max",
    ),
)
