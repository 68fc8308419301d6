"""Map parsed charge records onto telemetry events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chargestats.domain.models import ChargeSession, VoltageTierSample
from chargestats.reporting.schema import (
    CHARGE_STATS_SCHEMA,
    VOLTAGE_TIER_SCHEMA,
    AtomId,
    ChargeStatsField as C,
    TelemetryValue,
    VoltageTierField as V,
)


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
    """One dense event submitted to the stats collector."""

    atom_id: AtomId
    values: tuple[TelemetryValue, ...]

    def to_jsonable(self) -> dict[str, object]:
        return {"atom_id": int(self.atom_id), "values": list(self.values)}


_CAPABILITY_FIELDS = (
    C.ADAPTER_CAPABILITIES_0,
    C.ADAPTER_CAPABILITIES_1,
    C.ADAPTER_CAPABILITIES_2,
    C.ADAPTER_CAPABILITIES_3,
    C.ADAPTER_CAPABILITIES_4,
)
_RECEIVER_STATE_FIELDS = (C.RECEIVER_STATE_0, C.RECEIVER_STATE_1)


def map_charge_session(session: ChargeSession) -> TelemetryEvent:
    """Map a charge session; capability words are reported only when extended."""
    field_values: dict[IntEnum, TelemetryValue] = {
        C.ADAPTER_TYPE: int(session.adapter_type),
        C.ADAPTER_VOLTAGE: session.adapter_voltage,
        C.ADAPTER_AMPERAGE: session.adapter_amperage,
        C.SSOC_IN: session.ssoc_in,
        C.VOLTAGE_IN: session.voltage_in,
        C.SSOC_OUT: session.ssoc_out,
        C.VOLTAGE_OUT: session.voltage_out,
        C.CHARGE_CAPACITY: session.charge_capacity,
        C.CSI_AGGREGATE_STATUS: session.csi_aggregate_status,
        C.CSI_AGGREGATE_TYPE: session.csi_aggregate_type,
    }
    if session.has_extended_fields:
        field_values.update(zip(_CAPABILITY_FIELDS, session.adapter_capabilities))
        field_values.update(zip(_RECEIVER_STATE_FIELDS, session.receiver_states))
    return TelemetryEvent(
        atom_id=CHARGE_STATS_SCHEMA.atom_id,
        values=CHARGE_STATS_SCHEMA.dense_values(field_values),
    )


def map_voltage_tier(sample: VoltageTierSample) -> TelemetryEvent:
    """Map a voltage tier sample; `soc_in` is the only floating-point slot."""
    field_values: dict[IntEnum, TelemetryValue] = {
        V.VOLTAGE_TIER: sample.voltage_tier,
        V.SOC_IN: float(sample.soc_in),
        V.CC_IN: sample.cc_in,
        V.TEMP_IN: sample.temp_in,
        V.TIME_FAST_SECS: sample.time_fast_secs,
        V.TIME_TAPER_SECS: sample.time_taper_secs,
        V.TIME_OTHER_SECS: sample.time_other_secs,
        V.TEMP_MIN: sample.temp_min,
        V.TEMP_AVG: sample.temp_avg,
        V.TEMP_MAX: sample.temp_max,
        V.IBATT_MIN: sample.ibatt_min,
        V.IBATT_AVG: sample.ibatt_avg,
        V.IBATT_MAX: sample.ibatt_max,
        V.ICL_MIN: sample.icl_min,
        V.ICL_AVG: sample.icl_avg,
        V.ICL_MAX: sample.icl_max,
    }
    if sample.wireless is not None:
        field_values[V.MIN_ADAPTER_POWER_OUT] = sample.wireless.pout_min
        field_values[V.TIME_AVG_ADAPTER_POWER_OUT] = sample.wireless.pout_avg
        field_values[V.MAX_ADAPTER_POWER_OUT] = sample.wireless.pout_max
        field_values[V.CHARGING_OPERATING_POINT] = sample.wireless.of_freq
    return TelemetryEvent(
        atom_id=VOLTAGE_TIER_SCHEMA.atom_id,
        values=VOLTAGE_TIER_SCHEMA.dense_values(field_values),
    )
