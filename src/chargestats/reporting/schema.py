"""Fixed telemetry schema for charge-session and voltage-tier events.

Each event is a dense value array. A field's slot is its declared field
identifier minus `SCHEMA_OFFSET`; identifiers below the offset are reserved by
the collector envelope.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum


SCHEMA_OFFSET = 2

TelemetryValue = int | float


class AtomId(IntEnum):
    """Collector event kinds."""

    CHARGE_STATS = 105000
    VOLTAGE_TIER_STATS = 105001


class ChargeStatsField(IntEnum):
    """Declared field identifiers of the charge-session event."""

    ADAPTER_TYPE = 2
    ADAPTER_VOLTAGE = 3
    ADAPTER_AMPERAGE = 4
    SSOC_IN = 5
    VOLTAGE_IN = 6
    SSOC_OUT = 7
    VOLTAGE_OUT = 8
    CHARGE_CAPACITY = 9
    CSI_AGGREGATE_STATUS = 10
    CSI_AGGREGATE_TYPE = 11
    ADAPTER_CAPABILITIES_0 = 12
    ADAPTER_CAPABILITIES_1 = 13
    ADAPTER_CAPABILITIES_2 = 14
    ADAPTER_CAPABILITIES_3 = 15
    ADAPTER_CAPABILITIES_4 = 16
    RECEIVER_STATE_0 = 17
    RECEIVER_STATE_1 = 18


class VoltageTierField(IntEnum):
    """Declared field identifiers of the voltage-tier event."""

    VOLTAGE_TIER = 2
    SOC_IN = 3
    CC_IN = 4
    TEMP_IN = 5
    TIME_FAST_SECS = 6
    TIME_TAPER_SECS = 7
    TIME_OTHER_SECS = 8
    TEMP_MIN = 9
    TEMP_AVG = 10
    TEMP_MAX = 11
    IBATT_MIN = 12
    IBATT_AVG = 13
    IBATT_MAX = 14
    ICL_MIN = 15
    ICL_AVG = 16
    ICL_MAX = 17
    MIN_ADAPTER_POWER_OUT = 18
    TIME_AVG_ADAPTER_POWER_OUT = 19
    MAX_ADAPTER_POWER_OUT = 20
    CHARGING_OPERATING_POINT = 21


@dataclass(frozen=True, slots=True)
class EventSchema:
    """Field order and slot table for one event kind."""

    atom_id: AtomId
    fields: tuple[IntEnum, ...]
    slots: Mapping[IntEnum, int]

    @property
    def size(self) -> int:
        return len(self.fields)

    def dense_values(self, field_values: Mapping[IntEnum, TelemetryValue]) -> tuple[TelemetryValue, ...]:
        """Place values into their slots; unset slots stay 0."""
        values: list[TelemetryValue] = [0] * self.size
        for schema_field, value in field_values.items():
            slot = self.slots.get(schema_field)
            if slot is None:
                raise KeyError(f"{schema_field!r} is not part of {self.atom_id.name}")
            values[slot] = value
        return tuple(values)


def build_schema(atom_id: AtomId, fields: Sequence[IntEnum]) -> EventSchema:
    """Build the slot table once and verify it is dense and collision free."""
    slots = {schema_field: int(schema_field) - SCHEMA_OFFSET for schema_field in fields}
    if sorted(slots.values()) != list(range(len(fields))):
        raise ValueError(f"{atom_id.name} field identifiers do not form a dense range")
    return EventSchema(atom_id=atom_id, fields=tuple(fields), slots=slots)


CHARGE_STATS_SCHEMA = build_schema(AtomId.CHARGE_STATS, tuple(ChargeStatsField))
VOLTAGE_TIER_SCHEMA = build_schema(AtomId.VOLTAGE_TIER_STATS, tuple(VoltageTierField))
