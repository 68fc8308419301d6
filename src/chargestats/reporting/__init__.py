"""Telemetry schema mapping and collector delivery."""

from chargestats.reporting.mapping import TelemetryEvent, map_charge_session, map_voltage_tier
from chargestats.reporting.reporter import DeliveryMetrics, JsonLinesCollector, Reporter, StatsCollector
from chargestats.reporting.schema import (
    CHARGE_STATS_SCHEMA,
    SCHEMA_OFFSET,
    VOLTAGE_TIER_SCHEMA,
    AtomId,
    ChargeStatsField,
    EventSchema,
    VoltageTierField,
    build_schema,
)

__all__ = [
    "CHARGE_STATS_SCHEMA",
    "SCHEMA_OFFSET",
    "VOLTAGE_TIER_SCHEMA",
    "AtomId",
    "ChargeStatsField",
    "DeliveryMetrics",
    "EventSchema",
    "JsonLinesCollector",
    "Reporter",
    "StatsCollector",
    "TelemetryEvent",
    "VoltageTierField",
    "build_schema",
    "map_charge_session",
    "map_voltage_tier",
]
