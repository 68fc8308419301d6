"""Best-effort delivery of telemetry events to the stats collector."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Protocol, TextIO

from chargestats.domain.models import ChargeSession, VoltageTierSample
from chargestats.reporting.mapping import TelemetryEvent, map_charge_session, map_voltage_tier


logger = logging.getLogger(__name__)


class StatsCollector(Protocol):
    """External stats service; returns whether the event was accepted."""

    def report_event(self, event: TelemetryEvent) -> bool: ...


class JsonLinesCollector:
    """Collector that writes one JSON object per event to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def report_event(self, event: TelemetryEvent) -> bool:
        self._stream.write(json.dumps(event.to_jsonable(), sort_keys=True) + "\n")
        self._stream.flush()
        return True


@dataclass(frozen=True, slots=True)
class DeliveryMetrics:
    """Delivery counters for observability."""

    delivered: int
    failed: int


class Reporter:
    """Map records to events and submit them once, without retry."""

    def __init__(self, collector: StatsCollector) -> None:
        self._collector = collector
        self._delivered = 0
        self._failed = 0

    def report_session(self, session: ChargeSession) -> bool:
        return self._submit(map_charge_session(session), "ChargeStats")

    def report_tier(self, sample: VoltageTierSample) -> bool:
        return self._submit(map_voltage_tier(sample), "VoltageTierStats")

    @property
    def metrics(self) -> DeliveryMetrics:
        return DeliveryMetrics(delivered=self._delivered, failed=self._failed)

    def _submit(self, event: TelemetryEvent, label: str) -> bool:
        try:
            ok = bool(self._collector.report_event(event))
        except OSError as exc:
            logger.error("Unable to report %s to Stats service - %s", label, exc)
            ok = False
        else:
            if not ok:
                logger.error("Unable to report %s to Stats service", label)

        if ok:
            self._delivered += 1
        else:
            self._failed += 1
        return ok
