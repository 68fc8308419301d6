"""Per-invocation charge stats pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from chargestats.domain.models import WirelessTierState
from chargestats.extractors.pca import PcaChargeExtractor
from chargestats.extractors.wireless import WirelessChargeExtractor
from chargestats.integration.sources import ChargeLogSources, LogSource, is_consumed
from chargestats.integration.throttle import (
    BootClock,
    EmissionThrottle,
    ThrottleReason,
    ThrottleState,
)
from chargestats.parsing.session import parse_charge_session
from chargestats.parsing.tier import parse_voltage_tier
from chargestats.pipeline.config import PipelineConfig
from chargestats.reporting.reporter import Reporter


logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now_secs(self) -> int: ...


class InvocationOutcome(StrEnum):
    """How one invocation ended."""

    REPORTED = "reported"
    SOURCE_UNAVAILABLE = "source_unavailable"
    NO_DATA = "no_data"
    THROTTLED = "throttled"


@dataclass(frozen=True, slots=True)
class InvocationReport:
    """Counters for one `check_and_report` call."""

    outcome: InvocationOutcome
    throttle_reason: ThrottleReason | None = None
    session_reported: bool = False
    session_parsed: bool = False
    tier_samples_reported: int = 0
    lines_dropped: int = 0
    delivery_failures: int = 0


@dataclass(slots=True)
class _Tally:
    session_parsed: bool = False
    session_reported: bool = False
    tiers_reported: int = 0
    lines_dropped: int = 0
    delivery_failures: int = 0


class ChargeStatsPipeline:
    """Sequence source reads, throttling, parsing and reporting.

    The pipeline owns the cross-invocation throttle and wireless tier states.
    Invocations must not overlap; the external trigger serializes them.
    """

    def __init__(
        self,
        sources: ChargeLogSources,
        reporter: Reporter,
        *,
        clock: Clock | None = None,
        throttle: EmissionThrottle | None = None,
        wireless: WirelessChargeExtractor | None = None,
        pca: PcaChargeExtractor | None = None,
    ) -> None:
        self._sources = sources
        self._reporter = reporter
        self._clock = clock or BootClock()
        self._throttle = throttle or EmissionThrottle()
        self._wireless = wireless or WirelessChargeExtractor()
        self._pca = pca or PcaChargeExtractor()
        self._throttle_state = ThrottleState()
        self._wireless_state = WirelessTierState()

    @classmethod
    def from_config(
        cls,
        config: PipelineConfig,
        reporter: Reporter,
        *,
        clock: Clock | None = None,
    ) -> ChargeStatsPipeline:
        return cls(
            ChargeLogSources.from_paths(config.sources),
            reporter,
            clock=clock,
            throttle=EmissionThrottle(config.throttle),
        )

    @property
    def throttle_state(self) -> ThrottleState:
        return self._throttle_state

    @property
    def wireless_state(self) -> WirelessTierState:
        return self._wireless_state

    def check_and_report(self) -> InvocationReport:
        """Run one invocation against the configured log sources."""
        primary = self._sources.charge_stats
        try:
            contents = primary.read_text()
        except OSError as exc:
            logger.error("Unable to read %s - %s", primary.path, exc)
            return InvocationReport(outcome=InvocationOutcome.SOURCE_UNAVAILABLE)

        lines = [] if is_consumed(contents) else contents.splitlines()
        if not lines:
            logger.error("Unable to read first line")
            return InvocationReport(outcome=InvocationOutcome.NO_DATA)
        head_line, tier_lines = lines[0], lines[1:]

        primary.clear()

        decision = self._throttle.decide(self._throttle_state, self._clock.now_secs())
        self._throttle_state = decision.state
        if not decision.accepted:
            if decision.reason == ThrottleReason.CLOCK_NOT_READY:
                logger.error("Current boot time is zero!")
            logger.warning("Too many log events; event ignored.")
            return InvocationReport(outcome=InvocationOutcome.THROTTLED, throttle_reason=decision.reason)

        pca_line = self._pca.check_contents_and_ack(self._sources.pca)

        wireless_payload = self._wireless.check_contents_and_ack(self._sources.wireless)
        wireless_type_line = wireless_caps_line = None
        if wireless_payload is not None:
            wireless_type_line, wireless_caps_line = self._wireless.head_lines(wireless_payload)
            self._wireless_state = WirelessTierState()

        tally = _Tally()
        session = parse_charge_session(
            head_line,
            wireless_type_line=wireless_type_line,
            wireless_caps_line=wireless_caps_line,
            pca_line=pca_line,
            charger_metrics=self._sources.gcharger.peek(),
            wireless=self._wireless,
            pca=self._pca,
        )
        if session is None:
            tally.lines_dropped += 1
        else:
            tally.session_parsed = True
            tally.session_reported = self._reporter.report_session(session)
            if not tally.session_reported:
                tally.delivery_failures += 1

        for line in tier_lines:
            self._report_tier_line(line, tally, wireless_payload)

        for source in (self._sources.thermal, self._sources.gcharger, self._sources.dual_battery):
            self._report_tier_source(source, tally)

        return InvocationReport(
            outcome=InvocationOutcome.REPORTED,
            throttle_reason=decision.reason,
            session_parsed=tally.session_parsed,
            session_reported=tally.session_reported,
            tier_samples_reported=tally.tiers_reported,
            lines_dropped=tally.lines_dropped,
            delivery_failures=tally.delivery_failures,
        )

    def _report_tier_source(self, source: LogSource, tally: _Tally) -> None:
        payload = source.consume()
        if payload is None:
            return
        for line in payload.splitlines():
            self._report_tier_line(line, tally, None)

    def _report_tier_line(self, line: str, tally: _Tally, wireless_payload: str | None) -> None:
        if wireless_payload is None:
            sample, _ = parse_voltage_tier(line)
        else:
            sample, self._wireless_state = parse_voltage_tier(
                line,
                wireless_state=self._wireless_state,
                wireless_payload=wireless_payload,
                wireless=self._wireless,
            )
        if sample is None:
            if line.strip():
                tally.lines_dropped += 1
            return
        if self._reporter.report_tier(sample):
            tally.tiers_reported += 1
        else:
            tally.delivery_failures += 1
