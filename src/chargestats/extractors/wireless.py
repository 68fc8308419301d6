"""Wireless charging log extraction.

The wireless log starts with two head lines, ``A:<mode>`` (adapter type) and
``D:<7 hex words>`` (adapter capabilities and receiver state), followed by
one ``<soc>:<pout_min>, <pout_avg>,<pout_max>, <of_freq>`` row per
state-of-charge step.
"""

from __future__ import annotations

import logging

import numpy as np

from chargestats.domain.models import AdapterType, WirelessTierState, WirelessTierStats
from chargestats.integration.sources import LogSource
from chargestats.scanning import ScanFormat, int_values


logger = logging.getLogger(__name__)

WIRELESS_TYPE_FORMAT = ScanFormat(name="wireless_type", template="A:%d", field_names=("sys_mode",))

WIRELESS_CAPABILITIES_FORMAT = ScanFormat(
    name="wireless_capabilities",
    template="D:%x,%x,%x,%x,%x, %x,%x",
    field_names=("ac0", "ac1", "ac2", "ac3", "ac4", "rs0", "rs1"),
)

WIRELESS_SOC_FORMAT = ScanFormat(
    name="wireless_soc",
    template="%d:%d, %d,%d, %d",
    field_names=("soc", "pout_min", "pout_avg", "pout_max", "of_freq"),
)

_SYS_MODE_TO_ADAPTER: dict[int, AdapterType] = {
    0x01: AdapterType.WPC_BPP,
    0x02: AdapterType.WPC_EPP,
    0x03: AdapterType.WPC_L7,
    0xA0: AdapterType.WPC_10W,
    0xA1: AdapterType.WPC_BPP,
    0xA2: AdapterType.WPC_GPP,
    0xA3: AdapterType.WPC_EPP,
    0xB0: AdapterType.L7,
    0xE0: AdapterType.DL,
}

_HEAD_LINE_COUNT = 2


class WirelessChargeExtractor:
    """Parse wireless head lines and per-tier power statistics."""

    def check_contents_and_ack(self, source: LogSource) -> str | None:
        """Consume the wireless log; `None` when there is no wireless session."""
        return source.consume()

    def translate_sys_mode(self, sys_mode: int) -> AdapterType:
        """Map a wireless charger system mode onto the adapter-type enum."""
        return _SYS_MODE_TO_ADAPTER.get(sys_mode, AdapterType.WLC)

    @staticmethod
    def head_lines(payload: str) -> tuple[str, str]:
        """Return the adapter-type and capabilities lines of a wireless log."""
        lines = payload.splitlines()
        type_line = lines[0] if lines else ""
        caps_line = lines[1] if len(lines) > 1 else ""
        return type_line, caps_line

    def parse_type_line(self, line: str) -> AdapterType | None:
        values = WIRELESS_TYPE_FORMAT.scan(line)
        if values is None:
            return None
        return self.translate_sys_mode(int(values["sys_mode"]))

    @staticmethod
    def parse_capabilities_line(line: str) -> tuple[tuple[int, ...], tuple[int, ...]] | None:
        """Split the capabilities line into 5 capability and 2 receiver-state words."""
        values = WIRELESS_CAPABILITIES_FORMAT.scan(line)
        if values is None:
            return None
        return (
            int_values(values, ("ac0", "ac1", "ac2", "ac3", "ac4")),
            int_values(values, ("rs0", "rs1")),
        )

    def calculate_tier_stats(
        self,
        state: WirelessTierState,
        soc: int,
        payload: str,
    ) -> tuple[WirelessTierStats, WirelessTierState]:
        """Aggregate power rows from the last tier soc up to `soc`.

        Rows in ``[state.tier_soc, soc]`` form the window: minimum of the
        per-row minimum, rounded mean of the averages, maximum of the maxima and
        rounded mean operating frequency. Malformed rows are skipped and an
        empty window yields zeros. The returned state starts the next window
        just past `soc` and never moves it backwards.
        """
        rows: list[tuple[int, ...]] = []
        for line in payload.splitlines()[_HEAD_LINE_COUNT:]:
            values = WIRELESS_SOC_FORMAT.scan(line)
            if values is None:
                continue
            row_soc = int(values["soc"])
            if state.tier_soc <= row_soc <= soc:
                rows.append(int_values(values, ("pout_min", "pout_avg", "pout_max", "of_freq")))

        next_state = WirelessTierState(tier_soc=max(state.tier_soc, soc + 1))
        if not rows:
            logger.debug("wlc: no power rows for soc %d..%d", state.tier_soc, soc)
            return WirelessTierStats(), next_state

        table = np.asarray(rows, dtype=np.int64)
        stats = WirelessTierStats(
            pout_min=int(table[:, 0].min()),
            pout_avg=int(np.rint(table[:, 1].mean())),
            pout_max=int(table[:, 2].max()),
            of_freq=int(np.rint(table[:, 3].mean())),
        )
        return stats, next_state
