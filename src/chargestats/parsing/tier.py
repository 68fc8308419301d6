"""Voltage tier line parsing."""

from __future__ import annotations

import logging
import math

from chargestats.domain.models import VoltageTierSample, WirelessTierState
from chargestats.extractors.wireless import WirelessChargeExtractor
from chargestats.parsing.formats import TIER_FORMAT


logger = logging.getLogger(__name__)


def parse_voltage_tier(
    line: str,
    *,
    wireless_state: WirelessTierState | None = None,
    wireless_payload: str = "",
    wireless: WirelessChargeExtractor | None = None,
) -> tuple[VoltageTierSample | None, WirelessTierState | None]:
    """Parse one tier line, attaching wireless stats when a wireless state is given.

    Lines that do not carry all 16 fields, or whose soc is not finite, are dropped; tier logs routinely end
    with blank or partial lines. The returned state is the wireless state to
    use for the next line.
    """
    values = TIER_FORMAT.scan(line)
    if values is None:
        return None, wireless_state
    if not math.isfinite(values["soc_in"]):
        logger.debug("VoltageTierStats: non-finite soc in %s", line)
        return None, wireless_state

    wireless_stats = None
    if wireless_state is not None:
        wireless = wireless or WirelessChargeExtractor()
        wireless_stats, wireless_state = wireless.calculate_tier_stats(
            wireless_state,
            int(values["soc_in"]),
            wireless_payload,
        )

    logger.debug("VoltageTierStats: processed %s", line)
    return (
        VoltageTierSample(
            voltage_tier=int(values["voltage_tier"]),
            soc_in=float(values["soc_in"]),
            cc_in=int(values["cc_in"]),
            temp_in=int(values["temp_in"]),
            time_fast_secs=int(values["time_fast_secs"]),
            time_taper_secs=int(values["time_taper_secs"]),
            time_other_secs=int(values["time_other_secs"]),
            temp_min=int(values["temp_min"]),
            temp_avg=int(values["temp_avg"]),
            temp_max=int(values["temp_max"]),
            ibatt_min=int(values["ibatt_min"]),
            ibatt_avg=int(values["ibatt_avg"]),
            ibatt_max=int(values["ibatt_max"]),
            icl_min=int(values["icl_min"]),
            icl_avg=int(values["icl_avg"]),
            icl_max=int(values["icl_max"]),
            wireless=wireless_stats,
        ),
        wireless_state,
    )
