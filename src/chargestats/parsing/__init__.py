"""Charge log line formats and record parsers."""

from chargestats.parsing.formats import HEAD_FORMATS, TIER_FORMAT
from chargestats.parsing.session import parse_charge_session
from chargestats.parsing.tier import parse_voltage_tier

__all__ = [
    "HEAD_FORMATS",
    "TIER_FORMAT",
    "parse_charge_session",
    "parse_voltage_tier",
]
