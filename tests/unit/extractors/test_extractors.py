"""Unit tests for wireless and PD/PCA log extractors."""

from __future__ import annotations

from pathlib import Path

import pytest

from chargestats.domain import AdapterType, WirelessTierState, WirelessTierStats
from chargestats.extractors import PcaChargeExtractor, PcaSummary, WirelessChargeExtractor
from chargestats.integration import LogSource


WIRELESS_PAYLOAD = (
    "A:2\n"
    "D:1,2,3,4,5, 6,7\n"
    "40:1000, 1200,1400, 140\n"
    "45:900, 1100,1301, 151\n"
    "bogus row\n"
    "55:800, 1000,1200, 160\n"
)


@pytest.mark.parametrize(
    ("sys_mode", "expected"),
    [
        (1, AdapterType.WPC_BPP),
        (2, AdapterType.WPC_EPP),
        (3, AdapterType.WPC_L7),
        (0xA0, AdapterType.WPC_10W),
        (0xE0, AdapterType.DL),
        (0x7F, AdapterType.WLC),
    ],
)
def test_translate_sys_mode(sys_mode: int, expected: AdapterType) -> None:
    assert WirelessChargeExtractor().translate_sys_mode(sys_mode) == expected


def test_head_lines_tolerate_short_payloads() -> None:
    extractor = WirelessChargeExtractor()

    assert extractor.head_lines(WIRELESS_PAYLOAD) == ("A:2", "D:1,2,3,4,5, 6,7")
    assert extractor.head_lines("A:2") == ("A:2", "")
    assert extractor.head_lines("") == ("", "")


def test_tier_windows_partition_soc_rows() -> None:
    extractor = WirelessChargeExtractor()

    first, state = extractor.calculate_tier_stats(WirelessTierState(), 45, WIRELESS_PAYLOAD)
    second, state = extractor.calculate_tier_stats(state, 60, WIRELESS_PAYLOAD)

    assert first == WirelessTierStats(pout_min=900, pout_avg=1150, pout_max=1400, of_freq=146)
    assert second == WirelessTierStats(pout_min=800, pout_avg=1000, pout_max=1200, of_freq=160)
    assert state.tier_soc == 61


def test_tier_stats_default_to_zero_without_rows() -> None:
    extractor = WirelessChargeExtractor()

    stats, state = extractor.calculate_tier_stats(WirelessTierState(tier_soc=70), 80, WIRELESS_PAYLOAD)
    malformed, _ = extractor.calculate_tier_stats(WirelessTierState(), 50, "A:1\nD:x\n???")

    assert stats == WirelessTierStats()
    assert state.tier_soc == 81
    assert malformed == WirelessTierStats()


def test_wireless_check_contents_and_ack_consumes_source(tmp_path: Path) -> None:
    path = tmp_path / "wireless"
    path.write_text(WIRELESS_PAYLOAD, encoding="utf-8")
    source = LogSource(path)
    extractor = WirelessChargeExtractor()

    assert extractor.check_contents_and_ack(source) == WIRELESS_PAYLOAD
    assert extractor.check_contents_and_ack(source) is None


def test_pca_summary_parsing() -> None:
    extractor = PcaChargeExtractor()

    assert extractor.parse_summary("D:a,b 1,2,3,4,ff") == PcaSummary(
        adapter_capabilities=(0xA, 0xB),
        receiver_states=(1, 2, 3, 4, 0xFF),
    )
    assert extractor.parse_summary("D:a,b,1,2,3,4,5") is None


def test_pca_check_contents_and_ack_returns_first_line(tmp_path: Path) -> None:
    path = tmp_path / "pca"
    path.write_text("D:a,b 1,2,3,4,5\nsecond line\n", encoding="utf-8")
    extractor = PcaChargeExtractor()

    assert extractor.check_contents_and_ack(LogSource(path)) == "D:a,b 1,2,3,4,5"
    assert path.read_text(encoding="utf-8") == "0"
    assert extractor.check_contents_and_ack(LogSource(tmp_path / "missing")) is None


def test_charger_metrics_pick_first_matching_line() -> None:
    extractor = PcaChargeExtractor()

    assert extractor.parse_charger_metrics("noise\nD:1,2,3,4,5,6,7\nD:8,9,a,b,c,d,e\n") == (2, 7)
    assert extractor.parse_charger_metrics("noise only\n") is None


def test_tier_window_start_never_moves_backwards() -> None:
    extractor = WirelessChargeExtractor()

    stats, state = extractor.calculate_tier_stats(WirelessTierState(tier_soc=50), 45, WIRELESS_PAYLOAD)

    assert stats == WirelessTierStats()
    assert state.tier_soc == 50
