"""Unit tests for charge-session parsing and secondary-source merging."""

from __future__ import annotations

import logging

import pytest

from chargestats.domain import AdapterType, ChargeSession, HeadFormat
from chargestats.parsing import parse_charge_session


BASELINE_LINE = "1,5000,1500,50,4000,80,4100"


def test_baseline_line_populates_only_baseline_fields() -> None:
    session = parse_charge_session(BASELINE_LINE)

    assert session == ChargeSession(
        adapter_type=1,
        adapter_voltage=5000,
        adapter_amperage=1500,
        ssoc_in=50,
        voltage_in=4000,
        ssoc_out=80,
        voltage_out=4100,
    )
    assert session.head_format == HeadFormat.BASELINE
    assert session.charge_capacity == 0
    assert session.csi_aggregate_status == 0
    assert session.adapter_capabilities == (0, 0, 0, 0, 0)
    assert session.receiver_states == (0, 0)
    assert not session.has_extended_fields


def test_csi_line_fills_aacr_and_csi_fields() -> None:
    session = parse_charge_session("3,9000,2000, 20,3800,95,4350 4500 12,3")

    assert session is not None
    assert session.head_format == HeadFormat.CSI
    assert session.charge_capacity == 4500
    assert session.csi_aggregate_status == 12
    assert session.csi_aggregate_type == 3


def test_unparseable_head_line_is_dropped_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="chargestats"):
        session = parse_charge_session("not,a,charge,line")

    assert session is None
    assert "Couldn't process" in caplog.text


def test_wireless_lines_override_adapter_type_and_fill_capabilities() -> None:
    session = parse_charge_session(
        BASELINE_LINE,
        wireless_type_line="A:2",
        wireless_caps_line="D:1,2,3,4,5, 6,7",
    )

    assert session is not None
    assert session.adapter_type == AdapterType.WPC_EPP
    assert session.adapter_capabilities == (1, 2, 3, 4, 5)
    assert session.receiver_states == (6, 7)
    assert session.has_extended_fields


def test_bad_wireless_capabilities_keep_baseline_slots() -> None:
    session = parse_charge_session(
        BASELINE_LINE,
        wireless_type_line="A:3",
        wireless_caps_line="D:garbage",
    )

    assert session is not None
    assert session.adapter_type == AdapterType.WPC_L7
    assert session.adapter_capabilities == (0, 0, 0, 0, 0)
    assert not session.has_extended_fields


def test_bad_wireless_type_line_keeps_parsed_adapter_type() -> None:
    session = parse_charge_session(
        BASELINE_LINE,
        wireless_type_line="B:2",
        wireless_caps_line="D:1,2,3,4,5, 6,7",
    )

    assert session is not None
    assert session.adapter_type == 1
    assert not session.has_extended_fields


def test_pca_without_wireless_forces_pps() -> None:
    session = parse_charge_session(BASELINE_LINE, pca_line="D:a,b 1,2,3,4,5")

    assert session is not None
    assert session.adapter_type == AdapterType.USB_PD_PPS
    assert session.adapter_capabilities == (0xA, 0xB, 3, 4, 5)
    assert session.receiver_states == (1, 2)
    assert session.has_extended_fields


def test_wireless_takes_precedence_over_pca_only_fields() -> None:
    session = parse_charge_session(
        BASELINE_LINE,
        wireless_type_line="A:1",
        wireless_caps_line="D:11,12,13,14,15, 16,17",
        pca_line="D:a,b 1,2,3,4,5",
    )

    assert session is not None
    assert session.adapter_type == AdapterType.WPC_BPP
    assert session.adapter_capabilities == (0x11, 0x12, 3, 4, 5)
    assert session.receiver_states == (0x16, 2)


def test_malformed_pca_line_is_ignored() -> None:
    session = parse_charge_session(BASELINE_LINE, pca_line="D:zz")

    assert session is not None
    assert session.adapter_type == 1
    assert not session.has_extended_fields


def test_charger_metrics_override_receiver_states_last() -> None:
    session = parse_charge_session(
        BASELINE_LINE,
        pca_line="D:a,b 1,2,3,4,5",
        charger_metrics="0, 45.5,1,2, 3,4,5, 6,7,8, 9,10,11, 12,13,14\nD:1,2a,3,4,5,6,7f\nD:1,99,3,4,5,6,98\n",
    )

    assert session is not None
    assert session.receiver_states == (0x2A, 0x7F)
    assert session.adapter_capabilities == (0xA, 0xB, 3, 4, 5)


def test_session_contract_validates_word_counts() -> None:
    with pytest.raises(ValueError, match="adapter_capabilities"):
        ChargeSession(
            adapter_type=1,
            adapter_voltage=1,
            adapter_amperage=1,
            ssoc_in=1,
            voltage_in=1,
            ssoc_out=1,
            voltage_out=1,
            adapter_capabilities=(1, 2),
        )


def test_bad_wireless_type_line_keeps_pca_from_forcing_pps() -> None:
    session = parse_charge_session(
        BASELINE_LINE,
        wireless_type_line="A:bad",
        pca_line="D:a,b 1,2,3,4,5",
    )

    assert session is not None
    assert session.adapter_type == 1
    assert session.adapter_capabilities == (0, 0, 3, 4, 5)
    assert session.receiver_states == (0, 2)
    assert session.has_extended_fields
