"""Charge-session head line parsing with versioned-format fallback."""

from __future__ import annotations

import logging

from chargestats.domain.models import (
    ADAPTER_CAPABILITY_WORDS,
    RECEIVER_STATE_WORDS,
    AdapterType,
    ChargeSession,
    HeadFormat,
)
from chargestats.extractors.pca import PcaChargeExtractor
from chargestats.extractors.wireless import WirelessChargeExtractor
from chargestats.parsing.formats import HEAD_FORMATS
from chargestats.scanning import first_match


logger = logging.getLogger(__name__)


def parse_charge_session(
    line: str,
    *,
    wireless_type_line: str | None = None,
    wireless_caps_line: str | None = None,
    pca_line: str | None = None,
    charger_metrics: str | None = None,
    wireless: WirelessChargeExtractor | None = None,
    pca: PcaChargeExtractor | None = None,
) -> ChargeSession | None:
    """Build one charge session from the head line and optional secondary sources.

    Returns `None` when the head line matches none of the known formats.
    Wireless data, when present, owns the adapter type and the first
    capability/receiver words; PD/PCA fills the rest and only claims the
    adapter type when no wireless type line was supplied. A matching charger
    metrics line overrides both receiver-state words last.
    """
    wireless = wireless or WirelessChargeExtractor()
    pca = pca or PcaChargeExtractor()

    logger.debug("processing %s", line)
    matched = first_match(HEAD_FORMATS, line)
    if matched is None:
        logger.error("Couldn't process %s", line)
        return None
    head_format, values = matched

    fields = {name: int(value) for name, value in values.items()}
    caps = [0] * ADAPTER_CAPABILITY_WORDS
    states = [0] * RECEIVER_STATE_WORDS
    extended = False

    if wireless_type_line:
        logger.debug("wlc: processing %s", wireless_type_line)
        adapter_type = wireless.parse_type_line(wireless_type_line)
        if adapter_type is None:
            logger.error("Couldn't process %s", wireless_type_line)
        else:
            fields["adapter_type"] = int(adapter_type)
            logger.debug("wlc: processing %s", wireless_caps_line)
            parsed_caps = wireless.parse_capabilities_line(wireless_caps_line or "")
            if parsed_caps is None:
                logger.error("Couldn't process %s", wireless_caps_line)
            else:
                caps = list(parsed_caps[0])
                states = list(parsed_caps[1])
                extended = True

    if pca_line:
        logger.debug("pca: processing %s", pca_line)
        summary = pca.parse_summary(pca_line)
        if summary is None:
            logger.error("Couldn't process %s", pca_line)
        else:
            extended = True
            caps[2:5] = summary.receiver_states[2:5]
            states[1] = summary.receiver_states[1]
            if not wireless_type_line:
                fields["adapter_type"] = int(AdapterType.USB_PD_PPS)
                caps[0:2] = summary.adapter_capabilities
                states[0] = summary.receiver_states[0]

    if charger_metrics:
        pdo = pca.parse_charger_metrics(charger_metrics)
        if pdo is not None:
            apdo, pdo_word = pdo
            logger.debug("processed charger metrics, apdo:%d, pdo:%d", apdo, pdo_word)
            states[0] = apdo
            states[1] = pdo_word

    return ChargeSession(
        **fields,
        adapter_capabilities=tuple(caps),
        receiver_states=tuple(states),
        head_format=HeadFormat(head_format.name),
        has_extended_fields=extended,
    )
