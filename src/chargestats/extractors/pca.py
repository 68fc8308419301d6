"""USB Power-Delivery (PD/PCA) negotiation log extraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chargestats.integration.sources import LogSource
from chargestats.scanning import ScanFormat, int_values


logger = logging.getLogger(__name__)

_WORD_NAMES = ("ac0", "ac1", "rs0", "rs1", "rs2", "rs3", "rs4")

PCA_SUMMARY_FORMAT = ScanFormat(name="pca_summary", template="D:%x,%x %x,%x,%x,%x,%x", field_names=_WORD_NAMES)

CHARGER_PDO_FORMAT = ScanFormat(name="charger_pdo", template="D:%x,%x,%x,%x,%x,%x,%x", field_names=_WORD_NAMES)


@dataclass(frozen=True, slots=True)
class PcaSummary:
    """Adapter capability and receiver-state words from one PD/PCA summary line."""

    adapter_capabilities: tuple[int, int]
    receiver_states: tuple[int, int, int, int, int]


class PcaChargeExtractor:
    """Parse the PD/PCA summary line and the charger metrics PDO override."""

    def check_contents_and_ack(self, source: LogSource) -> str | None:
        """Consume the PD/PCA log and return its summary line, if any."""
        payload = source.consume()
        if payload is None:
            return None
        line = self.summary_line(payload)
        return line or None

    @staticmethod
    def summary_line(payload: str) -> str:
        lines = payload.splitlines()
        return lines[0] if lines else ""

    @staticmethod
    def parse_summary(line: str) -> PcaSummary | None:
        values = PCA_SUMMARY_FORMAT.scan(line)
        if values is None:
            return None
        ac0, ac1 = int_values(values, ("ac0", "ac1"))
        rs0, rs1, rs2, rs3, rs4 = int_values(values, ("rs0", "rs1", "rs2", "rs3", "rs4"))
        return PcaSummary(adapter_capabilities=(ac0, ac1), receiver_states=(rs0, rs1, rs2, rs3, rs4))

    @staticmethod
    def parse_charger_metrics(payload: str) -> tuple[int, int] | None:
        """Return `(apdo, pdo)` from the first matching charger metrics line."""
        for line in payload.splitlines():
            values = CHARGER_PDO_FORMAT.scan(line)
            if values is not None:
                return int(values["ac1"]), int(values["rs4"])
        return None
