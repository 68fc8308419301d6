"""Read-then-clear access to charging diagnostic log sources.

A source is consumed by reading it whole and overwriting it with a single
``"0"``. The kernel-side writer only appends after a clear has completed, so
the read/clear pair is not guarded against concurrent writes here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

CONSUMED_MARKER = "0"


def is_consumed(contents: str) -> bool:
    """Whether `contents` carries no unconsumed data."""
    return contents.strip().strip("\x00").strip() in ("", CONSUMED_MARKER)


class LogSource:
    """One newline-delimited diagnostic log exposed as a file path."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str:
        """Read the whole source. Raises `OSError` when unreadable."""
        return self._path.read_text(encoding="utf-8", errors="replace")

    def peek(self) -> str | None:
        """Read the source without clearing it; `None` if unreadable or consumed."""
        try:
            contents = self.read_text()
        except OSError:
            return None
        return None if is_consumed(contents) else contents

    def clear(self) -> bool:
        """Mark the source consumed. Clear failures are logged, not raised."""
        try:
            self._path.write_text(CONSUMED_MARKER, encoding="utf-8")
        except OSError as exc:
            logger.error("Couldn't clear %s - %s", self._path, exc)
            return False
        return True

    def consume(self) -> str | None:
        """Read and clear the source; `None` when it holds no new data."""
        try:
            contents = self.read_text()
        except OSError:
            return None
        if is_consumed(contents):
            return None
        if not self.clear():
            return None
        return contents

    def __repr__(self) -> str:
        return f"LogSource({str(self._path)!r})"


@dataclass(frozen=True, slots=True)
class SourcePaths:
    """Locations of the diagnostic log sources read per invocation."""

    charge_stats: Path = Path("/sys/class/power_supply/battery/charge_stats")
    wireless: Path = Path("/sys/class/power_supply/wireless/device/charge_stats")
    pca: Path = Path("/sys/class/power_supply/pca94xx-mains/device/charge_stats")
    thermal: Path = Path("/sys/devices/platform/google,charger/thermal_stats")
    gcharger: Path = Path("/sys/devices/platform/google,charger/charge_stats")
    dual_battery: Path = Path("/sys/devices/platform/google,dual_batt_gauge/dbatt_stats")

    def __post_init__(self) -> None:
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if isinstance(value, str) and not value.strip():
                raise ValueError(f"{name} path is required")
            object.__setattr__(self, name, Path(value))


@dataclass(frozen=True, slots=True)
class ChargeLogSources:
    """Opened log sources for one pipeline."""

    charge_stats: LogSource
    wireless: LogSource
    pca: LogSource
    thermal: LogSource
    gcharger: LogSource
    dual_battery: LogSource

    @classmethod
    def from_paths(cls, paths: SourcePaths) -> ChargeLogSources:
        return cls(
            charge_stats=LogSource(paths.charge_stats),
            wireless=LogSource(paths.wireless),
            pca=LogSource(paths.pca),
            thermal=LogSource(paths.thermal),
            gcharger=LogSource(paths.gcharger),
            dual_battery=LogSource(paths.dual_battery),
        )
