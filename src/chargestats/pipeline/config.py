"""Pipeline configuration loading."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

from chargestats.integration.sources import SourcePaths
from chargestats.integration.throttle import ThrottlePolicy


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Source locations and throttle policy for one pipeline."""

    sources: SourcePaths = field(default_factory=SourcePaths)
    throttle: ThrottlePolicy = field(default_factory=ThrottlePolicy)


def pipeline_config_from_mapping(payload: Mapping[str, Any]) -> PipelineConfig:
    """Build a config from a JSON-style mapping; unknown source keys are rejected."""
    raw_sources = payload.get("sources", {})
    if not isinstance(raw_sources, Mapping):
        raise ValueError("sources must be an object")
    known = {item.name for item in fields(SourcePaths)}
    unknown = set(raw_sources) - known
    if unknown:
        raise ValueError(f"unknown source keys: {', '.join(sorted(unknown))}")
    sources = SourcePaths(**{name: Path(str(value)) for name, value in raw_sources.items()})

    raw_window = payload.get("throttle_window_secs")
    if raw_window is None:
        throttle = ThrottlePolicy()
    elif isinstance(raw_window, bool) or not isinstance(raw_window, int):
        raise ValueError("throttle_window_secs must be an integer")
    else:
        throttle = ThrottlePolicy(window_secs=raw_window)

    return PipelineConfig(sources=sources, throttle=throttle)


def load_pipeline_config(path: str | Path) -> PipelineConfig:
    """Load a JSON pipeline config file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"config file does not exist: {config_path}")
    payload = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(payload, Mapping):
        raise ValueError("config root must be an object")
    return pipeline_config_from_mapping(payload)
