"""Charge stats pipeline orchestration and configuration."""

from chargestats.pipeline.config import PipelineConfig, load_pipeline_config, pipeline_config_from_mapping
from chargestats.pipeline.orchestrator import (
    ChargeStatsPipeline,
    Clock,
    InvocationOutcome,
    InvocationReport,
)

__all__ = [
    "ChargeStatsPipeline",
    "Clock",
    "InvocationOutcome",
    "InvocationReport",
    "PipelineConfig",
    "load_pipeline_config",
    "pipeline_config_from_mapping",
]
