"""Telemetry package - OpenTelemetry metrics for validator chains."""

from .metrics import (
    chain_bind_failure_total,
    chain_validate_latency_ms,
    chain_validate_total,
    record_bind_failure,
    record_validation_metrics,
    validator_failure_total,
)
from .runtime import METER_NAME, meter

__all__ = [
    "METER_NAME",
    "meter",
    "chain_bind_failure_total",
    "chain_validate_latency_ms",
    "chain_validate_total",
    "record_bind_failure",
    "record_validation_metrics",
    "validator_failure_total",
]
