# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for Okey."""

from __future__ import annotations

import time
from typing import Iterable

from .runtime import meter

chain_validate_total = meter.create_counter(
    name="okey.chain.validate.total",
    description="Counts validate() calls, tagged by outcome (valid/invalid).",
    unit="1",
)

validator_failure_total = meter.create_counter(
    name="okey.validator.failure.total",
    description="Counts failures reported by individual validators.",
    unit="1",
)

chain_validate_latency_ms = meter.create_histogram(
    name="okey.chain.validate.latency.ms",
    description="Time taken to run a value through a validator chain.",
    unit="ms",
)

chain_bind_failure_total = meter.create_counter(
    name="okey.chain.bind.failure.total",
    description="Counts chain constructions rejected for bad configuration.",
    unit="1",
)


def record_validation_metrics(
    failed_validators: Iterable[str],
    started_at: float,
) -> None:
    """Record metrics for one validate() call.

    Args:
        failed_validators: Names of the validators that failed, in order
        started_at: Timestamp from time.perf_counter() when validation started
    """
    try:
        failed = list(failed_validators)
        duration_ms = (time.perf_counter() - started_at) * 1000.0
        status = "invalid" if failed else "valid"

        chain_validate_latency_ms.record(duration_ms, {"status": status})
        chain_validate_total.add(1, {"status": status})
        for name in failed:
            validator_failure_total.add(1, {"validator": name})
    except Exception:
        # Telemetry must never interfere with validation
        pass


def record_bind_failure(reason: str) -> None:
    """Record a rejected chain configuration (reason: unknown_validator, missing_option, ...)."""
    try:
        chain_bind_failure_total.add(1, {"reason": reason})
    except Exception:
        pass


__all__ = [
    "chain_validate_total",
    "validator_failure_total",
    "chain_validate_latency_ms",
    "chain_bind_failure_total",
    "record_validation_metrics",
    "record_bind_failure",
]
