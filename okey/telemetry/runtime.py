# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the Okey instruments.

Okey only talks to the OpenTelemetry *API*. Without an SDK meter provider
configured by the host application every instrument is a no-op.
"""

from __future__ import annotations

from opentelemetry import metrics

METER_NAME = "okey"

meter = metrics.get_meter(METER_NAME)

__all__ = ["METER_NAME", "meter"]
