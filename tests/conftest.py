"""Shared fixtures for the Okey test-suite."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from okey.config import BREAK_ON_ERROR_ENV, CHAIN_FILE_ENV
from okey.telemetry import metrics as okey_metrics


class RecordingInstrument:
    """Stand-in for an OpenTelemetry counter/histogram that remembers every call."""

    def __init__(self):
        self.calls: List[Tuple[float, Dict[str, Any]]] = []

    def add(self, amount, attributes=None):
        self.calls.append((amount, dict(attributes or {})))

    def record(self, amount, attributes=None):
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Never let the developer's shell configuration leak into tests."""
    monkeypatch.delenv(CHAIN_FILE_ENV, raising=False)
    monkeypatch.delenv(BREAK_ON_ERROR_ENV, raising=False)


@pytest.fixture()
def recorded_metrics(monkeypatch) -> Dict[str, RecordingInstrument]:
    """Replace the module-level instruments with recorders."""
    instruments = {
        "chain_validate_total": RecordingInstrument(),
        "validator_failure_total": RecordingInstrument(),
        "chain_validate_latency_ms": RecordingInstrument(),
        "chain_bind_failure_total": RecordingInstrument(),
    }
    for name, instrument in instruments.items():
        monkeypatch.setattr(okey_metrics, name, instrument)
    return instruments


@pytest.fixture()
def chain_file(tmp_path):
    """Write a chain configuration file and return its path."""

    def _write(content: str, name: str = "chain.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
