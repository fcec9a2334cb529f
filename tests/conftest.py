"""pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


class FakeClock:
    """Manually advanced monotonic clock for debounce tests."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_series(directions: list, speeds: list, t0: int = 1_600_000_000_000) -> list[dict]:
    """Build a host snapshot: ``direction`` and ``speed`` series of [value, ts] datapoints."""
    return [
        {"target": "speed", "datapoints": [[v, t0 + i * 60_000] for i, v in enumerate(speeds)]},
        {"target": "direction", "datapoints": [[v, t0 + i * 60_000] for i, v in enumerate(directions)]},
    ]


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def snapshot_series() -> list[dict]:
    """Eight samples, one per octant, speeds 1..13 (max 13 → auto step 2)."""
    directions = [10.0, 50.0, 100.0, 140.0, 190.0, 230.0, 280.0, 320.0]
    speeds = [1.0, 3.0, 5.0, 7.0, 9.0, 11.0, 13.0, 3.0]
    return make_series(directions, speeds)


@pytest.fixture
def snapshot_path(tmp_path: Path, snapshot_series: list[dict]) -> Path:
    p = tmp_path / "snapshot.json"
    p.write_text(json.dumps(snapshot_series), encoding="utf-8")
    return p
