"""Tests for wind rose chart rendering (core/wind_plot.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("matplotlib")

from windrose_panel.config import PanelConfig  # noqa: E402
from windrose_panel.connectors.snapshot import read_snapshot  # noqa: E402
from windrose_panel.core.wind_plot import plot_wind_rose  # noqa: E402
from windrose_panel.pipeline import WindroseResult, run_windrose_pipeline  # noqa: E402
from windrose_panel.storage.io import save_plot_png  # noqa: E402


class TestPlotWindRose:
    def test_absolute_png(self, snapshot_series, tmp_path: Path):
        samples, speed_max = read_snapshot(snapshot_series)
        result = run_windrose_pipeline(samples, speed_max, PanelConfig(slices=16))
        out = tmp_path / "rose.png"
        plot_wind_rose(result, out, title="Test rose")
        assert out.exists()
        assert out.stat().st_size > 0

    def test_percent_png(self, snapshot_series, tmp_path: Path):
        samples, speed_max = read_snapshot(snapshot_series)
        result = run_windrose_pipeline(samples, speed_max, PanelConfig(scale="percent"))
        p = save_plot_png(result, tmp_path / "charts", "rose")
        assert p == tmp_path / "charts" / "rose.png"
        assert p.exists()

    def test_placeholder_png(self, tmp_path: Path):
        result = WindroseResult.placeholder(PanelConfig(), error="no positive speed")
        out = tmp_path / "empty.png"
        plot_wind_rose(result, out)
        assert out.exists()
