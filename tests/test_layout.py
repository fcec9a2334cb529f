"""Tests for the renderer-facing layout (core/layout.py)."""

from __future__ import annotations

import math

import pytest

from windrose_panel.config import DEFAULT_PALETTE, PanelConfig
from windrose_panel.core.layout import compute_layout, label_colors
from windrose_panel.core.rows import Row
from windrose_panel.pipeline import WindroseResult


def _result(rows: list[Row], labels: list[str], scale: str = "absolute") -> WindroseResult:
    return WindroseResult(rows=rows, labels=labels, unit="m/s", scale=scale)


class TestComputeLayout:
    def test_stacked_segments(self):
        rows = [
            Row(angle=0, counts={"0 - 2": 3, "2 - 4": 1}, total=4),
            Row(angle=180, counts={"0 - 2": 0, "2 - 4": 2}, total=2),
        ]
        layout = compute_layout(_result(rows, ["0 - 2", "2 - 4"]))
        assert layout.segments["0 - 2"] == [(0.0, 3), (0.0, 0)]
        assert layout.segments["2 - 4"] == [(3, 4), (0, 2)]
        assert layout.radius_max == 4

    def test_bandwidth_and_theta(self):
        rows = [Row(angle=a, counts={}, total=0) for a in (0, 90, 180, 270)]
        layout = compute_layout(_result(rows, []))
        assert layout.bandwidth == pytest.approx(math.pi / 2)
        assert layout.theta == pytest.approx([0, math.pi / 2, math.pi, 3 * math.pi / 2])

    def test_legend_reversed_with_unit(self):
        rows = [Row(angle=0, counts={"0 - 2": 1, "2 - 4": 1}, total=2)]
        layout = compute_layout(_result(rows, ["0 - 2", "2 - 4"]))
        assert [text for text, _ in layout.legend] == ["2 - 4 m/s", "0 - 2 m/s"]
        assert layout.legend[-1][1] == DEFAULT_PALETTE[0]

    def test_angle_grid(self):
        layout = compute_layout(_result([], []))
        assert layout.angle_grid == [0, 45, 90, 135, 180, 225, 270, 315]

    def test_empty_result(self):
        layout = compute_layout(_result([], []))
        assert layout.bandwidth == 0.0
        assert layout.radius_max == 0.0
        assert layout.segments == {}

    def test_percent_radius_at_most_one(self):
        rows = [
            Row(angle=0, counts={"0 - 2": 0.75}, total=0.75),
            Row(angle=180, counts={"0 - 2": 0.25}, total=0.25),
        ]
        layout = compute_layout(_result(rows, ["0 - 2"], scale="percent"))
        assert layout.radius_max <= 1.0
        assert layout.scale == "percent"

    def test_placeholder_layout(self):
        layout = compute_layout(WindroseResult.placeholder(PanelConfig(), error="boom"))
        assert layout.theta == []


class TestLabelColors:
    def test_palette_cycles(self):
        labels = [f"{i} - {i + 1}" for i in range(9)]
        colors = label_colors(labels)
        assert colors[labels[0]] == DEFAULT_PALETTE[0]
        assert colors[labels[7]] == DEFAULT_PALETTE[7]
        assert colors[labels[8]] == DEFAULT_PALETTE[0]
