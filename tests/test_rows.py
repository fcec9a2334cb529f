"""Tests for row projection and percent scaling (core/rows.py)."""

from __future__ import annotations

import numpy as np
import pytest

from windrose_panel.core.intervals import generate_intervals
from windrose_panel.core.rows import Row, normalize_rows, project_rows, rows_to_frame

DIR4 = generate_intervals(0, 360, n=4)
SPD2 = generate_intervals(0, 20, step=10)


class TestProjectRows:
    def test_one_row_per_direction(self):
        matrix = np.array([[1, 0], [1, 0], [0, 1], [0, 1]])
        rows = project_rows(matrix, DIR4, SPD2)
        assert [r.angle for r in rows] == [0, 90, 180, 270]
        assert all(r.total == 1 for r in rows)

    def test_labels_in_speed_order(self):
        matrix = np.array([[3, 2], [0, 0], [0, 0], [0, 0]])
        rows = project_rows(matrix, DIR4, SPD2)
        assert list(rows[0].counts) == ["0 - 10", "10 - 20"]
        assert rows[0].counts == {"0 - 10": 3, "10 - 20": 2}
        assert rows[0].total == 5

    def test_counts_are_plain_ints(self):
        rows = project_rows(np.array([[1, 2], [0, 0], [0, 0], [0, 0]]), DIR4, SPD2)
        assert type(rows[0].counts["0 - 10"]) is int


class TestNormalizeRows:
    def _rows(self):
        return [
            Row(angle=0, counts={"a": 3, "b": 1}, total=4),
            Row(angle=180, counts={"a": 0, "b": 4}, total=4),
        ]

    def test_absolute_identity(self):
        rows = self._rows()
        assert normalize_rows(rows, "absolute") == rows

    def test_percent_uses_grand_total(self):
        """Shared denominator across rows, not per-row normalisation."""
        out = normalize_rows(self._rows(), "percent")
        assert out[0].counts == {"a": pytest.approx(0.375), "b": pytest.approx(0.125)}
        assert out[0].total == pytest.approx(0.5)
        assert out[1].counts["b"] == pytest.approx(0.5)

    def test_percent_totals_sum_to_one(self):
        out = normalize_rows(self._rows(), "percent")
        assert sum(r.total for r in out) == pytest.approx(1.0)

    def test_percent_zero_total_unchanged(self):
        rows = [Row(angle=0, counts={"a": 0}, total=0), Row(angle=180, counts={"a": 0}, total=0)]
        assert normalize_rows(rows, "percent") == rows

    def test_inputs_not_mutated(self):
        rows = self._rows()
        normalize_rows(rows, "percent")
        assert rows[0].counts == {"a": 3, "b": 1}

    def test_angle_kept(self):
        out = normalize_rows(self._rows(), "percent")
        assert [r.angle for r in out] == [0, 180]

    def test_unknown_scale_raises(self):
        with pytest.raises(ValueError):
            normalize_rows(self._rows(), "log")


class TestRowsToFrame:
    def test_columns(self):
        rows = project_rows(np.array([[1, 2], [0, 0], [0, 0], [0, 0]]), DIR4, SPD2)
        df = rows_to_frame(rows)
        assert list(df.columns) == ["angle", "0 - 10", "10 - 20", "total"]
        assert len(df) == 4
        assert df["total"].tolist() == [3, 0, 0, 0]

    def test_empty(self):
        df = rows_to_frame([], ["0 - 10"])
        assert list(df.columns) == ["angle", "0 - 10", "total"]
        assert df.empty
