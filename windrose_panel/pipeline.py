"""Wind-rose pipeline: reusable core, no file I/O."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from windrose_panel.config import DIRECTION_END, DIRECTION_START, PanelConfig
from windrose_panel.core.histogram import aggregate_histogram
from windrose_panel.core.intervals import (
    Interval,
    InvalidRangeError,
    generate_intervals,
    interval_labels,
)
from windrose_panel.core.rows import Row, normalize_rows, project_rows


@dataclass
class WindroseResult:
    """Everything a renderer needs for one panel draw."""

    rows: list[Row]
    labels: list[str]
    unit: str
    scale: str
    matrix: np.ndarray = field(default_factory=lambda: np.zeros((0, 0), dtype=int))
    direction_intervals: list[Interval] = field(default_factory=list)
    speed_intervals: list[Interval] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.error is not None or not any(r.total for r in self.rows)

    @classmethod
    def placeholder(cls, cfg: PanelConfig, error: str | None = None) -> WindroseResult:
        """An empty result, drawn instead of stale data."""
        return cls(rows=[], labels=[], unit=cfg.unit, scale=cfg.scale, error=error)


def run_windrose_pipeline(
    samples: pd.DataFrame,
    speed_max: float,
    cfg: PanelConfig,
) -> WindroseResult:
    """Bin *samples* into a wind rose and return a WindroseResult.

    Parameters
    ----------
    samples : DataFrame with ``direction`` and ``speed`` columns.
    speed_max : highest observed speed; upper end of the speed buckets.
    cfg : validated PanelConfig

    Raises
    ------
    InvalidRangeError
        If the speed buckets cannot be built, e.g. auto step with no
        positive speed observed.
    """
    step = cfg.resolve_step(speed_max)

    direction_intervals = generate_intervals(DIRECTION_START, DIRECTION_END, n=cfg.slices)
    speed_intervals = generate_intervals(cfg.start, speed_max, step=step)

    matrix, meta = aggregate_histogram(samples, direction_intervals, speed_intervals)
    rows = project_rows(matrix, direction_intervals, speed_intervals)
    rows = normalize_rows(rows, cfg.scale)

    meta = {**meta, "speed_max": float(speed_max), "step": step}

    return WindroseResult(
        rows=rows,
        labels=interval_labels(speed_intervals),
        unit=cfg.unit,
        scale=cfg.scale,
        matrix=matrix,
        direction_intervals=direction_intervals,
        speed_intervals=speed_intervals,
        meta=meta,
    )


def compute_result(
    samples: pd.DataFrame,
    speed_max: float,
    cfg: PanelConfig,
) -> WindroseResult:
    """Like :func:`run_windrose_pipeline`, but an InvalidRangeError yields a placeholder."""
    try:
        return run_windrose_pipeline(samples, speed_max, cfg)
    except InvalidRangeError as exc:
        return WindroseResult.placeholder(cfg, error=str(exc))
