"""Renderer-facing geometry of a wind rose: stacked radii, arc width, colours.

Pure data; the drawing itself lives in :mod:`windrose_panel.core.wind_plot`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from windrose_panel.config import ANGLE_GRID_LINES, DEFAULT_PALETTE

if TYPE_CHECKING:
    from windrose_panel.pipeline import WindroseResult


@dataclass
class RoseLayout:
    theta: list[float]                                  # radians, one per row
    bandwidth: float                                    # radians per direction bucket
    segments: dict[str, list[tuple[float, float]]]      # label -> (inner, outer) per row
    radius_max: float
    colors: dict[str, str]
    angle_grid: list[float]                             # degrees
    legend: list[tuple[str, str]]                       # (text, colour), top entry first
    scale: str


def label_colors(labels: Sequence[str], palette: Sequence[str] = DEFAULT_PALETTE) -> dict[str, str]:
    """Map labels to palette colours in order, cycling when labels outnumber colours."""
    return {lbl: palette[i % len(palette)] for i, lbl in enumerate(labels)}


def compute_layout(
    result: WindroseResult,
    palette: Sequence[str] = DEFAULT_PALETTE,
    grid_lines: int = ANGLE_GRID_LINES,
) -> RoseLayout:
    """Derive the stacked polar layout for *result*.

    Each speed label is stacked on top of the previous ones in label order, so
    ``segments[label][i]`` is the ``(inner, outer)`` radius pair of that label
    in direction row *i*.  The legend lists the fastest bucket first.
    """
    rows = result.rows
    labels = list(result.labels)

    theta = [math.radians(r.angle) for r in rows]
    bandwidth = 2 * math.pi / len(rows) if rows else 0.0

    segments: dict[str, list[tuple[float, float]]] = {lbl: [] for lbl in labels}
    for r in rows:
        base = 0.0
        for lbl in labels:
            top = base + r.counts.get(lbl, 0)
            segments[lbl].append((base, top))
            base = top

    radius_max = max((r.total for r in rows), default=0.0)
    colors = label_colors(labels, palette)
    angle_grid = [i * 360.0 / grid_lines for i in range(grid_lines)]
    legend = [(f"{lbl} {result.unit}", colors[lbl]) for lbl in reversed(labels)]

    return RoseLayout(
        theta=theta,
        bandwidth=bandwidth,
        segments=segments,
        radius_max=float(radius_max),
        colors=colors,
        angle_grid=angle_grid,
        legend=legend,
        scale=result.scale,
    )
