"""File I/O: export rows CSV and result JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from windrose_panel.core.rows import rows_to_frame

if TYPE_CHECKING:
    from windrose_panel.pipeline import WindroseResult


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def result_to_dict(result: WindroseResult) -> dict[str, Any]:
    """JSON-ready view of *result* (rows keep their label order)."""
    return {
        "unit": result.unit,
        "scale": result.scale,
        "labels": list(result.labels),
        "rows": [
            {"angle": r.angle, "counts": dict(r.counts), "total": r.total}
            for r in result.rows
        ],
        "direction_intervals": [list(iv) for iv in result.direction_intervals],
        "speed_intervals": [list(iv) for iv in result.speed_intervals],
        "matrix": result.matrix.tolist(),
        "meta": result.meta,
        "error": result.error,
    }


def save_rows_csv(result: WindroseResult, outdir: Path, tag: str) -> Path:
    _ensure_dir(outdir)
    p = outdir / f"rows_{tag}.csv"
    rows_to_frame(result.rows, result.labels).to_csv(p, index=False)
    return p


def save_result_json(result: WindroseResult, outdir: Path, tag: str) -> Path:
    _ensure_dir(outdir)
    p = outdir / f"result_{tag}.json"
    with open(p, "w", encoding="utf-8") as f:
        json.dump(result_to_dict(result), f, indent=2, default=str)
    return p


def save_plot_png(result: WindroseResult, outdir: Path, tag: str, title: str | None = None) -> Path:
    from windrose_panel.core.wind_plot import plot_wind_rose

    _ensure_dir(outdir)
    p = outdir / f"{tag}.png"
    plot_wind_rose(result, p, title=title)
    return p
