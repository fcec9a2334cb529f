"""Per-direction rows built from the histogram matrix, and percent scaling."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
import pandas as pd

from windrose_panel.config import SCALES
from windrose_panel.core.intervals import Interval, interval_labels


@dataclass(frozen=True)
class Row:
    """One direction bucket: start angle, per-speed-label values and their total."""

    angle: float
    counts: dict[str, float] = field(default_factory=dict)
    total: float = 0


def project_rows(
    matrix: np.ndarray,
    direction_intervals: Sequence[Interval],
    speed_intervals: Sequence[Interval],
) -> list[Row]:
    """Flatten *matrix* into one :class:`Row` per direction bucket.

    ``counts`` keys follow speed bucket order so that stacking and legend
    order stay consistent downstream.
    """
    labels = interval_labels(speed_intervals)
    rows: list[Row] = []
    for i, (low, _high) in enumerate(direction_intervals):
        counts = {labels[j]: int(matrix[i, j]) for j in range(len(labels))}
        rows.append(Row(angle=low, counts=counts, total=sum(counts.values())))
    return rows


def normalize_rows(rows: Sequence[Row], scale: str) -> list[Row]:
    """Rescale *rows* for display.

    ``"absolute"`` returns the rows as they are.  ``"percent"`` divides every
    count and every total by the grand total over all rows (one shared
    denominator, not per row); a zero grand total leaves the rows unchanged.
    """
    if scale not in SCALES:
        raise ValueError(f"scale must be one of {SCALES}, got {scale!r}")
    if scale == "absolute":
        return list(rows)

    grand_total = sum(r.total for r in rows)
    if grand_total == 0:
        return list(rows)

    return [
        Row(
            angle=r.angle,
            counts={k: v / grand_total for k, v in r.counts.items()},
            total=r.total / grand_total,
        )
        for r in rows
    ]


def rows_to_frame(rows: Sequence[Row], labels: Sequence[str] | None = None) -> pd.DataFrame:
    """Tabulate rows as ``angle, <speed labels...>, total`` columns."""
    if labels is None:
        labels = list(rows[0].counts) if rows else []
    records = [{"angle": r.angle, **{lbl: r.counts.get(lbl, 0) for lbl in labels}, "total": r.total} for r in rows]
    return pd.DataFrame(records, columns=["angle", *labels, "total"])
