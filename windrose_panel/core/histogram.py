"""Direction × speed histogram aggregation.

All functions are deterministic and pure (no I/O, input frames are not mutated).
"""
from __future__ import annotations

import warnings
from typing import Any, Sequence

import numpy as np
import pandas as pd

from windrose_panel.core.intervals import Interval, OutOfRangeValueWarning, interval_index

SAMPLE_COLUMNS = ("direction", "speed")


def empty_samples() -> pd.DataFrame:
    """Return a samples frame with no rows."""
    return pd.DataFrame({c: pd.Series(dtype=float) for c in SAMPLE_COLUMNS})


def aggregate_histogram(
    samples: pd.DataFrame,
    direction_intervals: Sequence[Interval],
    speed_intervals: Sequence[Interval],
) -> tuple[np.ndarray, dict[str, Any]]:
    """Count samples per (direction bucket, speed bucket).

    Parameters
    ----------
    samples : DataFrame with ``direction`` (degrees) and ``speed`` columns.
    direction_intervals : direction buckets, usually ``generate_intervals(0, 360, n=slices)``.
    speed_intervals : speed buckets.

    Returns
    -------
    (matrix, meta)
      matrix : int array of shape ``(len(direction_intervals), len(speed_intervals))``.
      meta   : dict with ``sample_count``, ``valid_count``, ``binned_count``,
               ``dropped_count``, ``out_of_range_count``.

    Samples with null speed are discarded up front.  Samples whose direction or
    speed falls outside the buckets are dropped; those above the last bucket
    are tallied and reported with a single :class:`OutOfRangeValueWarning`.
    """
    missing = [c for c in SAMPLE_COLUMNS if c not in samples.columns]
    if missing:
        raise KeyError(f"samples missing column(s) {missing}. Available: {list(samples.columns)}")

    matrix = np.zeros((len(direction_intervals), len(speed_intervals)), dtype=int)

    # Only rows with valid (non-NaN) speed
    valid = samples[samples["speed"].notna()]
    directions = valid["direction"].to_numpy(dtype=float)
    speeds = valid["speed"].to_numpy(dtype=float)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", OutOfRangeValueWarning)
        for i in range(len(valid)):
            j = interval_index(directions[i], direction_intervals)
            k = interval_index(speeds[i], speed_intervals)
            if j is not None and k is not None:
                matrix[j, k] += 1

    out_of_range_count = sum(1 for w in caught if issubclass(w.category, OutOfRangeValueWarning))
    if out_of_range_count:
        warnings.warn(
            OutOfRangeValueWarning(
                f"{out_of_range_count} sample value(s) above the bucket range were dropped"
            ),
            stacklevel=2,
        )

    binned_count = int(matrix.sum())
    meta: dict[str, Any] = {
        "sample_count": len(samples),
        "valid_count": len(valid),
        "binned_count": binned_count,
        "dropped_count": len(valid) - binned_count,
        "out_of_range_count": out_of_range_count,
    }
    return matrix, meta
