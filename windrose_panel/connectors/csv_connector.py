"""Load wind observations from a user-provided CSV file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from windrose_panel.connectors.snapshot import DIRECTION_TARGET, SPEED_TARGET


def load_csv(
    path: str | Path,
    speed_col: str = "speed",
    direction_col: str = "direction",
    timestamp_col: str | None = None,
) -> list[dict[str, Any]]:
    """Read a CSV into snapshot series (``speed`` and ``direction`` targets).

    Parameters
    ----------
    path : CSV file path.
    speed_col, direction_col : value column names.
    timestamp_col : optional timestamp column; row order is used when absent.

    Returns
    -------
    list of series dicts ``{"target", "datapoints"}`` with ``[value, ts_ms]``
    datapoints, ready for :func:`windrose_panel.connectors.snapshot.read_snapshot`.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"CSV not found: {p}")

    df = pd.read_csv(p)

    for col in [speed_col, direction_col] + ([timestamp_col] if timestamp_col else []):
        if col not in df.columns:
            raise KeyError(f"Column '{col}' not found. Available: {list(df.columns)}")

    if timestamp_col:
        ts = pd.to_datetime(df[timestamp_col], utc=True)
        epoch = pd.Timestamp("1970-01-01", tz="UTC")
        ts_ms = [int(x) for x in (ts - epoch) // pd.Timedelta(milliseconds=1)]
    else:
        ts_ms = list(range(len(df)))

    def _datapoints(col: str) -> list[list[Any]]:
        values = pd.to_numeric(df[col], errors="coerce")
        return [[None if pd.isna(v) else float(v), t] for v, t in zip(values, ts_ms)]

    return [
        {"target": SPEED_TARGET, "datapoints": _datapoints(speed_col)},
        {"target": DIRECTION_TARGET, "datapoints": _datapoints(direction_col)},
    ]
