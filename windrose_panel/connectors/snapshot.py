"""Read a host data snapshot (named series) into wind samples."""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any, Iterable, Mapping

import pandas as pd

from windrose_panel.core.histogram import SAMPLE_COLUMNS

SPEED_TARGET = "speed"
DIRECTION_TARGET = "direction"


class UnrecognizedSeriesTargetWarning(UserWarning):
    """A snapshot series is tagged neither 'speed' nor 'direction'."""


def _values(datapoints: Iterable[Any]) -> list[float | None]:
    """Datapoints are ``[value, timestamp]`` pairs; keep the values (empty pair → None)."""
    return [(dp[0] if dp else None) if isinstance(dp, (list, tuple)) else dp for dp in datapoints]


def read_snapshot(series: Iterable[Mapping[str, Any]]) -> tuple[pd.DataFrame, float]:
    """Pair the direction and speed series of a snapshot by position.

    Parameters
    ----------
    series : iterable of ``{"target": str, "datapoints": [[value, ts], ...]}``.

    Returns
    -------
    (samples, speed_max)
      samples   : DataFrame with ``direction`` and ``speed`` columns, rows with a
                  null speed removed.  A shorter series is padded with NaN.
      speed_max : highest speed value, 0.0 when there is none.

    Series with any other target are skipped with an
    :class:`UnrecognizedSeriesTargetWarning`; a later series with the same
    target replaces an earlier one.
    """
    speeds: list[float | None] = []
    angles: list[float | None] = []
    for serie in series:
        target = serie.get("target")
        values = _values(serie.get("datapoints") or [])
        if target == SPEED_TARGET:
            speeds = values
        elif target == DIRECTION_TARGET:
            angles = values
        else:
            warnings.warn(
                UnrecognizedSeriesTargetWarning(f"unexpected target {target!r}"),
                stacklevel=2,
            )

    speed_s = pd.to_numeric(pd.Series(speeds, dtype=object), errors="coerce").astype(float)
    angle_s = pd.to_numeric(pd.Series(angles, dtype=object), errors="coerce").astype(float)

    speed_max = float(speed_s.max()) if speed_s.notna().any() else 0.0

    # Outer alignment on position pads the shorter series with NaN
    samples = pd.concat([angle_s.rename("direction"), speed_s.rename("speed")], axis=1)
    samples = samples.reindex(columns=list(SAMPLE_COLUMNS))
    samples = samples[samples["speed"].notna()].reset_index(drop=True)

    return samples, speed_max


def load_snapshot_json(path: str | Path) -> list[dict[str, Any]]:
    """Load the series list from a JSON file.

    Accepts either a bare list of series or an object with a ``series`` key.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"snapshot not found: {p}")
    with open(p, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, Mapping):
        data = data.get("series", [])
    if not isinstance(data, list):
        raise ValueError(f"{p}: expected a list of series, got {type(data).__name__}")
    return data
