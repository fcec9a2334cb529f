"""Interval generation and value-to-bucket classification.

All functions are deterministic and pure apart from the out-of-range warning
emitted by :func:`interval_index`.
"""
from __future__ import annotations

import math
import warnings
from typing import Sequence

Interval = tuple[float, float]


class InvalidRangeError(ValueError):
    """Interval generation would divide by zero or yield non-finite bounds."""


class OutOfRangeValueWarning(UserWarning):
    """A value lies above the last interval and was left unclassified."""


# ── Generation ────────────────────────────────────────────────────────────────

def generate_intervals(
    start: float,
    end: float,
    n: int | None = None,
    step: float | None = None,
) -> list[Interval]:
    """Return contiguous intervals from *start* to *end*.

    The intervals are defined either by their number (*n*) or by their size
    (*step*); *n* wins when both are given.  Adjacent intervals share their
    boundary, and in step mode the last interval may overrun *end*::

        generate_intervals(0, 360, n=3)      -> [(0, 120), (120, 240), (240, 360)]
        generate_intervals(0, 100, step=30)  -> [(0, 30), (30, 60), (60, 90), (90, 120)]

    In step mode an empty range (``end <= start``) yields the single interval
    ``(start, start + step)``.

    Raises
    ------
    InvalidRangeError
        If neither option is given, *n* is not a positive integer, the step
        resolves to zero or less, or any boundary would be non-finite.
    """
    if not (math.isfinite(start) and math.isfinite(end)):
        raise InvalidRangeError(f"range bounds must be finite, got [{start}, {end}]")

    span = end - start
    if n:
        if isinstance(n, bool) or not math.isfinite(n) or int(n) != n or n < 1:
            raise InvalidRangeError(f"interval count must be a positive integer, got {n!r}")
        n = int(n)
        step = span / n
        if step <= 0:
            raise InvalidRangeError(f"empty range [{start}, {end}] cannot be split into {n} intervals")
    elif step:
        if not math.isfinite(step) or step <= 0:
            raise InvalidRangeError(f"interval step must be a positive finite number, got {step!r}")
        n = max(math.ceil(span / step), 1)
    else:
        raise InvalidRangeError(
            f"cannot build intervals over [{start}, {end}]: count={n!r}, step={step!r}"
        )

    return [(start + i * step, start + (i + 1) * step) for i in range(n)]


def _fmt(x: float) -> str:
    # Shortest round-trip form, no trailing ".0" on whole numbers
    x = float(x)
    return str(int(x)) if x.is_integer() else repr(x)


def interval_labels(intervals: Sequence[Interval]) -> list[str]:
    """Build range labels like ``'0 - 2'``, ``'2 - 4'`` in interval order."""
    return [f"{_fmt(low)} - {_fmt(high)}" for low, high in intervals]


# ── Classification ────────────────────────────────────────────────────────────

def interval_index(value: float | None, intervals: Sequence[Interval]) -> int | None:
    """Return the index of the interval containing *value*, or None.

    Intervals are closed on both ends and scanned in ascending order, so a
    value sitting on a shared boundary belongs to the lower interval
    (``10`` in ``[(0, 10), (10, 20)]`` → ``0``).

    None / NaN and values below the first interval give None silently.  A
    value above the last interval gives None and an
    :class:`OutOfRangeValueWarning`.
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    if not intervals:
        return None

    # Below lower limit
    if value < intervals[0][0]:
        return None

    for i, (low, high) in enumerate(intervals):
        if low <= value <= high:
            return i

    # Above upper limit
    warnings.warn(
        OutOfRangeValueWarning(f"value {value} greater than {intervals[-1][1]}"),
        stacklevel=2,
    )
    return None
