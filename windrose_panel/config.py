"""Central configuration dataclass for a wind-rose panel."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Literal, Mapping

from windrose_panel.core.intervals import InvalidRangeError


Scale = Literal["absolute", "percent"]
SCALES: tuple[str, ...] = ("absolute", "percent")

DEFAULT_SLICES = 32
DEFAULT_UNIT = "m/s"
AUTO_STEP_DIVISOR = 8          # auto step = ceil(speed_max / 8)
DEBOUNCE_SECONDS = 0.2         # quiet window before a resize re-renders

DIRECTION_START = 0.0
DIRECTION_END = 360.0

# Speed-bucket colours, assigned to labels in order and cycled past 8 buckets
DEFAULT_PALETTE: list[str] = [
    "#4242f4", "#42c5f4", "#42f4ce", "#42f456",
    "#adf442", "#f4e242", "#f4a142", "#f44242",
]
ANGLE_GRID_LINES = 8


def _coerce_number(value: Any) -> Any:
    """'16' -> 16, '2.5' -> 2.5; anything else is returned untouched."""
    if isinstance(value, str) and value.strip():
        try:
            num = float(value)
        except ValueError:
            return value
        return int(num) if num.is_integer() else num
    return value


@dataclass
class PanelConfig:
    """Options of a single wind-rose panel."""

    # X axis
    slices: int = DEFAULT_SLICES
    # Y axis
    start: float = 0.0
    step: float | str = ""       # "" → auto from the observed max speed
    unit: str = DEFAULT_UNIT
    scale: Scale = "absolute"

    auto_step_divisor: float = AUTO_STEP_DIVISOR
    debounce_seconds: float = DEBOUNCE_SECONDS

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> PanelConfig:
        """Merge host panel options over the defaults.

        Unknown keys are ignored.  Numeric strings are coerced the way the
        panel editor stores them (``"16"`` → ``16``); an empty ``step`` stays
        empty and means *auto*.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in (options or {}).items():
            if key not in known:
                continue
            if key in ("unit", "scale"):
                kwargs[key] = value
            elif key == "step" and (value is None or (isinstance(value, str) and not value.strip())):
                kwargs[key] = ""
            else:
                kwargs[key] = _coerce_number(value)
        return cls(**kwargs)

    @property
    def auto_step(self) -> bool:
        return isinstance(self.step, str) and not self.step.strip()

    def validate(self) -> None:
        """Raise ValueError on invalid option values."""
        if isinstance(self.slices, bool) or not isinstance(self.slices, int) or self.slices < 1:
            raise ValueError(f"slices must be a positive integer, got {self.slices!r}")
        if self.scale not in SCALES:
            raise ValueError(f"scale must be one of {SCALES}, got {self.scale!r}")
        if not isinstance(self.start, (int, float)) or not math.isfinite(self.start):
            raise ValueError(f"start must be a finite number, got {self.start!r}")
        if not self.auto_step:
            if isinstance(self.step, str) or not math.isfinite(self.step) or self.step <= 0:
                raise ValueError(f"step must be a positive number or empty for auto, got {self.step!r}")
        if self.auto_step_divisor <= 0:
            raise ValueError("auto_step_divisor must be > 0")
        if self.debounce_seconds < 0:
            raise ValueError("debounce_seconds must be >= 0")

    def resolve_step(self, speed_max: float) -> float:
        """Return the speed bucket width for *speed_max*.

        An explicit step wins; otherwise ``ceil(speed_max / auto_step_divisor)``,
        which is 0 when no positive speed was observed.  A non-finite
        *speed_max* raises InvalidRangeError.
        """
        if self.auto_step:
            if not math.isfinite(speed_max):
                raise InvalidRangeError(f"cannot derive a speed step from max speed {speed_max}")
            return float(math.ceil(speed_max / self.auto_step_divisor))
        return float(self.step)

    @property
    def file_tag(self) -> str:
        """Return a tag string used in output filenames."""
        return f"windrose_{self.slices}_{self.scale}"
