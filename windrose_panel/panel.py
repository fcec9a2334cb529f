"""Panel controller: inbound host events wired to the pure pipeline.

The host (dashboard, notebook, CLI loop) calls the ``on_*`` handlers and
drives :meth:`WindrosePanel.poll` from its own loop; nothing here starts a
thread or a timer.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Mapping

import pandas as pd

from windrose_panel.config import PanelConfig
from windrose_panel.connectors.snapshot import read_snapshot
from windrose_panel.core.histogram import empty_samples
from windrose_panel.pipeline import WindroseResult, compute_result

Renderer = Callable[[WindroseResult], Any]


class Debouncer:
    """Coalesce bursts of calls into one, made after *wait* quiet seconds.

    Only the most recent :meth:`trigger` within the window is kept; earlier
    ones are discarded, not queued.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fn = fn
        self._wait = wait
        self._clock = clock
        self._deadline: float | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        self._args, self._kwargs = args, kwargs
        self._deadline = self._clock() + self._wait

    def poll(self) -> bool:
        """Run the pending call if its quiet window has elapsed."""
        if self._deadline is None or self._clock() < self._deadline:
            return False
        self.flush()
        return True

    def flush(self) -> Any:
        """Run the pending call now, if any."""
        if self._deadline is None:
            return None
        args, kwargs = self._args, self._kwargs
        self.cancel()
        return self._fn(*args, **kwargs)

    def cancel(self) -> None:
        self._deadline = None
        self._args, self._kwargs = (), {}


class WindrosePanel:
    """One wind-rose panel: holds the latest snapshot and options, renders on demand."""

    def __init__(
        self,
        renderer: Renderer,
        options: Mapping[str, Any] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Build a panel from host *options*.

        Invalid options raise ValueError (see :meth:`PanelConfig.validate`);
        data problems never raise, they render a placeholder instead.
        """
        self.renderer = renderer
        self.config = PanelConfig.from_options(options)
        self.config.validate()
        self.samples: pd.DataFrame = empty_samples()
        self.speed_max: float = 0.0
        self.last_error: str | None = None
        self.last_result: WindroseResult | None = None
        self._clock = clock
        self._resize = Debouncer(self.render, self.config.debounce_seconds, clock=clock)

    # ── Host events ───────────────────────────────────────────────────────────

    def on_data_received(self, series: Iterable[Mapping[str, Any]]) -> WindroseResult:
        self.samples, self.speed_max = read_snapshot(series)
        self.last_error = None
        return self.render()

    def on_data_error(self, err: Any) -> WindroseResult:
        """Drop the current snapshot and draw the placeholder."""
        self.samples, self.speed_max = empty_samples(), 0.0
        self.last_error = f"data error: {err}"
        return self.render()

    def on_config_changed(self, options: Mapping[str, Any]) -> WindroseResult:
        """Apply new options (merged over the current ones) and re-render.

        Invalid options raise ValueError and leave the current config in place.
        """
        merged = {**vars(self.config), **dict(options)}
        cfg = PanelConfig.from_options(merged)
        cfg.validate()
        self.config = cfg
        self._resize = Debouncer(self.render, cfg.debounce_seconds, clock=self._clock)
        return self.render()

    def on_resize(self) -> None:
        """Schedule a render once resizing has been quiet for the debounce window."""
        self._resize.trigger()

    def poll(self) -> bool:
        return self._resize.poll()

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self) -> WindroseResult:
        # A direct render supersedes any pending resize
        self._resize.cancel()
        if self.last_error is not None:
            result = WindroseResult.placeholder(self.config, error=self.last_error)
        else:
            result = compute_result(self.samples, self.speed_max, self.config)
        self.last_result = result
        self.renderer(result)
        return result
