"""Wind rose polar chart rendering (requires matplotlib)."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from windrose_panel.core.layout import compute_layout

if TYPE_CHECKING:
    from windrose_panel.pipeline import WindroseResult


def plot_wind_rose(
    result: WindroseResult,
    filepath: str | Path,
    title: str | None = None,
) -> None:
    """Render a polar stacked-bar wind rose and save to *filepath*.

    Parameters
    ----------
    result : output of :func:`windrose_panel.pipeline.run_windrose_pipeline`.
    filepath : output image path (PNG recommended).
    title : optional chart title.

    An empty or failed result is drawn as a bare polar frame with a
    "No data" note.

    Raises
    ------
    ImportError
        If matplotlib is not installed.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.ticker import PercentFormatter
    except ImportError:
        raise ImportError(
            "matplotlib is required for wind rose plots. "
            "Install it with: pip install 'windrose-panel[viz]'"
        )

    layout = compute_layout(result)

    fig, ax = plt.subplots(1, 1, subplot_kw={"projection": "polar"}, figsize=(8, 8))
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)  # clockwise (meteorological convention)

    if result.is_empty:
        note = result.error or "No data"
        ax.text(0.5, 0.5, note, transform=ax.transAxes, ha="center", va="center", fontsize=10)
        ax.set_yticks([])
    else:
        # Bars start at the bucket's low angle, like arcs spanning one band
        theta = np.asarray(layout.theta)
        width = layout.bandwidth * 0.97
        for lbl, segs in layout.segments.items():
            inner = np.array([s[0] for s in segs])
            height = np.array([s[1] for s in segs]) - inner
            ax.bar(
                theta,
                height,
                width=width,
                bottom=inner,
                align="edge",
                color=layout.colors[lbl],
                label=f"{lbl} {result.unit}",
            )

        ax.set_ylim(0, layout.radius_max * 1.05 if layout.radius_max > 0 else 1)
        if layout.scale == "percent":
            ax.yaxis.set_major_formatter(PercentFormatter(xmax=1.0))

        # Fastest bucket on top of the legend
        handles, labels = ax.get_legend_handles_labels()
        ax.legend(handles[::-1], labels[::-1], loc="upper right", bbox_to_anchor=(1.3, 1.1), fontsize=8)

    ax.set_xticks(np.radians(layout.angle_grid))
    ax.set_xticklabels([f"{a:g}" for a in layout.angle_grid])

    if title:
        ax.set_title(title, pad=20, fontsize=11)

    meta = result.meta
    if meta:
        fig.text(
            0.5, 0.02,
            f"Samples: {meta.get('binned_count', 0)} binned / {meta.get('valid_count', 0)} valid",
            ha="center", fontsize=9,
        )

    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
