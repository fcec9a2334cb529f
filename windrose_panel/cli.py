"""Typer CLI entry-point for windrose-panel."""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Optional

import typer

from windrose_panel.config import PanelConfig

app = typer.Typer(name="windrose-panel", help="Wind rose binning and rendering.")


@app.callback()
def _callback() -> None:
    """Wind rose binning and rendering."""


def _log(verbose: bool, msg: str) -> None:
    """Emit a diagnostic when verbose mode is on."""
    if verbose:
        typer.echo(msg)


@app.command()
def render(
    input: Path = typer.Option(..., "--input", help="Snapshot JSON (series list) or CSV file"),
    slices: int = typer.Option(32, help="Number of direction buckets"),
    start: float = typer.Option(0.0, help="Lowest speed bucket boundary"),
    step: str = typer.Option("", help="Speed bucket width; empty for auto (ceil(max/8))"),
    unit: str = typer.Option("m/s", help="Speed unit label"),
    scale: str = typer.Option("absolute", help="absolute or percent"),
    speed_col: str = typer.Option("speed", "--speed-col", help="CSV speed column"),
    direction_col: str = typer.Option("direction", "--direction-col", help="CSV direction column"),
    timestamp_col: Optional[str] = typer.Option(None, "--timestamp-col", help="CSV timestamp column"),
    outdir: Path = typer.Option(Path("outputs"), help="Output directory"),
    plot: bool = typer.Option(True, "--plot/--no-plot", help="Save a PNG (requires matplotlib)"),
    title: Optional[str] = typer.Option(None, help="Chart title"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    """Bin a wind snapshot into a wind rose and save rows, result and chart."""
    cfg = PanelConfig.from_options(
        {"slices": slices, "start": start, "step": step, "unit": unit, "scale": scale}
    )
    try:
        cfg.validate()
    except ValueError as exc:
        typer.echo(f"Invalid options: {exc}", err=True)
        raise typer.Exit(code=2)

    _execute(cfg, input, speed_col, direction_col, timestamp_col, outdir, plot, title, verbose)


def _execute(
    cfg: PanelConfig,
    input: Path,
    speed_col: str,
    direction_col: str,
    timestamp_col: str | None,
    outdir: Path,
    plot: bool,
    title: str | None,
    verbose: bool,
) -> None:
    """Orchestrate load → pipeline → save."""
    from windrose_panel.connectors.csv_connector import load_csv
    from windrose_panel.connectors.snapshot import load_snapshot_json, read_snapshot
    from windrose_panel.core.intervals import InvalidRangeError
    from windrose_panel.pipeline import run_windrose_pipeline
    from windrose_panel.storage.io import save_plot_png, save_result_json, save_rows_csv

    # 1. Load snapshot
    typer.echo(f"[1/3] Loading {input}...")
    if input.suffix.lower() == ".csv":
        series = load_csv(input, speed_col=speed_col, direction_col=direction_col, timestamp_col=timestamp_col)
    else:
        series = load_snapshot_json(input)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        samples, speed_max = read_snapshot(series)

        # 2. Bin
        typer.echo("[2/3] Binning samples...")
        try:
            result = run_windrose_pipeline(samples, speed_max, cfg)
        except InvalidRangeError as exc:
            typer.echo(f"Cannot build wind rose: {exc}", err=True)
            raise typer.Exit(code=1)

    for w in caught:
        typer.echo(f"       WARNING: {w.message}")

    meta = result.meta
    typer.echo(f"       {meta['binned_count']} of {meta['sample_count']} samples binned.")
    _log(verbose, f"       speed_max = {meta['speed_max']}, step = {meta['step']}")
    _log(verbose, f"       speed buckets: {', '.join(result.labels)}")

    # 3. Save outputs
    typer.echo("[3/3] Saving outputs...")
    p1 = save_rows_csv(result, outdir, cfg.file_tag)
    p2 = save_result_json(result, outdir, cfg.file_tag)
    typer.echo(f"  Rows CSV:     {p1}")
    typer.echo(f"  Result JSON:  {p2}")
    if plot:
        try:
            p3 = save_plot_png(result, outdir, cfg.file_tag, title=title)
        except ImportError as exc:
            typer.echo(f"  Plot skipped: {exc}")
        else:
            typer.echo(f"  Chart PNG:    {p3}")
    typer.echo("Done.")


if __name__ == "__main__":
    app()
