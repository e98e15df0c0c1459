from __future__ import annotations

from pathlib import Path

import pandas as pd
from matplotlib.figure import Figure

from plotview.config import PlotSettings
from plotview.errors import ChartError
from plotview.types import Point


POINTS_PER_INCH = 72
SCATTER_RADIUS = 2.0
OUTPUT_SUFFIX = "_plot.png"



def output_path_for(input_path: str | Path) -> Path:
    path = Path(input_path)
    return path.with_name(f"{path.stem}{OUTPUT_SUFFIX}")



def points_frame(points: list[Point]) -> pd.DataFrame:
    return pd.DataFrame(
        {"x": [point.x for point in points], "y": [point.y for point in points]},
        dtype="float64",
    )



def build_figure(points: list[Point], settings: PlotSettings) -> Figure:
    """Draw the line and scatter traces on a figure sized in points.

    At 72 dpi one point is one pixel, so the saved PNG is exactly
    ``width`` x ``height`` pixels.
    """
    df = points_frame(points)

    fig = Figure(
        figsize=(settings.width / POINTS_PER_INCH, settings.height / POINTS_PER_INCH),
        dpi=POINTS_PER_INCH,
        facecolor=settings.background_color,
    )
    ax = fig.add_subplot()
    ax.set_facecolor(settings.background_color)

    df.plot(
        x="x",
        y="y",
        kind="line",
        ax=ax,
        color=settings.line_color,
        linewidth=settings.line_width,
        legend=False,
    )
    df.plot(
        x="x",
        y="y",
        kind="scatter",
        ax=ax,
        color=settings.scatter_color,
        # marker size is an area in points^2
        s=(2 * SCATTER_RADIUS) ** 2,
        zorder=3,
    )

    ax.set_title(settings.title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    return fig



def save_plot(points: list[Point], output_path: Path, settings: PlotSettings) -> Path:
    try:
        fig = build_figure(points, settings)
    except (ValueError, TypeError) as exc:
        raise ChartError(f"create plotters: {exc}") from exc

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, format="png", facecolor=fig.get_facecolor())
    except (OSError, ValueError) as exc:
        raise ChartError(f"save plot {str(output_path)!r}: {exc}") from exc
    return output_path
