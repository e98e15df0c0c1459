from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from plotview.config import load_settings
from plotview.errors import ConfigError, PlotViewError
from plotview.pipeline import PlotPipeline


app = typer.Typer(help="Plot one- or two-column numeric data files.", add_completion=False)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)



def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
    )


@app.command()
def plot(
    input_file: Path = typer.Argument(..., help="Data file with 'Y' or 'X Y' per line."),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Plot width in points."),
    height: Optional[int] = typer.Option(None, "--height", "-h", help="Plot height in points."),
    scale: Optional[float] = typer.Option(None, "--scale", "-s", help="SIXEL scale factor."),
    line_width: Optional[float] = typer.Option(None, "--line-width", help="Line width in points."),
    line_color: Optional[str] = typer.Option(None, "--line-color", help="Line color."),
    scatter_color: Optional[str] = typer.Option(None, "--scatter-color", help="Marker color."),
    background: Optional[str] = typer.Option(None, "--background", help="Background color."),
    title: Optional[str] = typer.Option(None, "--title", help="Plot title."),
    display: bool = typer.Option(True, "--display/--no-display", help="Show the plot inline on SIXEL terminals."),
) -> None:
    """Plot INPUT_FILE and save it as <name>_plot.png."""
    try:
        settings = load_settings(
            input_file,
            width=width,
            height=height,
            scale=scale,
            line_width=line_width,
            line_color=line_color,
            scatter_color=scatter_color,
            background_color=background,
            title=title,
            display=display,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.log_level)

    try:
        result = PlotPipeline(settings).run()
    except PlotViewError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if result.skipped_lines:
        err_console.print(f"[yellow]Skipped {result.skipped_lines} malformed line(s).[/yellow]")
    console.print(f"[green]Plot saved to:[/green] {escape(str(result.output_path))}")


if __name__ == "__main__":
    app()
