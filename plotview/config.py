from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from matplotlib.colors import is_color_like

from .errors import ConfigError


DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 1200
DEFAULT_SCALE = 1.0
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_TITLE = "Data Plot"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_COLORS: dict[str, str] = {
    "line": "black",
    "scatter": "black",
    "background": "white",
}


@dataclass(frozen=True)
class PlotSettings:
    input_path: Path
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    scale: float = DEFAULT_SCALE
    line_width: float = DEFAULT_LINE_WIDTH
    line_color: str = DEFAULT_COLORS["line"]
    scatter_color: str = DEFAULT_COLORS["scatter"]
    background_color: str = DEFAULT_COLORS["background"]
    title: str = DEFAULT_TITLE
    terminal: str = ""
    display: bool = True
    log_level: str = DEFAULT_LOG_LEVEL



def _env_int(name: str, default: int, override: int | None = None) -> int:
    if override is not None:
        return override
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from exc



def _env_float(name: str, default: float, override: float | None = None) -> float:
    if override is not None:
        return override
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}.") from exc



def _pick(override, fallback):
    return fallback if override is None else override



def validate_settings(settings: PlotSettings) -> PlotSettings:
    for label, value in (("width", settings.width), ("height", settings.height)):
        if value <= 0:
            raise ConfigError(f"Plot {label} must be a positive integer, got {value}.")

    for label, value in (("scale", settings.scale), ("line width", settings.line_width)):
        if not math.isfinite(value) or value <= 0:
            raise ConfigError(f"Plot {label} must be a positive number, got {value}.")

    colors = {
        "line color": settings.line_color,
        "scatter color": settings.scatter_color,
        "background color": settings.background_color,
    }
    for label, value in colors.items():
        if not is_color_like(value):
            raise ConfigError(f"Unrecognized {label}: {value!r}.")

    if settings.log_level not in LOG_LEVELS:
        raise ConfigError(f"PLOTVIEW_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}.")

    return settings



def load_settings(
    input_path: str | Path,
    *,
    width: int | None = None,
    height: int | None = None,
    scale: float | None = None,
    line_width: float | None = None,
    line_color: str | None = None,
    scatter_color: str | None = None,
    background_color: str | None = None,
    title: str | None = None,
    display: bool = True,
) -> PlotSettings:
    """Resolve plot settings: explicit arguments win over environment defaults.

    Environment variables (optionally loaded from ``.env``) use the ``PLOTVIEW_``
    prefix. ``TERM`` is captured here so the display step never reads the
    environment on its own.
    """
    if not str(input_path).strip():
        raise ConfigError("Input file path must not be empty.")

    load_dotenv()

    settings = PlotSettings(
        input_path=Path(input_path),
        width=_env_int("PLOTVIEW_WIDTH", DEFAULT_WIDTH, width),
        height=_env_int("PLOTVIEW_HEIGHT", DEFAULT_HEIGHT, height),
        scale=_env_float("PLOTVIEW_SCALE", DEFAULT_SCALE, scale),
        line_width=_env_float("PLOTVIEW_LINE_WIDTH", DEFAULT_LINE_WIDTH, line_width),
        line_color=_pick(line_color, os.getenv("PLOTVIEW_LINE_COLOR", DEFAULT_COLORS["line"])),
        scatter_color=_pick(
            scatter_color, os.getenv("PLOTVIEW_SCATTER_COLOR", DEFAULT_COLORS["scatter"])
        ),
        background_color=_pick(
            background_color,
            os.getenv("PLOTVIEW_BACKGROUND_COLOR", DEFAULT_COLORS["background"]),
        ),
        title=_pick(title, os.getenv("PLOTVIEW_TITLE", DEFAULT_TITLE)),
        terminal=os.getenv("TERM", ""),
        display=display,
        log_level=os.getenv("PLOTVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
    return validate_settings(settings)
