from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from sixel.converter import SixelConverter

from .config import PlotSettings
from .errors import DisplayError


logger = logging.getLogger(__name__)

SIXEL_TERMINALS = ("xterm", "vt340", "mlterm")



def is_sixel_supported(term: str | None) -> bool:
    lowered = (term or "").lower()
    return any(name in lowered for name in SIXEL_TERMINALS)



def sixel_size(settings: PlotSettings) -> tuple[int, int] | None:
    if settings.scale == 1.0:
        return None
    return int(settings.width * settings.scale), int(settings.height * settings.scale)



def display_sixel(image_path: Path, settings: PlotSettings, output: TextIO | None = None) -> bool:
    """Stream the saved plot to the terminal as SIXEL.

    Returns False, without writing anything, when display is disabled or the
    terminal does not advertise SIXEL support.
    """
    if not settings.display:
        return False
    if not is_sixel_supported(settings.terminal):
        logger.debug("Terminal %r has no SIXEL support; skipping display.", settings.terminal)
        return False

    size = sixel_size(settings)
    width, height = size if size is not None else (None, None)

    try:
        with image_path.open("rb") as image_file:
            converter = SixelConverter(image_file, w=width, h=height)
    except (OSError, ValueError) as exc:
        raise DisplayError(f"decode image {str(image_path)!r}: {exc}") from exc

    try:
        converter.write(output if output is not None else sys.stdout)
    except (OSError, ValueError) as exc:
        raise DisplayError(f"encode SIXEL: {exc}") from exc
    return True
