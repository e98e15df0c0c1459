from __future__ import annotations

import logging
from typing import TextIO

from analytics.visualization import output_path_for, save_plot
from data_ingestion.reader import read_data_report

from .config import PlotSettings
from .errors import EmptyDatasetError
from .terminal import display_sixel
from .types import PlotResult


logger = logging.getLogger(__name__)


class PlotPipeline:
    def __init__(self, settings: PlotSettings, output: TextIO | None = None):
        self.settings = settings
        self.output = output

    def run(self) -> PlotResult:
        input_path = self.settings.input_path
        report = read_data_report(input_path)
        if not report.points:
            raise EmptyDatasetError(f"no valid data points found in {str(input_path)!r}")

        output_path = output_path_for(input_path)
        save_plot(report.points, output_path, self.settings)
        logger.info("Plot saved to: %s", output_path)

        displayed = display_sixel(output_path, self.settings, output=self.output)

        return PlotResult(
            output_path=output_path,
            point_count=len(report.points),
            skipped_lines=report.skipped_lines,
            displayed=displayed,
        )
