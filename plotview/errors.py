from __future__ import annotations


class PlotViewError(RuntimeError):
    pass


class ConfigError(PlotViewError):
    pass


class FileOpenError(PlotViewError):
    pass


class ScanError(PlotViewError):
    pass


class EmptyDatasetError(PlotViewError):
    pass


class ChartError(PlotViewError):
    pass


class DisplayError(PlotViewError):
    pass
