from __future__ import annotations

import logging
from pathlib import Path

from plotview.errors import FileOpenError, ScanError
from plotview.types import IngestionReport, LineErrorKind, LineParseError, Point


logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "%")



def _parse_float(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None



def parse_line(line: str, line_index: int | float) -> Point | LineParseError:
    """Parse one stripped, non-comment line.

    A single value is Y with X taken from ``line_index``; two values are X and Y.
    Failures are returned, not raised, so the caller can skip the line.
    """
    fields = line.split()

    if len(fields) == 1:
        y = _parse_float(fields[0])
        if y is None:
            return LineParseError(LineErrorKind.INVALID_VALUE, f"invalid Y value {fields[0]!r}")
        return Point(x=float(line_index), y=y)

    if len(fields) == 2:
        x = _parse_float(fields[0])
        if x is None:
            return LineParseError(LineErrorKind.INVALID_VALUE, f"invalid X value {fields[0]!r}")
        y = _parse_float(fields[1])
        if y is None:
            return LineParseError(LineErrorKind.INVALID_VALUE, f"invalid Y value {fields[1]!r}")
        return Point(x=x, y=y)

    return LineParseError(
        LineErrorKind.UNSUPPORTED_FORMAT,
        f"expected 1 or 2 values, got {len(fields)}",
    )



def is_comment_or_blank(line: str) -> bool:
    return not line or line[0] in COMMENT_PREFIXES



def read_data_report(path: str | Path) -> IngestionReport:
    path = Path(path)
    report = IngestionReport(points=[])
    line_index = 0

    try:
        handle = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileOpenError(f"open file {str(path)!r}: {exc}") from exc

    with handle:
        try:
            for line_number, raw_line in enumerate(handle, start=1):
                line = raw_line.strip()
                if is_comment_or_blank(line):
                    continue

                outcome = parse_line(line, line_index)
                if isinstance(outcome, LineParseError):
                    logger.warning("Skipping line %d in %s: %s", line_number, path.name, outcome)
                    report.skipped_lines += 1
                    continue

                report.points.append(outcome)
                line_index += 1
        except OSError as exc:
            raise ScanError(f"scan file {str(path)!r}: {exc}") from exc

    return report



def read_data(path: str | Path) -> list[Point]:
    return read_data_report(path).points
