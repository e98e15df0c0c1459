from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LineErrorKind(str, Enum):
    INVALID_VALUE = "invalid_value"
    UNSUPPORTED_FORMAT = "unsupported_format"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class LineParseError:
    kind: LineErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class IngestionReport:
    points: list[Point]
    skipped_lines: int = 0


@dataclass
class PlotResult:
    output_path: Path
    point_count: int
    skipped_lines: int
    displayed: bool
