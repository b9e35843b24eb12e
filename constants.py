from __future__ import annotations

from typing import Tuple

from models import (
    AxisSpec,
    ChartSettings,
    LegendSpec,
    LimitLine,
    Point,
    SeriesDescriptor,
)

# Fixed axis domains (°F, ml, hour of day). Not derived from the data.
TEMP_AXIS_MIN: float = 90.0
TEMP_AXIS_MAX: float = 108.0
VOLUME_AXIS_MIN: float = 0.0
VOLUME_AXIS_MAX: float = 27.0
HOUR_AXIS_MIN: float = 0.0
HOUR_AXIS_MAX: float = 24.0

AXIS_FONT_SIZE: int = 10
VALUE_FONT_SIZE: int = 10
LIMIT_LINE_FONT_SIZE: int = 10
LIMIT_LINE_WIDTH: float = 0.5
LIMIT_LINE_X_OFFSET: int = -3
LIMIT_LINE_Y_OFFSET: int = 8

SCATTER_SHAPE_SIZE: int = 6
SCATTER_HOLE_RADIUS: float = 1.5
SCATTER_HOLE_COLOR: str = "#FFFFFF"

DEFAULT_DATE_STRING: str = "01-05"

# Clinical severity bands, drawn on the temperature axis.
LIMIT_LINES: Tuple[LimitLine, ...] = (
    LimitLine(102.2, "Moderate Fever(102.2)", "red"),
    LimitLine(100.4, "Low grade Fever(100.4)", "orange"),
    LimitLine(99.5, "Mild Fever(99.5)", "blue"),
    LimitLine(96.0, "Hypothermia(95)", "gray"),
)

DEFAULT_SETTINGS = ChartSettings(
    left_axis=AxisSpec(TEMP_AXIS_MIN, TEMP_AXIS_MAX, tick_count=10, font_size=AXIS_FONT_SIZE),
    right_axis=AxisSpec(VOLUME_AXIS_MIN, VOLUME_AXIS_MAX, tick_count=13, font_size=AXIS_FONT_SIZE),
    x_axis=AxisSpec(HOUR_AXIS_MIN, HOUR_AXIS_MAX, tick_count=6, font_size=AXIS_FONT_SIZE),
    limit_lines=LIMIT_LINES,
    legend=LegendSpec(),
    date_string=DEFAULT_DATE_STRING,
)

SAMPLE_SERIES: Tuple[SeriesDescriptor, ...] = (
    SeriesDescriptor(Point(10, 101.3), "Amber", "#355E3B"),
)
