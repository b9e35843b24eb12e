from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Point:
    x: float  # hour of day, 0..24
    y: float


@dataclass(frozen=True)
class SeriesDescriptor:
    """One labelled, colored point rendered as its own series."""

    point: Point
    label: str
    color: str  # hex RGB, e.g. "#355E3B"


@dataclass(frozen=True)
class LimitLine:
    threshold: float
    label: str
    color: str


@dataclass(frozen=True)
class AxisSpec:
    minimum: float
    maximum: float
    tick_count: int = 6
    granularity: float = 1.0
    gridlines: bool = False
    label_color: str = "black"
    line_color: str = "rgba(0,0,0,0)"
    font_size: int = 10


@dataclass(frozen=True)
class LegendSpec:
    horizontal_alignment: str = "center"
    vertical_alignment: str = "bottom"
    orientation: str = "vertical"
    draw_inside: bool = False
    text_color: str = "black"
    font_size: int = 12


@dataclass(frozen=True)
class ChartSettings:
    """
    Static chart appearance. Built once from literals and passed into
    configure_chart; nothing here depends on the plotted data.
    """

    left_axis: AxisSpec
    right_axis: AxisSpec
    x_axis: AxisSpec
    limit_lines: Tuple[LimitLine, ...] = ()
    legend: LegendSpec = field(default_factory=LegendSpec)
    date_string: str = ""
    x_label_offset: int = 16
    background_color: str = "white"
    drag_enabled: bool = True
    scale_enabled: bool = True
    pinch_zoom_enabled: bool = True
