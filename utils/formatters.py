from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

# Volume ticks that get a label; the rest stay blank to thin out the axis.
SHOWN_VOLUMES = frozenset({0, 2, 4, 6, 8, 10})

HOUR_LABELS: Mapping[int, str] = MappingProxyType(
    {
        0: "0:00",
        4: "4:00",
        8: "8:00",
        12: "12:00",
        16: "16:00",
        20: "20:00",
        24: "0:00",
    }
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (12.5 -> 13, -0.5 -> -1)."""
    magnitude = abs(value)
    return int(math.copysign(math.floor(magnitude) + (magnitude % 1 >= 0.5), value))


def left_axis_label(value: float) -> str:
    if not math.isfinite(value):
        return ""
    return f"{int(value)}°F"


def right_axis_label(value: float) -> str:
    if not math.isfinite(value):
        return ""
    whole = int(value)
    if whole in SHOWN_VOLUMES:
        return f"{whole}ml"
    return ""


class XAxisLabels:
    """
    Time-axis tick labels: the date string, then the hour from HOUR_LABELS,
    each on its own line. Ticks are rounded (not truncated) before lookup.
    """

    def __init__(self, date_string: str) -> None:
        self.date_string = date_string

    def __call__(self, value: float) -> str:
        if not math.isfinite(value):
            return ""
        label = HOUR_LABELS.get(round_half_away(value))
        if label is None:
            return ""
        return f"{self.date_string}\n{label}\n"


def value_label(value: float) -> str:
    return f"{value:.1f}"
