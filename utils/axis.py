from __future__ import annotations

import math
from typing import List

from models import AxisSpec
from utils.formatters import round_half_away


def _round_to_significant(value: float) -> float:
    # one significant digit, ties away from zero: 2.077 -> 2, 2.5 -> 3, 18 -> 20
    if value == 0 or not math.isfinite(value):
        return 0.0
    magnitude = 10 ** math.floor(math.log10(abs(value)))
    return round_half_away(value / magnitude) * magnitude


def tick_interval(spec: AxisSpec) -> float:
    """
    Spacing between ticks for a fixed domain: range / tick_count rounded to
    one significant digit, never finer than the granularity, and bumped to
    the next power of ten when that digit is above 5.
    """
    span = abs(spec.maximum - spec.minimum)
    if span == 0 or spec.tick_count <= 0:
        return 0.0

    interval = _round_to_significant(span / spec.tick_count)
    if spec.granularity and interval < spec.granularity:
        interval = spec.granularity

    magnitude = 10 ** math.floor(math.log10(interval))
    if int(interval / magnitude) > 5:
        interval = math.floor(10 * magnitude)
    return interval


def axis_ticks(spec: AxisSpec) -> List[float]:
    """Multiples of tick_interval that fall inside [minimum, maximum]."""
    interval = tick_interval(spec)
    if interval == 0:
        return [float(spec.minimum)]

    first = math.ceil(spec.minimum / interval) * interval
    ticks = []
    n = 0
    # tolerance keeps float error from dropping the last tick
    while first + n * interval <= spec.maximum + interval * 1e-9:
        tick = round(first + n * interval, 10)
        ticks.append(tick + 0.0)
        n += 1
    return ticks
