from __future__ import annotations

from datetime import date, datetime, time as time_t
from typing import Union

import pandas as pd


def date_label(d: date) -> str:
    """Month-day prefix used on the time axis, e.g. '01-05'."""
    return d.strftime("%m-%d")


def hour_of_day(value: Union[str, datetime, time_t]) -> float:
    """
    Fractional hour of day for a time, datetime or datetime-like string,
    e.g. '2026-01-05T13:30' -> 13.5. Strings are parsed via pandas.
    """
    if isinstance(value, time_t):
        t = value
    else:
        t = pd.to_datetime(value).time()
    return t.hour + t.minute / 60.0 + t.second / 3600.0
