from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import List

import pandas as pd
import streamlit as st

from charts import build_chart_figure, descriptors_from_frame, plotly_config
from constants import DEFAULT_SETTINGS, SAMPLE_SERIES
from models import SeriesDescriptor
from utils.time import date_label

logger = logging.getLogger(__name__)


def _sample_frame() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"x": s.point.x, "y": s.point.y, "label": s.label, "color": s.color}
            for s in SAMPLE_SERIES
        ]
    )


def _render_series_editor() -> List[SeriesDescriptor]:
    st.subheader("Measurements")
    st.caption("x: hour of day (0-24), y: temperature (°F), color: hex RGB")
    edited = st.data_editor(
        _sample_frame(),
        num_rows="dynamic",
        use_container_width=True,
        column_config={
            "x": st.column_config.NumberColumn("Hour", min_value=0.0, max_value=24.0, step=0.5),
            "y": st.column_config.NumberColumn("Temperature (°F)", format="%.1f"),
            "label": st.column_config.TextColumn("Label"),
            "color": st.column_config.TextColumn("Color"),
        },
        key="series_editor",
    )
    return descriptors_from_frame(edited)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    st.set_page_config(page_title="Fever Chart", page_icon="🌡️", layout="wide")
    st.title("🌡️ Fever Chart")

    day = st.date_input("Day", value=date(date.today().year, 1, 5))
    settings = dataclasses.replace(DEFAULT_SETTINGS, date_string=date_label(day))

    descriptors = _render_series_editor()
    fig = build_chart_figure(descriptors, settings, height=650)
    st.plotly_chart(
        fig,
        use_container_width=True,
        config=plotly_config(settings),
    )
    logger.info("Rendered %d series for %s", len(descriptors), settings.date_string)


if __name__ == "__main__":
    main()
