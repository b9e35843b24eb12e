import dataclasses

import pandas as pd
import plotly.graph_objects as go
import pytest

from charts import (
    LIMIT_LINE_NAME,
    build_chart_figure,
    build_series,
    configure_chart,
    descriptors_from_frame,
    plotly_config,
    set_chart_data,
)
from constants import DEFAULT_SETTINGS, LIMIT_LINES, SAMPLE_SERIES
from models import Point, SeriesDescriptor


def limit_shapes(fig):
    return [s for s in fig.layout.shapes if (s.name or "").startswith(LIMIT_LINE_NAME)]


def limit_annotations(fig):
    return [a for a in fig.layout.annotations if (a.name or "").startswith(LIMIT_LINE_NAME)]


def test_configure_chart_fixed_axis_domains():
    fig = configure_chart(go.Figure())
    assert list(fig.layout.yaxis.range) == [90, 108]
    assert list(fig.layout.yaxis2.range) == [0, 27]
    assert list(fig.layout.xaxis.range) == [0, 24]
    assert fig.layout.yaxis.autorange is False
    assert fig.layout.yaxis2.overlaying == "y"
    assert fig.layout.yaxis2.side == "right"
    assert fig.layout.yaxis.showgrid is False
    assert fig.layout.yaxis2.showgrid is False


def test_configure_chart_tick_labels():
    fig = configure_chart(go.Figure())
    left = dict(zip(fig.layout.yaxis.tickvals, fig.layout.yaxis.ticktext))
    assert left[90] == "90°F" and left[108] == "108°F"

    right = dict(zip(fig.layout.yaxis2.tickvals, fig.layout.yaxis2.ticktext))
    assert right[4] == "4ml"
    assert right[12] == ""

    x = dict(zip(fig.layout.xaxis.tickvals, fig.layout.xaxis.ticktext))
    assert x[12] == "01-05<br>12:00<br>"
    assert x[24] == "01-05<br>0:00<br>"


def test_configure_chart_uses_date_string_from_settings():
    settings = dataclasses.replace(DEFAULT_SETTINGS, date_string="02-14")
    fig = configure_chart(go.Figure(), settings)
    assert fig.layout.xaxis.ticktext[0] == "02-14<br>0:00<br>"


def test_configure_chart_adds_four_limit_lines_in_order():
    fig = configure_chart(go.Figure())
    shapes = limit_shapes(fig)
    assert [s.y0 for s in shapes] == [102.2, 100.4, 99.5, 96.0]
    assert [s.line.color for s in shapes] == ["red", "orange", "blue", "gray"]
    assert all(s.line.width == 0.5 for s in shapes)
    assert [a.text for a in limit_annotations(fig)] == [line.label for line in LIMIT_LINES]


def test_configure_chart_twice_does_not_duplicate_limit_lines():
    fig = go.Figure()
    fig.add_annotation(text="unrelated", x=1, y=1, showarrow=False)
    configure_chart(fig)
    configure_chart(fig)
    assert len(limit_shapes(fig)) == 4
    assert len(limit_annotations(fig)) == 4
    assert "unrelated" in [a.text for a in fig.layout.annotations]


def test_configure_chart_legend_and_interaction():
    fig = configure_chart(go.Figure())
    assert fig.layout.legend.orientation == "v"
    assert fig.layout.legend.xanchor == "center"
    assert fig.layout.legend.font.size == 12
    assert fig.layout.legend.yanchor == "top"
    assert fig.layout.legend.y < 0
    assert fig.layout.legend.itemsizing == "constant"
    assert fig.layout.plot_bgcolor == "white"
    assert fig.layout.dragmode == "zoom"
    assert fig.layout.xaxis.showspikes is False


def test_build_series_single_descriptor():
    series = build_series(SAMPLE_SERIES)
    assert len(series) == 1
    s = series[0]
    assert s.x == (10,)
    assert s.y == (101.3,)
    assert s.name == "Amber"
    assert s.marker.color == "rgb(53, 94, 59)"
    assert s.marker.symbol == "circle-dot"
    assert s.marker.size == 6
    assert s.marker.line.color == "rgb(255, 255, 255)"
    assert s.marker.line.width == 1.5
    assert s.text == ("101.3",)
    assert s.textfont.size == 10


def test_build_series_uses_color_resolver():
    seen = []

    def resolver(value):
        seen.append(value)
        return "blue"

    descriptors = [
        SeriesDescriptor(Point(1, 98.6), "A", "#000001"),
        SeriesDescriptor(Point(2, 99.1), "B", "#000002"),
    ]
    series = build_series(descriptors, resolver)
    assert [s.name for s in series] == ["A", "B"]
    assert seen == ["#FFFFFF", "#000001", "#000002"]


def test_set_chart_data_replaces_previous_dataset():
    fig = configure_chart(go.Figure())
    set_chart_data(fig, SAMPLE_SERIES)
    set_chart_data(fig, [SeriesDescriptor(Point(20, 97.0), "Night", "#112233")])
    assert [t.name for t in fig.data] == ["Night"]


def test_build_chart_figure_end_to_end():
    fig = build_chart_figure(SAMPLE_SERIES, height=500)
    assert fig.layout.height == 500
    assert [t.name for t in fig.data] == ["Amber"]
    assert len(limit_shapes(fig)) == 4


def test_descriptors_from_frame_with_hours():
    df = pd.DataFrame(
        [
            {"x": 10, "y": 101.3, "label": "Amber", "color": "#355E3B"},
            {"x": None, "y": None, "label": None, "color": None},
        ]
    )
    assert descriptors_from_frame(df) == [SeriesDescriptor(Point(10.0, 101.3), "Amber", "#355E3B")]


def test_descriptors_from_frame_with_recorded_at():
    df = pd.DataFrame([{"recorded_at": "2026-01-05T13:30", "y": 100.1, "label": "Noon", "color": "#FF0000"}])
    (d,) = descriptors_from_frame(df)
    assert d.point == Point(13.5, 100.1)


def test_descriptors_from_frame_missing_columns():
    with pytest.raises(KeyError, match="color"):
        descriptors_from_frame(pd.DataFrame([{"x": 1, "y": 2, "label": "a"}]))


def test_plotly_config_zoom_follows_settings():
    assert plotly_config()["scrollZoom"] is True
    no_pinch = dataclasses.replace(DEFAULT_SETTINGS, pinch_zoom_enabled=False)
    assert plotly_config(no_pinch)["scrollZoom"] is False
    no_scale = dataclasses.replace(DEFAULT_SETTINGS, scale_enabled=False)
    assert plotly_config(no_scale)["scrollZoom"] is False
    assert configure_chart(go.Figure(), no_scale).layout.yaxis.fixedrange is True
