from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

import pandas as pd
import plotly.graph_objects as go

from constants import (
    DEFAULT_SETTINGS,
    LIMIT_LINE_FONT_SIZE,
    LIMIT_LINE_WIDTH,
    LIMIT_LINE_X_OFFSET,
    LIMIT_LINE_Y_OFFSET,
    SCATTER_HOLE_COLOR,
    SCATTER_HOLE_RADIUS,
    SCATTER_SHAPE_SIZE,
    VALUE_FONT_SIZE,
)
from models import AxisSpec, ChartSettings, LegendSpec, LimitLine, Point, SeriesDescriptor
from utils.axis import axis_ticks
from utils.colors import color_from_string
from utils.formatters import XAxisLabels, left_axis_label, right_axis_label, value_label
from utils.time import hour_of_day

logger = logging.getLogger(__name__)

# Shapes and annotations owned by configure_chart carry this name prefix so a
# second call can find and replace them.
LIMIT_LINE_NAME = "limit-line:"

_HALIGN = {"left": (0.0, "left"), "center": (0.5, "center"), "right": (1.0, "right")}


def _axis_layout(spec: AxisSpec, formatter: Callable[[float], str], *, scale_enabled: bool) -> dict:
    ticks = axis_ticks(spec)
    return dict(
        range=[spec.minimum, spec.maximum],
        autorange=False,
        fixedrange=not scale_enabled,
        tickmode="array",
        tickvals=ticks,
        # plotly breaks tick labels on <br>, not on newlines
        ticktext=[formatter(v).replace("\n", "<br>") for v in ticks],
        tickfont=dict(size=spec.font_size, color=spec.label_color),
        showgrid=spec.gridlines,
        showline=True,
        linecolor=spec.line_color,
        zeroline=False,
        showspikes=False,
    )


def _legend_layout(legend: LegendSpec) -> dict:
    x, xanchor = _HALIGN.get(legend.horizontal_alignment, _HALIGN["center"])
    if legend.draw_inside:
        y, yanchor = (0.0, "bottom") if legend.vertical_alignment == "bottom" else (1.0, "top")
    else:
        # below the multi-line time labels, or above the plot area
        y, yanchor = (-0.25, "top") if legend.vertical_alignment == "bottom" else (1.02, "bottom")
    return dict(
        orientation="v" if legend.orientation == "vertical" else "h",
        x=x,
        xanchor=xanchor,
        y=y,
        yanchor=yanchor,
        itemsizing="constant",
        font=dict(size=legend.font_size, color=legend.text_color),
    )


def _is_limit_line(item) -> bool:
    return (item.name or "").startswith(LIMIT_LINE_NAME)


def _add_limit_line(fig: go.Figure, line: LimitLine) -> None:
    name = f"{LIMIT_LINE_NAME}{line.label}"
    fig.add_hline(
        y=line.threshold,
        line_color=line.color,
        line_width=LIMIT_LINE_WIDTH,
        name=name,
        exclude_empty_subplots=False,
    )
    # Label sits at the left edge, just above the line
    fig.add_annotation(
        name=name,
        xref="paper",
        x=0,
        xanchor="left",
        xshift=LIMIT_LINE_X_OFFSET,
        yref="y",
        y=line.threshold,
        yanchor="bottom",
        yshift=LIMIT_LINE_Y_OFFSET,
        text=line.label,
        showarrow=False,
        font=dict(size=LIMIT_LINE_FONT_SIZE, color=line.color),
    )


def configure_chart(fig: go.Figure, settings: ChartSettings = DEFAULT_SETTINGS) -> go.Figure:
    """
    Apply the static appearance: fixed axis domains and tick labels, limit
    lines on the temperature axis, legend and interaction. Independent of the
    data and safe to call again; earlier limit lines are replaced.
    """
    scale = settings.scale_enabled
    x_labels = XAxisLabels(settings.date_string)

    fig.update_layout(
        template="simple_white",
        plot_bgcolor=settings.background_color,
        paper_bgcolor=settings.background_color,
        dragmode="zoom" if settings.drag_enabled else False,
        hovermode="closest",
        showlegend=True,
        legend=_legend_layout(settings.legend),
        xaxis=dict(
            _axis_layout(settings.x_axis, x_labels, scale_enabled=scale),
            side="bottom",
            ticklabelstandoff=settings.x_label_offset,
        ),
        yaxis=dict(
            _axis_layout(settings.left_axis, left_axis_label, scale_enabled=scale),
            side="left",
        ),
        yaxis2=dict(
            _axis_layout(settings.right_axis, right_axis_label, scale_enabled=scale),
            side="right",
            overlaying="y",
        ),
    )

    fig.layout.shapes = [s for s in fig.layout.shapes if not _is_limit_line(s)]
    fig.layout.annotations = [a for a in fig.layout.annotations if not _is_limit_line(a)]
    for line in settings.limit_lines:
        _add_limit_line(fig, line)

    logger.debug("Configured chart with %d limit lines", len(settings.limit_lines))
    return fig


def build_series(
    descriptors: Iterable[SeriesDescriptor],
    color_resolver: Callable[[str], str] = color_from_string,
) -> List[go.Scatter]:
    """One single-point scatter series per descriptor, in input order."""
    hole_color = color_resolver(SCATTER_HOLE_COLOR)
    series = []
    for d in descriptors:
        series.append(
            go.Scatter(
                x=[d.point.x],
                y=[d.point.y],
                name=d.label,
                yaxis="y",
                mode="markers+text",
                marker=dict(
                    symbol="circle-dot",
                    size=SCATTER_SHAPE_SIZE,
                    color=color_resolver(d.color),
                    # the dot is stroked with the line color: a hollow center
                    line=dict(color=hole_color, width=SCATTER_HOLE_RADIUS),
                ),
                text=[value_label(d.point.y)],
                textposition="top center",
                textfont=dict(size=VALUE_FONT_SIZE, color="black"),
                hovertemplate="%{y:.1f}<extra>%{fullData.name}</extra>",
            )
        )
    return series


def set_chart_data(
    fig: go.Figure,
    descriptors: Iterable[SeriesDescriptor],
    color_resolver: Callable[[str], str] = color_from_string,
) -> go.Figure:
    """Install the series built from descriptors, replacing any prior data."""
    series = build_series(descriptors, color_resolver)
    fig.data = []
    fig.add_traces(series)
    logger.debug("Installed %d series", len(series))
    return fig


def descriptors_from_frame(df: pd.DataFrame) -> List[SeriesDescriptor]:
    """
    Rows of ``label``, ``color``, ``y`` and either ``x`` (hour of day) or
    ``recorded_at`` (datetime-like) to descriptors. Rows missing any of those
    values are skipped.
    """
    x_col = "x" if "x" in df.columns else "recorded_at"
    required = [x_col, "y", "label", "color"]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise KeyError(f"Missing columns: {', '.join(missing)}")

    rows = df.dropna(subset=required)
    if len(rows) < len(df):
        logger.debug("Skipped %d incomplete rows", len(df) - len(rows))

    out = []
    for _, row in rows.iterrows():
        x = float(row[x_col]) if x_col == "x" else hour_of_day(row[x_col])
        out.append(SeriesDescriptor(Point(x, float(row["y"])), str(row["label"]), str(row["color"])))
    return out


def plotly_config(settings: ChartSettings = DEFAULT_SETTINGS) -> dict:
    """Client-side options for st.plotly_chart: wheel and pinch zoom follow the settings."""
    return {
        "scrollZoom": settings.scale_enabled and settings.pinch_zoom_enabled,
        "displaylogo": False,
    }


def build_chart_figure(
    descriptors: Iterable[SeriesDescriptor],
    settings: ChartSettings = DEFAULT_SETTINGS,
    *,
    height: Optional[int] = 600,
) -> go.Figure:
    fig = go.Figure()
    configure_chart(fig, settings)
    set_chart_data(fig, descriptors)
    if height is not None:
        fig.update_layout(height=height)
    return fig
