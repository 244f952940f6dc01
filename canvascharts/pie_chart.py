"""Pie chart drawing onto a 2D canvas context."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from canvascharts.canvas import RecordingContext, canvas_size
from canvascharts.legend import chart_html, legend_html

_ASPECT = 0.8
_CANVAS_STYLE = "width: 100%; height: 100%;"


@dataclass
class PieChartConfig:
    """Options of a pie chart."""

    text_align: str = ""
    show_legend: bool = False


@dataclass
class DataPoint:
    """One named, coloured slice."""

    name: str
    value: int
    color: str


@dataclass
class PieChartProps:
    """The data and configuration of a pie chart."""

    data: list[DataPoint]
    config: PieChartConfig = field(default_factory=PieChartConfig)


def _slice_angle(value: float, total: float) -> float:
    if total:
        return value / total * math.pi * 2.0
    if value == 0:
        return math.nan
    return math.copysign(math.inf, value)


def draw_pie_chart(context: Any, width: float, height: float, props: PieChartProps) -> None:
    """Draw one filled slice per data point, starting at angle zero."""
    total = float(sum(point.value for point in props.data))
    center_x = width / 2.0
    center_y = height / 2.0
    radius = min(width, height) / 2.0 - 5.0
    start_angle = 0.0

    for point in props.data:
        slice_angle = _slice_angle(point.value, total)
        context.begin_path()
        context.move_to(center_x, center_y)
        context.arc(center_x, center_y, radius, start_angle, start_angle + slice_angle)
        context.close_path()
        context.fill_style = point.color
        context.fill()
        start_angle += slice_angle


def render_pie_chart(
    props: PieChartProps, width: float, device_pixel_ratio: float = 1.0
) -> RecordingContext:
    """Size a canvas for a container of ``width`` and draw the chart onto it."""
    height, pixel_width, pixel_height = canvas_size(width, _ASPECT, device_pixel_ratio)
    context = RecordingContext(width=pixel_width, height=pixel_height)
    context.scale(device_pixel_ratio, device_pixel_ratio)
    draw_pie_chart(context, width, height, props)
    return context


def pie_chart_html(props: PieChartProps) -> str:
    """Return the markup that hosts the chart, with a legend if enabled."""
    legend = (
        legend_html((point.name, point.color) for point in props.data)
        if props.config.show_legend
        else ""
    )
    return chart_html(_CANVAS_STYLE, legend)