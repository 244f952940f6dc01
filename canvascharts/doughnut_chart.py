"""Doughnut chart drawing onto a 2D canvas context."""

from __future__ import annotations

import math
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any

from canvascharts.canvas import RecordingContext, canvas_size
from canvascharts.legend import chart_html, legend_html

_ASPECT = 0.8
_MAX_RADIUS = 150.0
_HOLE_RATIO = 0.5
_CANVAS_STYLE = "width: 100%; height: 100%;"


@dataclass
class DoughnutChartConfigs:
    """Options of a doughnut chart."""

    show_legend: bool = False


@dataclass
class DoughnutChartProps:
    """The data and configuration of a doughnut chart.

    Each data item is a ``(label, value, color)`` tuple.
    """

    data: list[tuple[str, int, str]]
    config: DoughnutChartConfigs = field(default_factory=DoughnutChartConfigs)


def _sweep_angle(value: float, total: float) -> float:
    if total:
        return value / total * 2.0 * math.pi
    if value == 0:
        return math.nan
    return math.copysign(math.inf, value)


def _arc(context: Any, *args: float) -> None:
    # Arc failures (such as a negative radius) leave the segment without a curve.
    with suppress(ValueError):
        context.arc(*args)


def draw_doughnut_chart(
    context: Any, width: float, height: float, props: DoughnutChartProps
) -> None:
    """Draw one segment per data item, clockwise from the top, with a hole."""
    center_x = width / 2.0
    center_y = height / 2.0
    radius = min(min(width, height) / 2.0, _MAX_RADIUS)
    inner_radius = radius * _HOLE_RATIO

    total = float(sum(value for _, value, _ in props.data))
    start_angle = -math.pi / 2.0

    for _label, value, color in props.data:
        end_angle = start_angle + _sweep_angle(value, total)

        context.begin_path()
        context.fill_style = color
        context.move_to(center_x, center_y)
        _arc(context, center_x, center_y, radius, start_angle, end_angle)
        context.line_to(center_x, center_y)
        context.fill()
        context.close_path()

        context.begin_path()
        context.stroke_style = "white"
        context.line_width = 2.0
        context.move_to(center_x, center_y)
        _arc(context, center_x, center_y, radius, start_angle, end_angle)
        context.line_to(center_x, center_y)
        context.stroke()
        context.close_path()

        context.begin_path()
        context.global_composite_operation = "destination-out"
        _arc(context, center_x, center_y, inner_radius, 0.0, 2.0 * math.pi)
        context.fill()
        context.close_path()
        context.global_composite_operation = "source-over"

        start_angle = end_angle


def render_doughnut_chart(
    props: DoughnutChartProps, width: float, device_pixel_ratio: float = 1.0
) -> RecordingContext:
    """Size a canvas for a container of ``width`` and draw the chart onto it."""
    height, pixel_width, pixel_height = canvas_size(width, _ASPECT, device_pixel_ratio)
    context = RecordingContext(width=pixel_width, height=pixel_height)
    context.scale(device_pixel_ratio, device_pixel_ratio)
    draw_doughnut_chart(context, width, height, props)
    return context


def doughnut_chart_html(props: DoughnutChartProps) -> str:
    """Return the markup that hosts the chart, with a legend if enabled."""
    legend = (
        legend_html((label, color) for label, _value, color in props.data)
        if props.config.show_legend
        else ""
    )
    return chart_html(_CANVAS_STYLE, legend)