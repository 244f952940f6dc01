"""Bar chart drawing onto a 2D canvas context."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from canvascharts.canvas import RecordingContext, canvas_size

_AXIS_PADDING = 50.0
_NUM_GRID_LINES = 5
_ASPECT = 0.6
_CANVAS_STYLE = "width: 90%; height: 90%;"


@dataclass
class BarChartConfig:
    """Colours used by a bar chart."""

    bar_color: str = ""
    grid_color: str = ""
    axis_color: str = ""


@dataclass
class DataPoint:
    """One named bar."""

    name: str
    value: int


@dataclass
class BarChartProps:
    """The data and configuration of a bar chart."""

    data: list[DataPoint]
    config: BarChartConfig = field(default_factory=BarChartConfig)


def _format_label(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    rounded = math.copysign(math.floor(abs(value) + 0.5), value)
    if rounded == 0 and math.copysign(1.0, rounded) < 0:
        return "-0"
    return str(int(rounded))


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def draw_bar_chart(context: Any, width: float, height: float, props: BarChartProps) -> None:
    """Draw grid lines, y labels, bars and x labels for ``props``."""
    if not props.data:
        raise ValueError("a bar chart needs at least one data point")
    values = [point.value for point in props.data]
    num_bars = float(len(values) + 2)
    total_spacing = width * 0.1
    total_bar_width = width - total_spacing
    bar_width = total_bar_width / (num_bars * 3.0)
    bar_spacing = total_spacing / (num_bars - 1.0)
    plot_height = height - _AXIS_PADDING * 2.0

    context.clear_rect(0.0, 0.0, width, height)

    max_value = max(values) * 1.2
    step_value = max_value / _NUM_GRID_LINES
    step_height = plot_height / _NUM_GRID_LINES

    context.stroke_style = "#cccccc"
    context.line_width = 1.0
    context.fill_style = "black"
    context.text_align = "right"
    context.text_baseline = "middle"

    for i in range(_NUM_GRID_LINES + 1):
        y = height - _AXIS_PADDING - i * step_height
        context.begin_path()
        context.move_to(_AXIS_PADDING, y)
        context.line_to(width, y)
        context.stroke()
        context.fill_text(_format_label(i * step_value), _AXIS_PADDING - 10.0, y)

    scale = _divide(plot_height, max_value)
    context.fill_style = props.config.bar_color
    for i, value in enumerate(values):
        x = _AXIS_PADDING + i * (bar_width + bar_spacing)
        y = height - _AXIS_PADDING - value * scale
        context.fill_rect(x, y, bar_width, height - _AXIS_PADDING - y)

    context.fill_style = "black"
    context.text_align = "center"
    context.text_baseline = "middle"
    for i, point in enumerate(props.data):
        x = _AXIS_PADDING + i * (bar_width + bar_spacing) + bar_width / 2.0
        y = height - _AXIS_PADDING / 2.0
        context.fill_text(point.name, x, y)


def render_bar_chart(
    props: BarChartProps, width: float, device_pixel_ratio: float = 1.0
) -> RecordingContext:
    """Size a canvas for a container of ``width`` and draw the chart onto it."""
    height, pixel_width, pixel_height = canvas_size(width, _ASPECT, device_pixel_ratio)
    context = RecordingContext(width=pixel_width, height=pixel_height)
    context.scale(device_pixel_ratio, device_pixel_ratio)
    draw_bar_chart(context, width, height, props)
    return context


def bar_chart_html(props: BarChartProps) -> str:
    """Return the markup that hosts the bar chart canvas."""
    return f'<canvas style="{_CANVAS_STYLE}"></canvas>'