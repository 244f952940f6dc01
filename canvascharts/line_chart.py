"""Multi-series line chart with smoothed curves drawn onto a 2D canvas context."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from canvascharts.bar_chart import _divide, _format_label
from canvascharts.canvas import RecordingContext, canvas_size
from canvascharts.legend import chart_html, legend_html

_AXIS_PADDING = 50.0
_NUM_GRID_LINES = 5
_ASPECT = 0.6
_POINT_RADIUS = 3.0
_AXIS_COLOR = "#cccccc"
_TITLE_FONT = "bold 12px Arial"
_AREA_ALPHA = "33"
_CANVAS_STYLE = "width: 100%; height: 100%; box-sizing: border-box;"


@dataclass
class LineCurveChartConfig:
    """Options of a line chart."""

    show_grid: bool = False
    show_legend: bool = False
    show_inflection_points: bool = False
    show_x_labels: bool = False
    show_y_labels: bool = False
    show_x_axis: bool = False
    show_y_axis: bool = False
    show_x_axis_labels: bool = False
    show_y_axis_labels: bool = False
    stroke_width: int = 0
    show_area_chart: bool = False
    x_axis_title: str = ""
    y_axis_title: str = ""


@dataclass
class DataPoint:
    """One value of a series."""

    y: int


@dataclass
class Series:
    """The name and colour of one line."""

    name: str
    color: str


@dataclass
class LineCurveChartProps:
    """The series, x labels and configuration of a line chart."""

    data: list[tuple[Series, list[DataPoint]]]
    x: list[str]
    config: LineCurveChartConfig = field(default_factory=LineCurveChartConfig)


def draw_multiline_chart(
    context: Any, width: float, height: float, props: LineCurveChartProps
) -> None:
    """Draw axes, grid, one smoothed line per series, points, labels and titles."""
    datasets = props.data
    if not datasets:
        raise ValueError("a line chart needs at least one series")
    if any(not points for _series, points in datasets):
        raise ValueError("every series of a line chart needs at least one data point")

    config = props.config
    baseline = height - _AXIS_PADDING
    plot_height = height - _AXIS_PADDING * 2.0
    max_value = max(point.y for _series, points in datasets for point in points) * 1.2
    num_points = float(len(datasets[0][1]))
    point_spacing = _divide(width - _AXIS_PADDING * 2.0, num_points - 1.0)

    def x_at(index: int) -> float:
        return _AXIS_PADDING + index * point_spacing

    def y_at(value: int) -> float:
        return baseline - _divide(value, max_value) * plot_height

    context.fill_style = "white"
    context.clear_rect(0.0, 0.0, width, height)

    if config.show_x_axis:
        context.stroke_style = _AXIS_COLOR
        context.line_width = 1.0
        context.begin_path()
        context.move_to(_AXIS_PADDING, baseline)
        context.line_to(width, baseline)
        context.stroke()

    if config.show_y_axis:
        context.stroke_style = _AXIS_COLOR
        context.line_width = 1.0
        context.begin_path()
        context.move_to(_AXIS_PADDING, 0.0)
        context.line_to(_AXIS_PADDING, baseline)
        context.stroke()

    context.stroke_style = _AXIS_COLOR
    context.line_width = 1.0
    context.fill_style = "black"
    context.text_align = "right"
    context.text_baseline = "middle"

    step_value = max_value / _NUM_GRID_LINES
    step_height = plot_height / _NUM_GRID_LINES
    for i in range(_NUM_GRID_LINES + 1):
        y = baseline - i * step_height
        if config.show_grid:
            context.begin_path()
            context.move_to(_AXIS_PADDING, y)
            context.line_to(width, y)
            context.stroke()
        if config.show_y_axis_labels:
            context.fill_text(_format_label(i * step_value), _AXIS_PADDING - 10.0, y)

    for series, points in datasets:
        context.stroke_style = series.color
        context.line_width = float(config.stroke_width)

        context.begin_path()
        context.move_to(_AXIS_PADDING, y_at(points[0].y))
        for i, (prev, point) in enumerate(zip(points, points[1:]), start=1):
            x, y = x_at(i), y_at(point.y)
            prev_x, prev_y = x_at(i - 1), y_at(prev.y)
            context.bezier_curve_to(
                prev_x + point_spacing / 3.0,
                prev_y,
                x - point_spacing / 3.0,
                y,
                x,
                y,
            )
        context.stroke()

        if config.show_area_chart:
            context.line_to(x_at(len(points) - 1), baseline)
            context.line_to(_AXIS_PADDING, baseline)
            context.close_path()
            context.fill_style = f"{series.color}{_AREA_ALPHA}"
            context.fill()

        if config.show_inflection_points:
            context.fill_style = series.color
            for i, point in enumerate(points):
                context.begin_path()
                context.arc(x_at(i), y_at(point.y), _POINT_RADIUS, 0.0, math.pi * 2.0)
                context.fill()

    if config.show_x_axis_labels:
        context.fill_style = "black"
        context.text_align = "center"
        context.text_baseline = "middle"
        for i, label in enumerate(props.x):
            context.fill_text(label, x_at(i), height - _AXIS_PADDING / 2.0)

    if config.x_axis_title:
        context.text_align = "center"
        context.font = _TITLE_FONT
        context.fill_text(config.x_axis_title, width / 2.0, height - _AXIS_PADDING / 4.0)

    if config.y_axis_title:
        context.text_align = "center"
        context.text_baseline = "middle"
        context.font = _TITLE_FONT
        context.save()
        context.rotate(-math.pi / 2.0)
        context.fill_text(config.y_axis_title, -(height / 2.0), _AXIS_PADDING / 4.0)
        context.restore()


def render_line_chart(
    props: LineCurveChartProps, width: float, device_pixel_ratio: float = 1.0
) -> RecordingContext:
    """Size a canvas for a container of ``width`` and draw the chart onto it."""
    height, pixel_width, pixel_height = canvas_size(width, _ASPECT, device_pixel_ratio)
    context = RecordingContext(width=pixel_width, height=pixel_height)
    context.scale(device_pixel_ratio, device_pixel_ratio)
    draw_multiline_chart(context, width, height, props)
    return context


def line_chart_html(props: LineCurveChartProps) -> str:
    """Return the markup that hosts the chart, with a legend if enabled."""
    legend = (
        legend_html((series.name, series.color) for series, _points in props.data)
        if props.config.show_legend
        else ""
    )
    return chart_html(_CANVAS_STYLE, legend)