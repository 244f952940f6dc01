# canvascharts

Small chart drawing routines for a 2D canvas. Each chart makes the calls a
browser 2D canvas context would receive (`begin_path`, `move_to`, `arc`,
`fill_rect`, `fill_text`, style assignments and so on) on whatever context
object you pass in. It also gives you the HTML markup that holds the canvas,
with an optional legend.

Charts:

- **Bar chart**: `canvascharts.bar_chart`
- **Pie chart**: `canvascharts.pie_chart`
- **Doughnut chart**: `canvascharts.doughnut_chart`, a pie chart with a hole
  in the middle
- **Line chart**: `canvascharts.line_chart`, with one or more series drawn as
  smoothed Bézier curves, and optional points, grid, axes, area fill and axis
  titles

The package has no dependencies outside the standard library.

## Installation

```
pip install canvascharts
```

## The recording context

`canvascharts.canvas.RecordingContext` stores every drawing call as a
`Command(name, args)` in its `commands` list, in the order the calls were
made. `calls(name)` returns only the commands with that name. The style
attributes (`fill_style`, `stroke_style`, `line_width`, `text_align`,
`text_baseline`, `font`, `global_composite_operation`) can be read back, and
each assignment to one of them is recorded as well. `save()` and `restore()`
keep a stack of these styles.

It behaves like a browser canvas in two ways. Calls with coordinates that are
not finite (NaN or infinity) are ignored. `arc` raises `ValueError` when
given a negative radius.

## Drawing a chart

```python
from canvascharts.canvas import RecordingContext
from canvascharts.bar_chart import BarChartConfig, BarChartProps, DataPoint, draw_bar_chart

props = BarChartProps(
    data=[DataPoint("A", 10), DataPoint("B", 20), DataPoint("C", 15)],
    config=BarChartConfig("blue", "gray", "black"),
)

context = RecordingContext()
draw_bar_chart(context, 500.0, 400.0, props)

for command in context.calls("fill_rect"):
    print(command)
```

The drawing functions are:

- `draw_bar_chart(context, width, height, props)`: five grid lines with
  rounded y labels up to 120% of the largest value, one bar per data point in
  `config.bar_color`, and the names as x labels. It raises `ValueError` when
  there is no data. `grid_color` and `axis_color` are kept in the config but
  are not used when drawing.
- `draw_pie_chart(context, width, height, props)`: one slice per
  `DataPoint(name, value, color)`, starting at angle zero.
- `draw_doughnut_chart(context, width, height, props)`: `props.data` is a list
  of `(label, value, color)` tuples. Segments run clockwise from the top, each
  has a white outline, and the radius is at most 150 with a hole of half that
  size.
- `draw_multiline_chart(context, width, height, props)`: `props.data` is a
  list of `(Series(name, color), [DataPoint(y), ...])` pairs and `props.x`
  holds the x labels. `LineCurveChartConfig` switches the grid, axes, y axis
  labels, x axis labels, points, area fill and stroke width on or off, and
  sets the axis titles. The function raises `ValueError` when there are no
  series or when a series is empty.

All config flags default to off, and the stroke width defaults to 0.

## Sizing for a container

`render_bar_chart`, `render_pie_chart`, `render_doughnut_chart` and
`render_line_chart` take `props`, a container `width` and a
`device_pixel_ratio` (default `1.0`). Each one creates a `RecordingContext`
sized in device pixels, scales it by the ratio, draws the chart and returns
the context:

```python
from canvascharts.pie_chart import DataPoint, PieChartProps, render_pie_chart

props = PieChartProps(data=[
    DataPoint("A", 10, "#ff0000"),
    DataPoint("B", 20, "#00ff00"),
    DataPoint("C", 30, "#0000ff"),
])
context = render_pie_chart(props, width=400.0, device_pixel_ratio=2.0)
print(context.width, context.height)  # 800 640
```

The chart height is `width` times 0.6 for bar and line charts, and `width`
times 0.8 for pie and doughnut charts.
`canvascharts.canvas.canvas_size(width, aspect, device_pixel_ratio)` returns
`(height, pixel_width, pixel_height)`.

## Markup

`bar_chart_html`, `pie_chart_html`, `doughnut_chart_html` and
`line_chart_html` return the canvas element as an HTML string. For the pie,
doughnut and line charts it is wrapped in a `<div>` together with a legend of
coloured swatches when the config's `show_legend` is true:

```python
from canvascharts.pie_chart import PieChartConfig, pie_chart_html

props.config = PieChartConfig(show_legend=True)
print(pie_chart_html(props))
```

`canvascharts.legend.legend_html(entries)` builds a legend from
`(label, color)` pairs. `canvascharts.legend.chart_html(canvas_style, legend)`
wraps a legend and a styled canvas. Labels and styles are HTML-escaped.

## What it does not do

The package does not turn drawing calls into pixels or image files, and it
does not attach to a live browser page or redraw when the window is resized.
It produces drawing calls and markup. To get an image, replay the recorded
commands on a real canvas, or pass in a context object of your own that has
the same methods.

## Running the tests

```
pip install canvascharts[test]
pytest
```