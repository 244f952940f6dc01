import pytest

from canvascharts.bar_chart import (
    BarChartConfig,
    BarChartProps,
    DataPoint,
    bar_chart_html,
    draw_bar_chart,
    render_bar_chart,
)
from canvascharts.canvas import RecordingContext


@pytest.fixture
def props():
    data = [DataPoint("A", 10), DataPoint("B", 20), DataPoint("C", 15)]
    return BarChartProps(data=data, config=BarChartConfig("blue", "gray", "black"))


def test_draw_bar_chart(props):
    ctx = RecordingContext()
    draw_bar_chart(ctx, 500.0, 400.0, props)
    assert ctx.calls("clear_rect")[0].args == (0.0, 0.0, 500.0, 400.0)
    assert len(ctx.calls("fill_rect")) == 3
    assert len(ctx.calls("stroke")) == 6
    assert ctx.calls("fill_style")[1].args == ("blue",)


def test_y_axis_labels(props):
    ctx = RecordingContext()
    draw_bar_chart(ctx, 500.0, 400.0, props)
    texts = [c.args[0] for c in ctx.calls("fill_text")]
    assert texts[:6] == ["0", "5", "10", "14", "19", "24"]
    assert texts[6:] == ["A", "B", "C"]


def test_bar_geometry(props):
    ctx = RecordingContext()
    draw_bar_chart(ctx, 500.0, 400.0, props)
    x, y, w, h = ctx.calls("fill_rect")[0].args
    assert x == pytest.approx(50.0)
    assert w == pytest.approx(30.0)
    assert y == pytest.approx(225.0)
    assert h == pytest.approx(125.0)


def test_tallest_bar_is_largest_value(props):
    ctx = RecordingContext()
    draw_bar_chart(ctx, 500.0, 400.0, props)
    heights = [c.args[3] for c in ctx.calls("fill_rect")]
    assert heights.index(max(heights)) == 1
    assert heights[0] * 2 == pytest.approx(heights[1])


def test_empty_data_raises():
    with pytest.raises(ValueError):
        draw_bar_chart(RecordingContext(), 500.0, 400.0, BarChartProps(data=[]))


def test_render_scales_and_sizes(props):
    ctx = render_bar_chart(props, 500.0, 2.0)
    assert ctx.commands[0].name == "scale"
    assert ctx.commands[0].args == (2.0, 2.0)
    assert (ctx.width, ctx.height) == (1000, 600)
    assert ctx.calls("clear_rect")[0].args == (0.0, 0.0, 500.0, 300.0)


def test_default_config_is_empty():
    assert BarChartProps(data=[]).config == BarChartConfig("", "", "")


def test_html(props):
    assert bar_chart_html(props) == '<canvas style="width: 90%; height: 90%;"></canvas>'