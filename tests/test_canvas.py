import math

import pytest

from canvascharts.canvas import Command, RecordingContext, canvas_size


def test_commands_are_recorded_in_order():
    ctx = RecordingContext()
    ctx.begin_path()
    ctx.move_to(1.0, 2.0)
    ctx.line_to(3.0, 4.0)
    ctx.stroke()
    assert ctx.commands == [
        Command("begin_path"),
        Command("move_to", (1.0, 2.0)),
        Command("line_to", (3.0, 4.0)),
        Command("stroke"),
    ]


def test_calls_filters_by_name():
    ctx = RecordingContext()
    ctx.fill_rect(0, 0, 1, 1)
    ctx.fill()
    ctx.fill_rect(2, 2, 3, 3)
    assert [c.args for c in ctx.calls("fill_rect")] == [(0, 0, 1, 1), (2, 2, 3, 3)]
    assert ctx.calls("stroke") == []


def test_style_assignment_is_recorded_and_readable():
    ctx = RecordingContext()
    ctx.fill_style = "blue"
    ctx.line_width = 2.0
    assert ctx.fill_style == "blue"
    assert ctx.line_width == 2.0
    assert ctx.calls("fill_style") == [Command("fill_style", ("blue",))]


def test_save_and_restore_round_trip_state():
    ctx = RecordingContext()
    ctx.font = "bold 12px Arial"
    ctx.save()
    ctx.font = "other"
    ctx.text_align = "center"
    ctx.restore()
    assert ctx.font == "bold 12px Arial"
    assert ctx.text_align == RecordingContext().text_align


def test_restore_without_save_keeps_state():
    ctx = RecordingContext()
    ctx.stroke_style = "red"
    ctx.restore()
    assert ctx.stroke_style == "red"


def test_arc_rejects_negative_radius():
    ctx = RecordingContext()
    with pytest.raises(ValueError):
        ctx.arc(0.0, 0.0, -1.0, 0.0, math.pi)


def test_non_finite_calls_are_ignored():
    ctx = RecordingContext()
    ctx.arc(0.0, 0.0, -1.0, math.nan, math.pi)
    ctx.fill_rect(math.inf, 0.0, 1.0, 1.0)
    ctx.fill_text("x", math.nan, 0.0)
    ctx.move_to(0.0, 0.0)
    assert [c.name for c in ctx.commands] == ["move_to"]


def test_canvas_pixel_dimensions():
    ctx = RecordingContext(width=640, height=480)
    assert (ctx.width, ctx.height) == (640, 480)


def test_canvas_size_scales_by_ratio():
    height, px_w, px_h = canvas_size(500.0, 0.6, 2.0)
    assert height == pytest.approx(300.0)
    assert (px_w, px_h) == (1000, 600)


def test_canvas_size_truncates_and_clamps():
    height, px_w, px_h = canvas_size(-10.0, 0.5, 1.0)
    assert height == -5.0
    assert (px_w, px_h) == (0, 0)
    _, px_w, _ = canvas_size(100.7, 1.0, 1.0)
    assert px_w == 100