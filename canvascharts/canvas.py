"""A recording stand-in for a 2D canvas drawing context."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

_U32_MAX = 2**32 - 1

_DEFAULT_STATE: dict[str, Any] = {
    "fill_style": "#000000",
    "stroke_style": "#000000",
    "line_width": 1.0,
    "text_align": "start",
    "text_baseline": "alphabetic",
    "font": "10px sans-serif",
    "global_composite_operation": "source-over",
}


@dataclass(frozen=True)
class Command:
    """One drawing call: its name and its arguments."""

    name: str
    args: tuple[Any, ...] = ()


class _StyleProperty:
    """A piece of drawing state whose assignment is recorded as a command."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, obj: RecordingContext | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._state[self._name]

    def __set__(self, obj: RecordingContext, value: Any) -> None:
        obj._state[self._name] = value
        obj.commands.append(Command(self._name, (value,)))


def _all_finite(args: tuple[Any, ...]) -> bool:
    return all(
        math.isfinite(arg)
        for arg in args
        if isinstance(arg, (int, float)) and not isinstance(arg, bool)
    )


class RecordingContext:
    """Records every drawing call made on it, in order.

    Like a browser canvas, calls whose coordinates are not finite are
    silently ignored, and ``arc`` rejects a negative radius.
    """

    fill_style = _StyleProperty()
    stroke_style = _StyleProperty()
    line_width = _StyleProperty()
    text_align = _StyleProperty()
    text_baseline = _StyleProperty()
    font = _StyleProperty()
    global_composite_operation = _StyleProperty()

    def __init__(self, width: int = 300, height: int = 150) -> None:
        self.width = width
        self.height = height
        self.commands: list[Command] = []
        self._state: dict[str, Any] = dict(_DEFAULT_STATE)
        self._stack: list[dict[str, Any]] = []

    def _record(self, name: str, *args: Any) -> None:
        if _all_finite(args):
            self.commands.append(Command(name, args))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("clear_rect", x, y, width, height)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("fill_rect", x, y, width, height)

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        args = (x, y, radius, start_angle, end_angle)
        if not _all_finite(args):
            return
        if radius < 0:
            raise ValueError(f"the radius provided ({radius}) is negative")
        self.commands.append(Command("arc", args))

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        self._record("bezier_curve_to", cp1x, cp1y, cp2x, cp2y, x, y)

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._record("fill_text", text, x, y)

    def save(self) -> None:
        self._stack.append(dict(self._state))
        self._record("save")

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()
        self._record("restore")

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)

    def scale(self, x: float, y: float) -> None:
        self._record("scale", x, y)

    def calls(self, name: str) -> list[Command]:
        """Return the recorded commands with the given name, in order."""
        return [command for command in self.commands if command.name == name]


def _to_pixels(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(_U32_MAX)))


def canvas_size(
    width: float, aspect: float, device_pixel_ratio: float
) -> tuple[float, int, int]:
    """Return ``(height, pixel_width, pixel_height)`` for a canvas of a given width.

    The height is ``width * aspect``; pixel sizes are scaled by the device
    pixel ratio and truncated to unsigned 32-bit integers.
    """
    height = width * aspect
    return (
        height,
        _to_pixels(width * device_pixel_ratio),
        _to_pixels(height * device_pixel_ratio),
    )