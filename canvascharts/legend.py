"""HTML for chart legends and the markup that wraps a chart canvas."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

_LEGEND_STYLE = "display: flex; flex-direction: row; gap: 5px; flex-wrap: wrap;"
_ENTRY_STYLE = "display: flex; flex-direction: row; align-items: center; gap: 2px;"
_LABEL_STYLE = "font-size: 10px;"
_SWATCH_STYLE = "background-color: {}; width: 10px; height: 10px; display: inline-block;"


def legend_html(entries: Iterable[tuple[str, str]]) -> str:
    """Return a legend for ``(label, color)`` pairs as an HTML fragment."""
    items = "".join(
        f'<div style="{_ENTRY_STYLE}">'
        f'<span style="{_LABEL_STYLE}">{escape(label)}</span>'
        f'<div style="{escape(_SWATCH_STYLE.format(color))}"></div>'
        "</div>"
        for label, color in entries
    )
    return f'<div style="{_LEGEND_STYLE}">{items}</div>'


def chart_html(canvas_style: str, legend: str) -> str:
    """Wrap an optional legend and a styled canvas in one container."""
    return f'<div>{legend}<canvas style="{escape(canvas_style)}"></canvas></div>'