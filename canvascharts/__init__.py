"""Bar, pie, doughnut and line charts drawn onto a 2D canvas context, with HTML legends."""

__version__ = "0.21.3"

__all__ = ["canvas", "legend", "bar_chart", "pie_chart", "doughnut_chart", "line_chart"]