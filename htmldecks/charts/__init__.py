"""Inline chart engine: geometry layout plus SVG serialization."""

from .geometry import (
    ChartGeometry,
    Bar,
    Polyline,
    Point,
    Wedge,
    AxisLabel,
    LegendEntry,
    layout_bar_chart,
    layout_line_chart,
    layout_pie_chart,
    format_percentage,
)
from .svg import render_chart_svg, placeholder

__all__ = [
    "ChartGeometry",
    "Bar",
    "Polyline",
    "Point",
    "Wedge",
    "AxisLabel",
    "LegendEntry",
    "layout_bar_chart",
    "layout_line_chart",
    "layout_pie_chart",
    "format_percentage",
    "render_chart_svg",
    "placeholder",
]
