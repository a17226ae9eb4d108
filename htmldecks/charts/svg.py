"""Serialize ChartGeometry to inline SVG markup."""

import math

from htmldecks.charts.geometry import POINT_RADIUS, ChartGeometry, Wedge
from htmldecks.schemas.theme_schema import ThemeDescriptor


NO_DATA_TEXT = "No data"


def _num(value: float) -> str:
    """Format a coordinate; non-finite values collapse to 0."""
    if not math.isfinite(value):
        value = 0.0
    return f"{value:.2f}"


def placeholder(message: str = NO_DATA_TEXT) -> str:
    """Return the placeholder shown instead of a chart with nothing to draw."""
    return f'<div class="chart-placeholder">{message}</div>'


def _text_attrs(theme: ThemeDescriptor, size: int) -> str:
    return (
        f'font-size="{size}" fill="{theme.chart.label_color}" '
        f"font-family=\"'{theme.chart_font_resolved}', {theme.fonts.fallback}\""
    )


def _axes(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    m = geometry.margin
    base = geometry.baseline
    right = m.left + geometry.plot_width
    return (
        f'<line class="chart-axis" x1="{_num(m.left)}" y1="{_num(base)}" '
        f'x2="{_num(right)}" y2="{_num(base)}" stroke="{theme.chart.axis_color}" stroke-width="2"/>'
        f'<line class="chart-axis" x1="{_num(m.left)}" y1="{_num(m.top)}" '
        f'x2="{_num(m.left)}" y2="{_num(base)}" stroke="{theme.chart.axis_color}" stroke-width="2"/>'
    )


def _axis_labels(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    return "".join(
        f'<text x="{_num(lbl.x)}" y="{_num(lbl.y)}" text-anchor="middle" {_text_attrs(theme, 12)}>{lbl.text}</text>'
        for lbl in geometry.axis_labels
    )


def _legend(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    if geometry.kind == "pie":
        swatch, size, dx, dy = 15, 14, 25, 12
    else:
        swatch, size, dx, dy = 12, 12, 20, 9
    parts = []
    for entry in geometry.legend:
        parts.append(
            f'<rect class="chart-legend-swatch" x="{_num(entry.x)}" y="{_num(entry.y)}" '
            f'width="{swatch}" height="{swatch}" fill="{entry.color}"/>'
            f'<text class="chart-legend-label" x="{_num(entry.x + dx)}" y="{_num(entry.y + dy)}" '
            f'{_text_attrs(theme, size)}>{entry.text}</text>'
        )
    return "".join(parts)


def wedge_path(wedge: Wedge, cx: float, cy: float, radius: float) -> str:
    """SVG path data for one wedge.

    A 100% share cannot be drawn as a single arc (start and end coincide),
    so it is drawn as two half-circle arcs instead.
    """
    r = _num(radius)
    if wedge.full_circle:
        top = cy - radius
        bottom = cy + radius
        return (
            f"M {_num(cx)} {_num(top)} "
            f"A {r} {r} 0 1 1 {_num(cx)} {_num(bottom)} "
            f"A {r} {r} 0 1 1 {_num(cx)} {_num(top)} Z"
        )
    large = 1 if wedge.large_arc else 0
    return (
        f"M {_num(cx)} {_num(cy)} "
        f"L {_num(wedge.start.x)} {_num(wedge.start.y)} "
        f"A {r} {r} 0 {large} 1 {_num(wedge.end.x)} {_num(wedge.end.y)} Z"
    )


def _svg(geometry: ChartGeometry, body: str) -> str:
    return (
        f'<svg class="chart chart--{geometry.kind}" viewBox="0 0 {_num(geometry.width)} {_num(geometry.height)}" '
        f'xmlns="http://www.w3.org/2000/svg" role="img" preserveAspectRatio="xMidYMid meet">'
        f"{body}</svg>"
    )


def render_bar_svg(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    bars = "".join(
        f'<rect class="chart-bar" x="{_num(b.x)}" y="{_num(b.y)}" width="{_num(b.width)}" '
        f'height="{_num(b.height)}" fill="{b.color}"/>'
        for b in geometry.bars
    )
    return _svg(geometry, bars + _axes(geometry, theme) + _axis_labels(geometry, theme) + _legend(geometry, theme))


def render_line_svg(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    parts = []
    for line in geometry.lines:
        points = " ".join(f"{_num(p.x)},{_num(p.y)}" for p in line.points)
        parts.append(
            f'<polyline class="chart-line" points="{points}" fill="none" '
            f'stroke="{line.color}" stroke-width="3"/>'
        )
        parts.extend(
            f'<circle class="chart-point" cx="{_num(p.x)}" cy="{_num(p.y)}" r="{POINT_RADIUS}" fill="{line.color}"/>'
            for p in line.points
        )
    return _svg(geometry, "".join(parts) + _axes(geometry, theme) + _axis_labels(geometry, theme) + _legend(geometry, theme))


def render_pie_svg(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    cx = geometry.center.x
    cy = geometry.center.y
    wedges = "".join(
        f'<path class="chart-wedge" d="{wedge_path(w, cx, cy, geometry.radius)}" fill="{w.color}" '
        f'stroke="{theme.chart.wedge_stroke}" stroke-width="2"/>'
        for w in geometry.wedges
    )
    return _svg(geometry, wedges + _legend(geometry, theme))


_RENDERERS = {
    "bar": render_bar_svg,
    "line": render_line_svg,
    "pie": render_pie_svg,
}


def render_chart_svg(geometry: ChartGeometry, theme: ThemeDescriptor) -> str:
    """Render geometry to SVG, or the "No data" placeholder when it is empty."""
    if geometry.empty:
        return placeholder()
    return _RENDERERS[geometry.kind](geometry, theme)
