"""Chart geometry: turn numeric series into drawing primitives.

All coordinates live in a fixed logical canvas (SVG user units):

    bar / line:  600 x 300, plot area inset by MARGIN
    pie:         300 x 300 square (radius 100 around the center), legend to
                 the right inside a 500-wide viewBox

Geometry is computed per chart slide and thrown away once the fragment is
emitted; nothing here is cached or shared between slides.
"""

import math
from typing import Literal, Optional

from pydantic import BaseModel, Field

from htmldecks.schemas.slide_schema import ChartSeries, PieSegment


CHART_WIDTH = 600
CHART_HEIGHT = 300
PIE_SIZE = 300
PIE_VIEW_WIDTH = 500
PIE_RADIUS = 100
MIN_BAR_WIDTH = 10
BAR_GROUP_PADDING = 4
BAR_GAP = 2
POINT_RADIUS = 4


class Margin(BaseModel):
    top: float = 20
    right: float = 120
    bottom: float = 40
    left: float = 60


MARGIN = Margin()


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

class Bar(BaseModel):
    """One rectangle of a bar chart."""

    x: float
    y: float
    width: float
    height: float = Field(ge=0)
    color: str
    series_index: int
    category: str


class Point(BaseModel):
    x: float
    y: float


class Polyline(BaseModel):
    """One line-chart series: its polyline plus a marker per point."""

    points: list[Point] = Field(default_factory=list)
    color: str
    series_index: int


class Wedge(BaseModel):
    """One pie slice, clockwise from start_angle to end_angle (degrees)."""

    start_angle: float
    end_angle: float
    share: float
    large_arc: bool
    full_circle: bool = False
    start: Point
    end: Point
    color: str
    segment_index: int


class AxisLabel(BaseModel):
    x: float
    y: float
    text: str


class LegendEntry(BaseModel):
    x: float
    y: float
    color: str
    text: str


class ChartGeometry(BaseModel):
    """Everything needed to draw one chart."""

    kind: Literal["bar", "line", "pie"]
    width: float
    height: float
    margin: Margin = Field(default_factory=Margin)
    bars: list[Bar] = Field(default_factory=list)
    lines: list[Polyline] = Field(default_factory=list)
    wedges: list[Wedge] = Field(default_factory=list)
    axis_labels: list[AxisLabel] = Field(default_factory=list)
    legend: list[LegendEntry] = Field(default_factory=list)
    center: Optional[Point] = None
    radius: Optional[float] = None
    empty: bool = False

    @property
    def plot_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def plot_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom

    @property
    def baseline(self) -> float:
        return self.margin.top + self.plot_height


def palette_color(palette: list[str], index: int) -> str:
    """Pick a palette color by index, cycling when series outnumber colors."""
    return palette[index % len(palette)]


def _distinct_in_order(values: list[str]) -> list[str]:
    seen: dict[str, None] = {}
    for v in values:
        seen.setdefault(v, None)
    return list(seen)


def _series_legend(series: list[ChartSeries], palette: list[str]) -> list[LegendEntry]:
    legend = []
    for index, s in enumerate(series):
        legend.append(LegendEntry(
            x=CHART_WIDTH - 100,
            y=MARGIN.top + index * 20,
            color=palette_color(palette, index),
            text=s.name,
        ))
    return legend


def _is_usable(items) -> bool:
    return isinstance(items, (list, tuple)) and len(items) > 0


def _as_series(items) -> list[ChartSeries]:
    return [s if isinstance(s, ChartSeries) else ChartSeries.model_validate(s)
            for s in items if isinstance(s, (dict, ChartSeries))]


def _as_segments(items) -> list[PieSegment]:
    return [s if isinstance(s, PieSegment) else PieSegment.model_validate(s)
            for s in items if isinstance(s, (dict, PieSegment))]


# ---------------------------------------------------------------------------
# Bar chart
# ---------------------------------------------------------------------------

def layout_bar_chart(series: list[ChartSeries], palette: list[str]) -> ChartGeometry:
    """Lay out grouped bars: one group per category, one bar per series."""
    series = _as_series(series) if _is_usable(series) else []
    if not series:
        return ChartGeometry(kind="bar", width=CHART_WIDTH, height=CHART_HEIGHT, empty=True)

    geometry = ChartGeometry(kind="bar", width=CHART_WIDTH, height=CHART_HEIGHT)
    categories = _distinct_in_order([d.label for s in series for d in s.data])
    if not categories:
        return ChartGeometry(kind="bar", width=CHART_WIDTH, height=CHART_HEIGHT, empty=True)
    values = [d.value for s in series for d in s.data]
    max_val = max(values, default=0.0)

    plot_h = geometry.plot_height
    group_width = geometry.plot_width / len(categories)
    bar_width = max(MIN_BAR_WIDTH, group_width / len(series) - BAR_GROUP_PADDING)
    category_index = {label: i for i, label in enumerate(categories)}

    for series_index, s in enumerate(series):
        color = palette_color(palette, series_index)
        for d in s.data:
            height = (d.value / max_val) * plot_h if max_val > 0 else 0.0
            x = MARGIN.left + category_index[d.label] * group_width + series_index * (bar_width + BAR_GAP)
            geometry.bars.append(Bar(
                x=x,
                y=geometry.baseline - height,
                width=bar_width,
                height=height,
                color=color,
                series_index=series_index,
                category=d.label,
            ))

    for index, label in enumerate(categories):
        geometry.axis_labels.append(AxisLabel(
            x=MARGIN.left + index * group_width + group_width / 2,
            y=CHART_HEIGHT - 15,
            text=label,
        ))
    geometry.legend = _series_legend(series, palette)
    return geometry


# ---------------------------------------------------------------------------
# Line chart
# ---------------------------------------------------------------------------

def _ordinal_x(index: int, count: int, plot_width: float) -> float:
    """X position of the index-th distinct x value.

    The axis is ordinal: values are spaced evenly whatever their numeric
    distance. A lone x value sits in the middle of the plot.
    """
    if count <= 1:
        return MARGIN.left + plot_width / 2
    return MARGIN.left + (index / (count - 1)) * plot_width


def layout_line_chart(series: list[ChartSeries], palette: list[str]) -> ChartGeometry:
    """Lay out one polyline per series over an ordinal x axis."""
    series = _as_series(series) if _is_usable(series) else []
    if not series:
        return ChartGeometry(kind="line", width=CHART_WIDTH, height=CHART_HEIGHT, empty=True)

    geometry = ChartGeometry(kind="line", width=CHART_WIDTH, height=CHART_HEIGHT)
    x_values = _distinct_in_order([d.label for s in series for d in s.data])
    if not x_values:
        return ChartGeometry(kind="line", width=CHART_WIDTH, height=CHART_HEIGHT, empty=True)
    max_y = max((d.value for s in series for d in s.data), default=0.0)

    plot_w = geometry.plot_width
    plot_h = geometry.plot_height
    x_index = {x: i for i, x in enumerate(x_values)}

    for series_index, s in enumerate(series):
        points = []
        for d in s.data:
            y_offset = (d.value / max_y) * plot_h if max_y > 0 else 0.0
            points.append(Point(
                x=_ordinal_x(x_index[d.label], len(x_values), plot_w),
                y=geometry.baseline - y_offset,
            ))
        geometry.lines.append(Polyline(
            points=points,
            color=palette_color(palette, series_index),
            series_index=series_index,
        ))

    for index, label in enumerate(x_values):
        geometry.axis_labels.append(AxisLabel(
            x=_ordinal_x(index, len(x_values), plot_w),
            y=CHART_HEIGHT - 15,
            text=label,
        ))
    geometry.legend = _series_legend(series, palette)
    return geometry


# ---------------------------------------------------------------------------
# Pie chart
# ---------------------------------------------------------------------------

def _polar(center: float, radius: float, degrees: float) -> Point:
    radians = math.radians(degrees)
    return Point(x=center + radius * math.cos(radians), y=center + radius * math.sin(radians))


def format_percentage(value: float, total: float) -> str:
    """Share of total as a one-decimal percentage string ('25.0%')."""
    share = value / total if total > 0 else 0.0
    return f"{share * 100:.1f}%"


def layout_pie_chart(segments: list[PieSegment], palette: list[str]) -> ChartGeometry:
    """Lay out wedges clockwise from 12 o'clock, plus a percentage legend."""
    segments = _as_segments(segments) if _is_usable(segments) else []
    if not segments:
        return ChartGeometry(kind="pie", width=PIE_VIEW_WIDTH, height=PIE_SIZE, empty=True)

    center = PIE_SIZE / 2
    geometry = ChartGeometry(
        kind="pie",
        width=PIE_VIEW_WIDTH,
        height=PIE_SIZE,
        margin=Margin(top=0, right=0, bottom=0, left=0),
        center=Point(x=center, y=center),
        radius=PIE_RADIUS,
    )
    total = sum(seg.value for seg in segments)

    cursor = -90.0
    for index, seg in enumerate(segments):
        color = palette_color(palette, index)
        geometry.legend.append(LegendEntry(
            x=320,
            y=20 + index * 25,
            color=color,
            text=f"{seg.label}: {format_percentage(seg.value, total)}",
        ))
        if total <= 0 or seg.value <= 0:
            continue

        share = seg.value / total
        sweep = share * 360
        start_angle = cursor
        end_angle = cursor + sweep
        geometry.wedges.append(Wedge(
            start_angle=start_angle,
            end_angle=end_angle,
            share=share,
            large_arc=share > 0.5,
            full_circle=math.isclose(share, 1.0),
            start=_polar(center, PIE_RADIUS, start_angle),
            end=_polar(center, PIE_RADIUS, end_angle),
            color=color,
            segment_index=index,
        ))
        cursor = end_angle

    return geometry
