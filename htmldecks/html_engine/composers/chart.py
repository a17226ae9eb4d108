"""Chart slide composers.

Each chart slide lays out fresh geometry from its own data and the theme
palette, then serializes it to inline SVG. Empty or malformed data yields
the "No data" placeholder instead of a chart.
"""

from abc import abstractmethod

from htmldecks.charts.geometry import (
    ChartGeometry,
    layout_bar_chart,
    layout_line_chart,
    layout_pie_chart,
)
from htmldecks.charts.svg import render_chart_svg
from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.schemas.slide_schema import SlideBase


class ChartComposer(BaseComposer):
    """Shared frame for bar, line and pie slides."""

    @abstractmethod
    def layout(self, slide: SlideBase, palette: list[str]) -> ChartGeometry:
        """Lay out chart geometry for this slide's data."""

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        geometry = self.layout(slide, ctx.theme.chart.palette)
        return (
            f"{self.heading(slide.title)}"
            f'    <div class="slide__chart">{render_chart_svg(geometry, ctx.theme)}</div>'
        )


class BarChartComposer(ChartComposer):
    def layout(self, slide: SlideBase, palette: list[str]) -> ChartGeometry:
        return layout_bar_chart(getattr(slide, "series", []), palette)


class LineChartComposer(ChartComposer):
    def layout(self, slide: SlideBase, palette: list[str]) -> ChartGeometry:
        return layout_line_chart(getattr(slide, "series", []), palette)


class PieChartComposer(ChartComposer):
    def layout(self, slide: SlideBase, palette: list[str]) -> ChartGeometry:
        return layout_pie_chart(getattr(slide, "segments", []), palette)
