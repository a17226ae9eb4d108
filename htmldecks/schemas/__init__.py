from .slide_schema import (
    SlideType,
    DataPoint,
    ChartSeries,
    PieSegment,
    Metric,
    SlideBase,
    TitleSlide,
    BulletsSlide,
    TwoColumnSlide,
    StatsSlide,
    QuoteSlide,
    TableSlide,
    BarChartSlide,
    LineChartSlide,
    PieChartSlide,
    ImageTextSlide,
    FallbackSlide,
    Slide,
    DeckDescription,
    parse_slide,
)
from .theme_schema import ThemeFonts, ThemeColors, ChartStyle, NavigationConfig, ThemeDescriptor

__all__ = [
    "SlideType",
    "DataPoint",
    "ChartSeries",
    "PieSegment",
    "Metric",
    "SlideBase",
    "TitleSlide",
    "BulletsSlide",
    "TwoColumnSlide",
    "StatsSlide",
    "QuoteSlide",
    "TableSlide",
    "BarChartSlide",
    "LineChartSlide",
    "PieChartSlide",
    "ImageTextSlide",
    "FallbackSlide",
    "Slide",
    "DeckDescription",
    "parse_slide",
    "ThemeFonts",
    "ThemeColors",
    "ChartStyle",
    "NavigationConfig",
    "ThemeDescriptor",
]
