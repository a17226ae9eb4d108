"""Pydantic models for deck descriptions and their slides.

A deck arrives as a loosely-typed record (usually JSON produced by an editor
form or a batch job). Slides are a tagged union keyed on ``type``; anything
that does not name a known type becomes a ``FallbackSlide`` which renders
with the bullets layout. Slide content is parsed leniently: a malformed
field degrades to an empty value instead of failing the whole deck.
"""

import logging
import math
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

logger = logging.getLogger(__name__)


class SlideType(str, Enum):
    """Supported slide layout types."""

    TITLE = "title"
    BULLETS = "bullets"
    TWO_COLUMN = "two-column"
    STATS = "stats"
    QUOTE = "quote"
    TABLE = "table"
    BAR_CHART = "bar-chart"
    LINE_CHART = "line-chart"
    PIE_CHART = "pie-chart"
    IMAGE_TEXT = "image-text"


CHART_TYPES = frozenset({SlideType.BAR_CHART, SlideType.LINE_CHART, SlideType.PIE_CHART})


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def coerce_magnitude(value: Any) -> float:
    """Convert a chart value to a finite, non-negative float (0.0 on failure)."""
    if isinstance(value, bool):
        return float(value)
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(result) or result < 0:
        return 0.0
    return result


def coerce_text(value: Any) -> str:
    """Convert a scalar to display text. Integral floats drop their '.0'."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _list_or_empty(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


# ---------------------------------------------------------------------------
# Chart / stats payloads
# ---------------------------------------------------------------------------

class DataPoint(BaseModel):
    """One point of a chart series. Accepts bar ({label, value}) or line ({x, y}) keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    label: str = Field(default="", validation_alias=AliasChoices("label", "x"))
    value: float = Field(default=0.0, validation_alias=AliasChoices("value", "y"))

    @field_validator("label", mode="before")
    @classmethod
    def _label_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("value", mode="before")
    @classmethod
    def _value_magnitude(cls, v: Any) -> float:
        return coerce_magnitude(v)


class ChartSeries(BaseModel):
    """A named series of data points for bar and line charts."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    data: list[DataPoint] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("data", mode="before")
    @classmethod
    def _data_list(cls, v: Any) -> list:
        return [d for d in _list_or_empty(v) if isinstance(d, (dict, DataPoint))]


class PieSegment(BaseModel):
    """A labelled pie-chart segment."""

    model_config = ConfigDict(extra="ignore")

    label: str = ""
    value: float = 0.0

    @field_validator("label", mode="before")
    @classmethod
    def _label_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("value", mode="before")
    @classmethod
    def _value_magnitude(cls, v: Any) -> float:
        return coerce_magnitude(v)


class Metric(BaseModel):
    """A headline number with its caption, shown on stats slides."""

    model_config = ConfigDict(extra="ignore")

    number: str = ""
    label: str = ""

    @field_validator("number", "label", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return coerce_text(v)


# ---------------------------------------------------------------------------
# Slide variants
# ---------------------------------------------------------------------------

class SlideBase(BaseModel):
    """Fields every slide variant carries."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    content: str = ""

    @field_validator("title", "content", mode="before")
    @classmethod
    def _base_text(cls, v: Any) -> str:
        return coerce_text(v)


class TitleSlide(SlideBase):
    type: Literal["title"] = "title"
    subtitle: Optional[str] = None
    badge: Optional[str] = None


class BulletsSlide(SlideBase):
    type: Literal["bullets"] = "bullets"


class TwoColumnSlide(SlideBase):
    type: Literal["two-column"] = "two-column"
    left_column: str = Field(default="", alias="leftColumn")
    right_column: str = Field(default="", alias="rightColumn")

    @field_validator("left_column", "right_column", mode="before")
    @classmethod
    def _column_text(cls, v: Any) -> str:
        return coerce_text(v)


class StatsSlide(SlideBase):
    type: Literal["stats"] = "stats"
    metrics: list[Metric] = Field(default_factory=list)

    @field_validator("metrics", mode="before")
    @classmethod
    def _metrics_list(cls, v: Any) -> list:
        return [m for m in _list_or_empty(v) if isinstance(m, (dict, Metric))]


class QuoteSlide(SlideBase):
    type: Literal["quote"] = "quote"
    quote: str = ""
    attribution: str = ""

    @field_validator("quote", "attribution", mode="before")
    @classmethod
    def _quote_text(cls, v: Any) -> str:
        return coerce_text(v)


class TableSlide(SlideBase):
    type: Literal["table"] = "table"
    table_data: list[list[str]] = Field(default_factory=list, alias="tableData")

    @field_validator("table_data", mode="before")
    @classmethod
    def _rows(cls, v: Any) -> list[list[str]]:
        rows = []
        for row in _list_or_empty(v):
            if isinstance(row, (list, tuple)):
                rows.append([coerce_text(cell) for cell in row])
        return rows


class _SeriesSlide(SlideBase):
    series: list[ChartSeries] = Field(default_factory=list)

    @field_validator("series", mode="before")
    @classmethod
    def _series_list(cls, v: Any) -> list:
        return [s for s in _list_or_empty(v) if isinstance(s, (dict, ChartSeries))]


class BarChartSlide(_SeriesSlide):
    type: Literal["bar-chart"] = "bar-chart"


class LineChartSlide(_SeriesSlide):
    type: Literal["line-chart"] = "line-chart"


class PieChartSlide(SlideBase):
    type: Literal["pie-chart"] = "pie-chart"
    segments: list[PieSegment] = Field(default_factory=list)

    @field_validator("segments", mode="before")
    @classmethod
    def _segments_list(cls, v: Any) -> list:
        return [s for s in _list_or_empty(v) if isinstance(s, (dict, PieSegment))]


class ImageTextSlide(SlideBase):
    type: Literal["image-text"] = "image-text"
    image_url: str = Field(default="", alias="imageUrl")
    description: str = ""
    layout: str = "image-right"

    @field_validator("image_url", "description", "layout", mode="before")
    @classmethod
    def _image_text(cls, v: Any) -> str:
        return coerce_text(v)

    @property
    def image_left(self) -> bool:
        return self.layout == "image-left"


class FallbackSlide(SlideBase):
    """A slide with a missing or unrecognized ``type``.

    ``type`` keeps the declared value (or None) so the record round-trips;
    the renderer treats ``content`` as a bullet source.
    """

    type: Optional[str] = None


Slide = Union[
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
]

SLIDE_MODELS: dict[SlideType, type[SlideBase]] = {
    SlideType.TITLE: TitleSlide,
    SlideType.BULLETS: BulletsSlide,
    SlideType.TWO_COLUMN: TwoColumnSlide,
    SlideType.STATS: StatsSlide,
    SlideType.QUOTE: QuoteSlide,
    SlideType.TABLE: TableSlide,
    SlideType.BAR_CHART: BarChartSlide,
    SlideType.LINE_CHART: LineChartSlide,
    SlideType.PIE_CHART: PieChartSlide,
    SlideType.IMAGE_TEXT: ImageTextSlide,
}


def declared_type(slide: SlideBase) -> Optional[SlideType]:
    """Return the slide's declared SlideType, or None for fallback slides."""
    if isinstance(slide, FallbackSlide):
        return None
    return SlideType(slide.type)


def parse_slide(raw: Any) -> SlideBase:
    """Build the slide variant named by ``raw['type']``.

    Unknown or missing types produce a FallbackSlide. Content that fails
    validation for its declared type degrades to a FallbackSlide carrying
    whatever title/content text could be recovered.
    """
    if isinstance(raw, SlideBase):
        return raw
    if not isinstance(raw, dict):
        logger.warning(f"Slide record is not a mapping ({type(raw).__name__}), rendering empty slide")
        return FallbackSlide()

    raw_type = raw.get("type")
    try:
        slide_type = SlideType(raw_type)
    except ValueError:
        if raw_type is not None:
            logger.debug(f"Unknown slide type {raw_type!r}, using bullets fallback")
        return FallbackSlide.model_validate(
            {"title": raw.get("title"), "content": raw.get("content"),
             "type": coerce_text(raw_type) if raw_type is not None else None}
        )

    try:
        return SLIDE_MODELS[slide_type].model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Malformed {slide_type.value} slide, degrading to bullets: {e.error_count()} error(s)")
        title = raw.get("title")
        content = raw.get("content")
        return FallbackSlide(
            title=title if isinstance(title, str) else "",
            content=content if isinstance(content, str) else "",
            type=slide_type.value,
        )


class DeckDescription(BaseModel):
    """Complete input record for one rendered deck."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    company_name: str = Field(alias="companyName", min_length=1)
    accent_color: str = Field(default="#6366f1", alias="accentColor")
    slides: list[Slide] = Field(min_length=1)
    watermark: bool = False
    title: Optional[str] = Field(
        default=None,
        description="Document title. Falls back to company_name.",
    )

    @field_validator("slides", mode="before")
    @classmethod
    def _parse_slides(cls, v: Any) -> list[SlideBase]:
        if not isinstance(v, (list, tuple)):
            # Let the list type check report the structural error.
            return v
        return [parse_slide(item) for item in v]

    @property
    def document_title(self) -> str:
        return self.title or self.company_name
