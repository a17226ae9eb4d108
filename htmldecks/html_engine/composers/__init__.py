"""Slide composer registry.

Maps SlideType enum values to their corresponding composer instances.
Use resolve_slide_type() to decide the layout for a slide at a position,
then get_composer() to look up the composer for it.
"""

import logging
from typing import Optional

from htmldecks.schemas.slide_schema import SlideBase, SlideType, declared_type
from htmldecks.schemas.theme_schema import ThemeDescriptor

from .base import BaseComposer, SlideContext
from .title import TitleComposer
from .bullets import BulletsComposer
from .two_column import TwoColumnComposer
from .stats import StatsComposer
from .quote import QuoteComposer
from .table import TableComposer
from .chart import BarChartComposer, LineChartComposer, PieChartComposer
from .image_text import ImageTextComposer

logger = logging.getLogger(__name__)

# Composers are stateless, so one instance each is fine.
_title = TitleComposer()
_bullets = BulletsComposer()

COMPOSERS: dict[SlideType, BaseComposer] = {
    SlideType.TITLE: _title,
    SlideType.BULLETS: _bullets,
    SlideType.TWO_COLUMN: TwoColumnComposer(),
    SlideType.STATS: StatsComposer(),
    SlideType.QUOTE: QuoteComposer(),
    SlideType.TABLE: TableComposer(),
    SlideType.BAR_CHART: BarChartComposer(),
    SlideType.LINE_CHART: LineChartComposer(),
    SlideType.PIE_CHART: PieChartComposer(),
    SlideType.IMAGE_TEXT: ImageTextComposer(),
}


def get_composer(slide_type: Optional[SlideType]) -> BaseComposer:
    """Look up the composer for a given slide type.

    Falls back to BulletsComposer if no specific composer is registered.
    """
    composer = COMPOSERS.get(slide_type) if slide_type is not None else None
    if composer is None:
        logger.debug(f"No composer for {slide_type}, using BulletsComposer")
        return _bullets
    return composer


def resolve_slide_type(slide: SlideBase, index: int, theme: ThemeDescriptor) -> SlideType:
    """Decide which layout renders ``slide`` at position ``index``.

    Declared known types win, except that a theme with ``force_title_first``
    always shows slide 0 as a title. A missing type on slide 0 becomes a
    title when the theme allows it; every other untyped or unknown slide
    becomes bullets.
    """
    if index == 0 and theme.force_title_first:
        return SlideType.TITLE
    slide_type = declared_type(slide)
    if slide_type is not None:
        return slide_type
    declared = getattr(slide, "type", None)
    if declared is None and index == 0 and theme.untyped_first_slide_as_title:
        return SlideType.TITLE
    return SlideType.BULLETS


__all__ = [
    "BaseComposer",
    "SlideContext",
    "TitleComposer",
    "BulletsComposer",
    "TwoColumnComposer",
    "StatsComposer",
    "QuoteComposer",
    "TableComposer",
    "BarChartComposer",
    "LineChartComposer",
    "PieChartComposer",
    "ImageTextComposer",
    "COMPOSERS",
    "get_composer",
    "resolve_slide_type",
]
