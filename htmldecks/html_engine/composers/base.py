"""Base composer providing the shared slide frame and markup helpers.

All slide-type composers inherit from BaseComposer and implement
compose() to build the body of their layout. render() wraps that body in
the addressable <section> frame the navigation script relies on.
"""

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel

from htmldecks.html_engine.text_operations import ordinal
from htmldecks.schemas.slide_schema import DeckDescription, SlideBase, SlideType
from htmldecks.schemas.theme_schema import ThemeDescriptor

logger = logging.getLogger(__name__)


class SlideContext(BaseModel):
    """Where a slide sits in the deck and how it should look."""

    index: int
    total: int
    slide_type: SlideType
    deck: DeckDescription
    theme: ThemeDescriptor

    @property
    def ordinal(self) -> str:
        return ordinal(self.index)


class BaseComposer(ABC):
    """Abstract base for all slide composers.

    Subclasses implement compose() for one layout. The base class supplies
    the section frame, the numbered header, headings, and bullet lists.
    """

    show_header: bool = True

    @abstractmethod
    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        """Return the inner markup for the slide.

        Args:
            slide: The parsed slide record.
            ctx: Position, resolved type, deck and theme.
        """
        ...

    def render(self, slide: SlideBase, ctx: SlideContext) -> str:
        """Return the complete <section> fragment for the slide."""
        type_name = ctx.slide_type.value
        header = self.header(ctx) if self.show_header else ""
        return (
            f'<section class="slide slide--{type_name}" id="slide-{ctx.index}" '
            f'data-index="{ctx.index}" data-slide-type="{type_name}">\n'
            f'  <div class="slide__content">\n'
            f"{header}"
            f"{self.compose(slide, ctx)}\n"
            f"  </div>\n"
            f"</section>"
        )

    # ------------------------------------------------------------------
    # Shared markup
    # ------------------------------------------------------------------

    @staticmethod
    def header(ctx: SlideContext) -> str:
        return (
            f'    <div class="slide__header">'
            f'<span class="slide__number">{ctx.ordinal}</span>'
            f'<span class="accent-element"></span></div>\n'
        )

    @staticmethod
    def heading(title: str, level: int = 2) -> str:
        if not title:
            return ""
        return f"    <h{level}>{title}</h{level}>\n"

    @staticmethod
    def bullet_items(lines: list[str], theme: ThemeDescriptor, start: int = 0) -> str:
        """Render list items, optionally numbered from ``start``."""
        items = []
        for offset, line in enumerate(lines):
            number = ""
            if theme.numbered_bullets:
                number = f'<span class="bullet-number">{ordinal(start + offset)}</span>'
            items.append(f"<li>{number}{line}</li>")
        return "".join(items)

    def bullet_list(self, lines: list[str], theme: ThemeDescriptor, start: int = 0) -> str:
        return f'<ul class="slide__bullets">{self.bullet_items(lines, theme, start)}</ul>'
