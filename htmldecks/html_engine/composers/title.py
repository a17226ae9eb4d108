"""Title slide composer.

Builds the opening slide: oversized ordinal, headline, optional subtitle
and badge, accent bar, and the company name. Any slide can be shown with
this layout (themes may force it on slide 0), so only fields common to
every variant are required.
"""

from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.html_engine.text_operations import first_line
from htmldecks.schemas.slide_schema import SlideBase


class TitleComposer(BaseComposer):
    """Compose a title slide."""

    show_header = False

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        subtitle = getattr(slide, "subtitle", None) or first_line(slide.content)
        badge = getattr(slide, "badge", None)

        parts = [f'    <div class="slide__number-large">{ctx.ordinal}</div>']
        parts.append(f"    <h1>{slide.title or ctx.deck.company_name}</h1>")
        if subtitle:
            parts.append(f'    <p class="slide__subtitle">{subtitle}</p>')
        if badge:
            parts.append(f'    <div class="slide__badge">{badge}</div>')
        parts.append('    <div class="slide__accent-bar"></div>')
        parts.append(f'    <p class="slide__meta">{ctx.deck.company_name}</p>')
        return "\n".join(parts)
