"""Quote slide composer.

Builds a quote slide with a large decorative quotation mark, the quote
text, and its attribution. The heading is optional.
"""

from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.schemas.slide_schema import SlideBase


class QuoteComposer(BaseComposer):
    """Compose a quote slide."""

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        quote_text = getattr(slide, "quote", "") or slide.content
        attribution = getattr(slide, "attribution", "")

        parts = [self.heading(slide.title).rstrip("\n")] if slide.title else []
        parts.append('    <div class="quote-container">')
        parts.append('      <div class="quote-mark">“</div>')
        parts.append(f'      <blockquote class="slide__quote">{quote_text}</blockquote>')
        if attribution:
            parts.append(f'      <cite class="slide__attribution">{attribution}</cite>')
        parts.append("    </div>")
        return "\n".join(parts)
