"""Bullet list slide composer.

Also the fallback layout: slides with a missing or unknown type land here
and render whatever ``content`` they carry (or an empty list).
"""

from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.html_engine.text_operations import normalize_lines
from htmldecks.schemas.slide_schema import SlideBase


class BulletsComposer(BaseComposer):
    """Compose a heading plus one list item per content line."""

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        lines = normalize_lines(slide.content or "")
        return (
            f"{self.heading(slide.title)}"
            f"    {self.bullet_list(lines, ctx.theme)}"
        )
