"""Two-column slide composer."""

from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.html_engine.text_operations import normalize_lines
from htmldecks.schemas.slide_schema import SlideBase


class TwoColumnComposer(BaseComposer):
    """Compose side-by-side bullet columns.

    When the theme numbers bullets, the right column continues the count
    from the left column.
    """

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        left = normalize_lines(getattr(slide, "left_column", ""))
        right = normalize_lines(getattr(slide, "right_column", ""))
        return (
            f"{self.heading(slide.title)}"
            f'    <div class="slide__two-column">'
            f'<div class="slide__column">{self.bullet_list(left, ctx.theme)}</div>'
            f'<div class="slide__column">{self.bullet_list(right, ctx.theme, start=len(left))}</div>'
            f"</div>"
        )
