"""Stats slide composer.

Builds a grid of headline numbers; each card reveals with a staggered
0.1s delay.
"""

from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.schemas.slide_schema import SlideBase

STAGGER_SECONDS = 0.1


class StatsComposer(BaseComposer):
    """Compose a stats slide."""

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        cards = []
        for idx, metric in enumerate(getattr(slide, "metrics", [])):
            cards.append(
                f'<div class="slide__stat" style="--delay: {idx * STAGGER_SECONDS:.1f}s">'
                f'<div class="slide__stat-number">{metric.number}</div>'
                f'<div class="slide__stat-label">{metric.label}</div>'
                f"</div>"
            )
        return (
            f"{self.heading(slide.title)}"
            f'    <div class="slide__stats">{"".join(cards)}</div>'
        )
