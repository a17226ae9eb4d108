"""Image + text slide composer.

Places an image beside descriptive paragraphs. ``layout`` picks the side;
anything other than 'image-left' puts the image on the right.
"""

from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.html_engine.text_operations import normalize_lines
from htmldecks.schemas.slide_schema import ImageTextSlide, SlideBase


class ImageTextComposer(BaseComposer):
    """Compose an image-text slide."""

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        side = "left" if isinstance(slide, ImageTextSlide) and slide.image_left else "right"
        image_url = getattr(slide, "image_url", "")
        description = getattr(slide, "description", "") or slide.content
        paragraphs = "".join(f"<p>{line}</p>" for line in normalize_lines(description))

        if image_url:
            image = f'<div class="slide__image"><img src="{image_url}" alt="Slide image"></div>'
        else:
            image = '<div class="slide__image slide__image--empty"></div>'
        return (
            f"{self.heading(slide.title)}"
            f'    <div class="slide__image-text slide__image-text--{side}">'
            f'{image}<div class="slide__text">{paragraphs}</div></div>'
        )
