"""Table slide composer. Row 0 is the header row."""

from htmldecks.charts.svg import placeholder
from htmldecks.html_engine.composers.base import BaseComposer, SlideContext
from htmldecks.schemas.slide_schema import SlideBase


class TableComposer(BaseComposer):
    """Compose a table slide."""

    def compose(self, slide: SlideBase, ctx: SlideContext) -> str:
        rows = getattr(slide, "table_data", [])
        if not rows:
            return f"{self.heading(slide.title)}    {placeholder()}"

        html_rows = []
        for row_index, row in enumerate(rows):
            tag = "th" if row_index == 0 else "td"
            cells = "".join(f"<{tag}>{cell}</{tag}>" for cell in row)
            html_rows.append(f"<tr>{cells}</tr>")
        return (
            f"{self.heading(slide.title)}"
            f'    <div class="table-container"><table class="slide__table">{"".join(html_rows)}</table></div>'
        )
