"""Tests for slide composers and the document renderer."""

import pytest
from bs4 import BeautifulSoup

from htmldecks.html_engine.composers import (
    COMPOSERS,
    BulletsComposer,
    SlideContext,
    get_composer,
    resolve_slide_type,
)
from htmldecks.html_engine.composers.chart import ChartComposer
from htmldecks.html_engine.document import render, render_slides
from htmldecks.html_engine.document_check import audit_document
from htmldecks.html_engine.text_operations import (
    first_line,
    normalize_lines,
    ordinal,
    strip_bullet_marker,
)
from htmldecks.schemas.slide_schema import DeckDescription, FallbackSlide, SlideType, parse_slide
from htmldecks.schemas.theme_schema import NavigationConfig, ThemeDescriptor


def _deck(*slides, **kwargs):
    return DeckDescription.model_validate({"companyName": "Acme", "slides": list(slides), **kwargs})


def _sections(html):
    return BeautifulSoup(html, "html.parser").find_all("section", class_="slide")


def _render_one(slide, theme=None, index=0):
    theme = theme or ThemeDescriptor(untyped_first_slide_as_title=False)
    deck = _deck(slide)
    parsed = deck.slides[0]
    slide_type = resolve_slide_type(parsed, index, theme)
    ctx = SlideContext(index=index, total=1, slide_type=slide_type, deck=deck, theme=theme)
    html = get_composer(slide_type).render(parsed, ctx)
    return BeautifulSoup(html, "html.parser").find("section")


class TestTextOperations:
    def test_strip_marker(self):
        assert strip_bullet_marker("- Revenue grew 40%") == "Revenue grew 40%"
        assert strip_bullet_marker("•Margin") == "Margin"
        assert strip_bullet_marker("-- twice") == "- twice"
        assert strip_bullet_marker("No marker") == "No marker"

    def test_normalize_lines(self):
        text = "- Revenue grew 40%\n\n   \n  • Margins up  \nPlain"
        assert normalize_lines(text) == ["Revenue grew 40%", "Margins up", "Plain"]

    def test_normalize_empty(self):
        assert normalize_lines("") == []
        assert normalize_lines(None) == []

    def test_first_line(self):
        assert first_line("\n- Hello\nWorld") == "Hello"
        assert first_line("") == ""

    def test_ordinal(self):
        assert ordinal(0) == "01"
        assert ordinal(11) == "12"
        assert ordinal(99) == "100"


class TestComposerRegistry:
    def test_every_slide_type_has_composer(self):
        for slide_type in SlideType:
            assert slide_type in COMPOSERS

    def test_fallback_composer(self):
        assert isinstance(get_composer(None), BulletsComposer)

    def test_resolve_declared_type(self):
        theme = ThemeDescriptor()
        assert resolve_slide_type(parse_slide({"type": "quote"}), 3, theme) == SlideType.QUOTE

    def test_resolve_unknown_type(self):
        theme = ThemeDescriptor()
        assert resolve_slide_type(parse_slide({"type": "hologram"}), 0, theme) == SlideType.BULLETS
        assert resolve_slide_type(parse_slide({"type": "hologram"}), 4, theme) == SlideType.BULLETS

    def test_resolve_untyped_first_slide(self):
        untyped = FallbackSlide()
        assert resolve_slide_type(untyped, 0, ThemeDescriptor()) == SlideType.TITLE
        assert resolve_slide_type(untyped, 1, ThemeDescriptor()) == SlideType.BULLETS
        plain = ThemeDescriptor(untyped_first_slide_as_title=False)
        assert resolve_slide_type(untyped, 0, plain) == SlideType.BULLETS

    def test_chart_composer_requires_layout(self):
        with pytest.raises(TypeError):
            ChartComposer()

    def test_force_title_first(self):
        theme = ThemeDescriptor(force_title_first=True)
        slide = parse_slide({"type": "stats"})
        assert resolve_slide_type(slide, 0, theme) == SlideType.TITLE
        assert resolve_slide_type(slide, 1, theme) == SlideType.STATS


class TestComposers:
    def test_section_frame(self):
        section = _render_one({"type": "bullets", "title": "Why"}, index=0)
        assert section["data-index"] == "0"
        assert section["id"] == "slide-0"
        assert "slide--bullets" in section["class"]
        assert section.find(class_="slide__number").get_text() == "01"

    def test_bullet_normalization(self):
        section = _render_one({"type": "bullets", "title": "T", "content": "- Revenue grew 40%\n\nSecond"})
        items = [li.get_text() for li in section.select("ul.slide__bullets > li")]
        assert items == ["Revenue grew 40%", "Second"]

    def test_numbered_bullets(self):
        theme = ThemeDescriptor(numbered_bullets=True)
        section = _render_one({"type": "bullets", "content": "a\nb"}, theme=theme)
        assert [s.get_text() for s in section.select(".bullet-number")] == ["01", "02"]

    def test_content_not_escaped(self):
        section = _render_one({"type": "bullets", "content": "<strong>Bold</strong> claim"})
        assert section.find("strong").get_text() == "Bold"

    def test_unknown_type_uses_bullets(self):
        section = _render_one({"type": "hologram", "title": "X", "content": "one\ntwo"})
        assert section["data-slide-type"] == "bullets"
        assert len(section.select("ul.slide__bullets > li")) == 2

    def test_title_slide(self):
        section = _render_one({"type": "title", "title": "Acme Corp", "subtitle": "Series A", "badge": "2024"})
        assert section.find("h1").get_text() == "Acme Corp"
        assert section.find(class_="slide__subtitle").get_text() == "Series A"
        assert section.find(class_="slide__badge").get_text() == "2024"
        assert section.find(class_="slide__meta").get_text() == "Acme"
        assert section.find(class_="slide__header") is None

    def test_title_subtitle_from_content(self):
        section = _render_one({"type": "title", "title": "T", "content": "\n- Our pitch\nMore"})
        assert section.find(class_="slide__subtitle").get_text() == "Our pitch"

    def test_title_without_subtitle(self):
        section = _render_one({"type": "title", "title": "T"})
        assert section.find(class_="slide__subtitle") is None

    def test_two_column_numbering_continues(self):
        theme = ThemeDescriptor(numbered_bullets=True)
        section = _render_one({"type": "two-column", "leftColumn": "a\nb", "rightColumn": "- c"}, theme=theme)
        columns = section.select(".slide__column")
        assert len(columns) == 2
        assert [s.get_text() for s in columns[1].select(".bullet-number")] == ["03"]
        assert columns[1].find("li").get_text() == "03c"

    def test_stats_stagger(self):
        section = _render_one({"type": "stats", "metrics": [
            {"number": "10x", "label": "Growth"},
            {"number": "$2M", "label": "ARR"},
            {"number": "40", "label": "Staff"},
        ]})
        stats = section.select(".slide__stat")
        assert [s["style"] for s in stats] == ["--delay: 0.0s", "--delay: 0.1s", "--delay: 0.2s"]
        assert stats[1].find(class_="slide__stat-number").get_text() == "$2M"

    def test_quote(self):
        section = _render_one({"type": "quote", "quote": "Ship it.", "attribution": "Jane Doe"})
        assert section.find("blockquote").get_text() == "Ship it."
        assert section.find("cite").get_text() == "Jane Doe"
        assert section.find("h2") is None

    def test_table(self):
        section = _render_one({"type": "table", "tableData": [["Plan", "Price"], ["Pro", "$10"], ["Team", "$20"]]})
        assert [th.get_text() for th in section.find_all("th")] == ["Plan", "Price"]
        assert len(section.find_all("td")) == 4

    def test_empty_table_placeholder(self):
        section = _render_one({"type": "table", "tableData": []})
        assert section.find("table") is None
        assert section.find(class_="chart-placeholder") is not None

    def test_chart_slides(self):
        bar = _render_one({"type": "bar-chart", "title": "Revenue",
                           "series": [{"name": "A", "data": [{"label": "Q1", "value": 3}]}]})
        assert bar.select_one(".slide__chart svg") is not None
        pie = _render_one({"type": "pie-chart", "segments": [{"label": "A", "value": 1}]})
        assert pie.select_one(".slide__chart svg") is not None

    def test_chart_without_data(self):
        section = _render_one({"type": "line-chart", "series": "broken"})
        assert section.select_one(".slide__chart .chart-placeholder").get_text() == "No data"

    def test_chart_uses_theme_palette(self):
        theme = ThemeDescriptor.model_validate({"chart": {"palette": ["#abcdef"]}})
        section = _render_one({"type": "bar-chart", "series": [{"name": "A", "data": [{"label": "Q1", "value": 3}]}]},
                              theme=theme)
        assert section.find("rect", class_="chart-bar")["fill"] == "#abcdef"

    @pytest.mark.parametrize("layout,side", [("image-left", "left"), ("image-right", "right"), ("diagonal", "right")])
    def test_image_text_layout(self, layout, side):
        section = _render_one({"type": "image-text", "imageUrl": "hero.png", "description": "One\n\nTwo",
                               "layout": layout})
        assert section.find(class_=f"slide__image-text--{side}") is not None
        assert section.find("img")["src"] == "hero.png"
        assert [p.get_text() for p in section.select(".slide__text p")] == ["One", "Two"]

    def test_image_text_without_image(self):
        section = _render_one({"type": "image-text", "content": "Fallback text", "layout": "image-left"})
        assert section.find("img") is None
        assert section.select_one(".slide__image-text--left .slide__image--empty") is not None
        assert section.select_one(".slide__text p").get_text() == "Fallback text"


class TestDocument:
    def _sample(self, **kwargs):
        return _deck(
            {"type": "title", "title": "Acme"},
            {"type": "bullets", "title": "Problem", "content": "- a\n- b"},
            {"type": "hologram", "title": "Odd"},
            {"type": "pie-chart", "title": "Split", "segments": [{"label": "A", "value": 1}, {"label": "B", "value": 3}]},
            **kwargs,
        )

    def test_idempotent(self):
        deck = self._sample()
        theme = ThemeDescriptor()
        assert render(deck, theme) == render(deck, theme)

    def test_order_preserved(self):
        html = render(self._sample(), ThemeDescriptor())
        sections = _sections(html)
        assert [s["data-index"] for s in sections] == ["0", "1", "2", "3"]
        positions = [html.index(f'id="slide-{i}"') for i in range(4)]
        assert positions == sorted(positions)

    def test_navigation_scaffold(self):
        soup = BeautifulSoup(render(self._sample(), ThemeDescriptor()), "html.parser")
        dots = soup.select("nav.nav-dots button.nav-dot")
        assert [d["data-index"] for d in dots] == ["0", "1", "2", "3"]
        assert dots[0]["aria-label"] == "Go to slide 1"
        assert "nav-dot--active" in dots[0]["class"]
        assert all("nav-dot--active" not in d["class"] for d in dots[1:])
        assert soup.find(id="slideCounter").get_text() == "1 / 4"
        assert soup.find(id="progress")["style"] == "width: 25.00%"
        assert len(soup.find_all("script")) == 1

    def test_padded_counter(self):
        theme = ThemeDescriptor(navigation=NavigationConfig(counter_format="[{current}/{total}]", counter_padded=True))
        soup = BeautifulSoup(render(self._sample(), theme), "html.parser")
        assert soup.find(id="slideCounter").get_text() == "[01/04]"

    def test_head(self):
        theme = ThemeDescriptor(name="Paper")
        soup = BeautifulSoup(render(self._sample(title="Board Update"), theme), "html.parser")
        assert soup.title.get_text() == "Board Update — Paper"
        assert soup.find("link", rel="stylesheet") is None
        style = soup.find("style").get_text()
        assert "--accent: #6366f1;" in style
        assert "@media print" in style

    def test_accent_and_fonts(self):
        theme = ThemeDescriptor.model_validate({"fonts": {"stylesheet_url": "https://fonts.example/css"}})
        soup = BeautifulSoup(render(self._sample(accentColor="#ff0066"), theme), "html.parser")
        assert "--accent: #ff0066;" in soup.find("style").get_text()
        assert soup.find("link", rel="stylesheet")["href"] == "https://fonts.example/css"

    def test_watermark_gated(self):
        theme = ThemeDescriptor()
        plain = BeautifulSoup(render(self._sample(), theme), "html.parser")
        assert plain.select_one("footer.watermark") is None
        soup = BeautifulSoup(render(self._sample(watermark=True), theme), "html.parser")
        link = soup.select_one("footer.watermark a")
        assert link["href"] == "https://htmldecks.com"
        assert link.get_text() == "Made with HTML Decks"

    def test_untyped_first_slide_follows_theme(self):
        deck = _deck({"title": "Hello"}, {"title": "World"})
        title_first = render_slides(deck, ThemeDescriptor())
        assert 'data-slide-type="title"' in title_first[0]
        assert 'data-slide-type="bullets"' in title_first[1]
        plain = render_slides(deck, ThemeDescriptor(untyped_first_slide_as_title=False))
        assert 'data-slide-type="bullets"' in plain[0]

    def test_audit_passes(self):
        assert audit_document(render(self._sample(), ThemeDescriptor())) == []
