"""Compile a DeckDescription into one standalone HTML document.

The document holds the navigation scaffold (progress bar, one dot per
slide, counter), one <section> per slide in deck order, the embedded
navigation script and, when requested, the watermark footer. Output
depends only on the deck and the theme.
"""

import logging
from html import escape

from htmldecks.html_engine.composers import SlideContext, get_composer, resolve_slide_type
from htmldecks.html_engine.navigation import format_counter, navigation_script, progress_percent
from htmldecks.html_engine.styles import stylesheet
from htmldecks.schemas.slide_schema import DeckDescription
from htmldecks.schemas.theme_schema import ThemeDescriptor

logger = logging.getLogger(__name__)


def render_slides(deck: DeckDescription, theme: ThemeDescriptor) -> list[str]:
    """Return one <section> fragment per slide, in deck order."""
    total = len(deck.slides)
    fragments = []
    for index, slide in enumerate(deck.slides):
        slide_type = resolve_slide_type(slide, index, theme)
        ctx = SlideContext(index=index, total=total, slide_type=slide_type, deck=deck, theme=theme)
        fragments.append(get_composer(slide_type).render(slide, ctx))
    return fragments


def _nav_dots(total: int) -> str:
    buttons = []
    for i in range(total):
        active = " nav-dot--active" if i == 0 else ""
        buttons.append(
            f'    <button class="nav-dot{active}" data-index="{i}" aria-label="Go to slide {i + 1}"></button>'
        )
    return '  <nav class="nav-dots" id="navDots">\n' + "\n".join(buttons) + "\n  </nav>"


def _font_link(theme: ThemeDescriptor) -> str:
    if not theme.fonts.stylesheet_url:
        return ""
    return (
        '  <link rel="preconnect" href="https://fonts.googleapis.com">\n'
        f'  <link href="{escape(theme.fonts.stylesheet_url)}" rel="stylesheet">\n'
    )


def _watermark(theme: ThemeDescriptor) -> str:
    return (
        '  <footer class="watermark">'
        f'<a href="{escape(theme.watermark_url)}" target="_blank" rel="noopener">'
        f"{escape(theme.watermark_text)}</a></footer>\n"
    )


def render(deck: DeckDescription, theme: ThemeDescriptor) -> str:
    """Render the complete HTML document for ``deck`` styled by ``theme``."""
    total = len(deck.slides)
    logger.debug(f"Rendering {total} slides for {deck.company_name!r} with theme {theme.id}")

    body_class = "animate" if theme.animate_entries else ""
    slides_html = "\n".join(render_slides(deck, theme))
    counter = format_counter(0, total, theme.navigation)

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"  <title>{deck.document_title} — {theme.name}</title>\n"
        f"{_font_link(theme)}"
        f"  <style>\n{stylesheet(theme, deck.accent_color)}  </style>\n"
        "</head>\n"
        f'<body class="{body_class}" data-theme="{theme.id}">\n'
        f'  <div class="progress" id="progress" style="width: {progress_percent(0, total):.2f}%"></div>\n'
        f"{_nav_dots(total)}\n"
        f'  <div class="slide-counter" id="slideCounter">{counter}</div>\n'
        f"{slides_html}\n"
        f"  <script>\n{navigation_script(theme.navigation)}\n  </script>\n"
        f"{_watermark(theme) if deck.watermark else ''}"
        "</body>\n"
        "</html>\n"
    )
