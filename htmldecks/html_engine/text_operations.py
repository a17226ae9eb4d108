"""Text helpers shared by every composer.

Slide content is trusted markup: nothing here escapes HTML-significant
characters. Callers that need escaping must do it before building the deck.
"""

import re

_BULLET_MARKER = re.compile(r"^[-•]\s*")


def strip_bullet_marker(line: str) -> str:
    """Remove one leading '-' or '•' marker and the whitespace after it."""
    return _BULLET_MARKER.sub("", line, count=1)


def normalize_lines(text: str | None) -> list[str]:
    """Split newline-delimited content into display lines.

    Lines are trimmed, blank lines are dropped, and a leading bullet marker
    is stripped from each remaining line.
    """
    if not text:
        return []
    lines = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue
        lines.append(strip_bullet_marker(line))
    return lines


def first_line(text: str | None) -> str:
    """First normalized line of ``text``, or an empty string."""
    lines = normalize_lines(text)
    return lines[0] if lines else ""


def ordinal(index: int) -> str:
    """Zero-based index to a padded 1-based label: 0 -> '01'."""
    return f"{index + 1:02d}"
