"""Structural checks on an emitted deck document.

Parses the HTML with BeautifulSoup and reports anything that would break
navigation or rendering. Each issue is a dict with ``slide_number``
(1-based, 0 for document-level issues), ``severity``, ``category``,
``description`` and ``suggestion``.
"""

import re

from bs4 import BeautifulSoup

_NAN = re.compile(r"\bNaN\b|\binf\b", re.IGNORECASE)
_NUMERIC_ATTRS = ("x", "y", "x1", "y1", "x2", "y2", "width", "height", "cx", "cy", "r", "d", "points")


def _issue(slide_number: int, severity: str, category: str, description: str, suggestion: str) -> dict:
    return {
        "slide_number": slide_number,
        "severity": severity,
        "category": category,
        "description": description,
        "suggestion": suggestion,
    }


def audit_document(html: str) -> list[dict]:
    """Return a list of contract violations found in ``html`` (empty when clean)."""
    soup = BeautifulSoup(html, "html.parser")
    issues = []

    slides = soup.find_all("section", class_="slide")
    dots = soup.find_all("button", class_="nav-dot")

    if not slides:
        issues.append(_issue(0, "error", "structure", "Document has no slide sections",
                             "Render the deck with at least one slide"))

    # Scaffold
    if soup.find(id="progress") is None:
        issues.append(_issue(0, "error", "navigation", "Progress bar #progress is missing",
                             "Regenerate the document shell"))
    if soup.find(id="slideCounter") is None:
        issues.append(_issue(0, "error", "navigation", "Slide counter #slideCounter is missing",
                             "Regenerate the document shell"))
    scripts = [s for s in soup.find_all("script") if (s.string or "").strip()]
    if not scripts:
        issues.append(_issue(0, "error", "navigation", "Inline navigation script is missing",
                             "Regenerate the document shell"))

    if len(dots) != len(slides):
        issues.append(_issue(0, "error", "navigation",
                             f"Dot/slide count mismatch: {len(dots)} dots, {len(slides)} slides",
                             "Every slide needs exactly one navigation dot"))

    active = [d for d in dots if "nav-dot--active" in (d.get("class") or [])]
    if dots and len(active) != 1:
        issues.append(_issue(0, "warning", "navigation",
                             f"{len(active)} navigation dots are marked active",
                             "Exactly one dot should start active"))

    # Slide indices must be 0..N-1 in document order
    for position, section in enumerate(slides):
        raw_index = section.get("data-index")
        if raw_index != str(position):
            issues.append(_issue(position + 1, "error", "sequencing",
                                 f"Slide at position {position} has data-index={raw_index!r}",
                                 "Slides must be indexed 0..N-1 in document order"))

    for position, dot in enumerate(dots):
        if dot.get("data-index") != str(position):
            issues.append(_issue(0, "error", "sequencing",
                                 f"Dot at position {position} has data-index={dot.get('data-index')!r}",
                                 "Dots must be indexed 0..N-1 in document order"))

    # Chart geometry
    for position, section in enumerate(slides):
        for svg in section.find_all("svg"):
            for element in svg.find_all(True):
                for attr in _NUMERIC_ATTRS:
                    value = element.get(attr)
                    if value and _NAN.search(value):
                        issues.append(_issue(position + 1, "error", "chart_geometry",
                                             f"<{element.name}> has non-finite {attr}={value!r}",
                                             "Chart layout must guard zero totals and maxima"))
    return issues
