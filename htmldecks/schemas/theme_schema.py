"""Pydantic models for theme descriptors.

A ThemeDescriptor captures everything that used to differ between the
hand-written theme generators: fonts, colors, the chart palette, navigation
tuning, and a few layout switches. One rendering engine consumes it, so a
new theme is a YAML file rather than another copy of the renderer.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from htmldecks.utils.file_utils import load_yaml


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------

class ThemeFonts(BaseModel):
    """Font stacks for headings and body copy."""

    heading: str = Field(default="Inter", description="Heading font family")
    body: str = Field(default="Inter", description="Body font family")
    fallback: str = Field(default="sans-serif", description="Generic family appended to both stacks")
    stylesheet_url: Optional[str] = Field(
        default=None,
        description="Optional external font stylesheet. Navigation never depends on it.",
    )

    @property
    def heading_stack(self) -> str:
        return f"'{self.heading}', {self.fallback}"

    @property
    def body_stack(self) -> str:
        return f"'{self.body}', {self.fallback}"


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

class ThemeColors(BaseModel):
    """Page colors. The deck's accent color is supplied per deck, not here."""

    background: str = "#ffffff"
    text: str = "#111111"
    text_muted: str = "#555555"
    primary: Optional[str] = Field(
        default=None,
        description="Theme signature color for decorations. Falls back to the deck accent.",
    )
    surface: Optional[str] = Field(
        default=None,
        description="Card / table header fill. Falls back to a translucent text tint.",
    )
    border: Optional[str] = Field(
        default=None,
        description="Hairline and divider color. Falls back to a translucent text tint.",
    )


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

class ChartStyle(BaseModel):
    """Palette and label styling for inline SVG charts."""

    palette: list[str] = Field(
        default_factory=lambda: ["#6366f1", "#22c55e", "#f59e0b", "#ef4444", "#0ea5e9"],
        min_length=1,
        description="Series / segment colors, assigned by index and cycled with modulo.",
    )
    axis_color: str = "#333333"
    label_color: str = "#333333"
    font: Optional[str] = Field(default=None, description="SVG text font. Falls back to fonts.body.")
    wedge_stroke: str = "#ffffff"


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

class NavigationConfig(BaseModel):
    """Tuning for the in-document navigation controller."""

    threshold: float = Field(
        default=0.5,
        gt=0,
        le=1,
        description="Visible fraction of a slide before it becomes current.",
    )
    swipe_distance: float = Field(
        default=50,
        ge=0,
        description="Vertical touch travel (px) a swipe must exceed to navigate.",
    )
    counter_format: str = Field(
        default="{current} / {total}",
        description="Counter text; {current} and {total} are substituted.",
    )
    counter_padded: bool = Field(
        default=False,
        description="Zero-pad counter numbers to two digits ('03 / 12').",
    )


# ---------------------------------------------------------------------------
# Top-level theme
# ---------------------------------------------------------------------------

class ThemeDescriptor(BaseModel):
    """Complete theme configuration for the rendering engine."""

    id: str = "default"
    name: str = "Default"
    description: str = ""
    dark: bool = False
    fonts: ThemeFonts = Field(default_factory=ThemeFonts)
    colors: ThemeColors = Field(default_factory=ThemeColors)
    chart: ChartStyle = Field(default_factory=ChartStyle)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)

    untyped_first_slide_as_title: bool = Field(
        default=True,
        description="A first slide without a declared type uses the title layout.",
    )
    force_title_first: bool = Field(
        default=False,
        description="The first slide always uses the title layout, whatever its type.",
    )
    numbered_bullets: bool = Field(
        default=False,
        description="Prefix list items with '01'-style ordinals.",
    )
    animate_entries: bool = Field(
        default=True,
        description="Slides fade in when they become current.",
    )

    watermark_text: str = "Made with HTML Decks"
    watermark_url: str = "https://htmldecks.com"

    # --- Resolved accessors ---

    def primary_resolved(self, accent: str) -> str:
        return self.colors.primary or accent

    @property
    def surface_resolved(self) -> str:
        if self.colors.surface:
            return self.colors.surface
        return "rgba(255, 255, 255, 0.06)" if self.dark else "rgba(0, 0, 0, 0.04)"

    @property
    def border_resolved(self) -> str:
        if self.colors.border:
            return self.colors.border
        return "rgba(255, 255, 255, 0.12)" if self.dark else "rgba(0, 0, 0, 0.1)"

    @property
    def chart_font_resolved(self) -> str:
        return self.chart.font or self.fonts.body

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ThemeDescriptor":
        """Load a theme from a YAML file."""
        return cls.model_validate(load_yaml(path))

    def to_yaml(self, path: str | Path) -> None:
        """Save the theme to a YAML file."""
        path = Path(path)
        data = self.model_dump(exclude_none=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
