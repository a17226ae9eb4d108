"""Theme registry: lookup of the YAML theme descriptors shipped with the package."""

import logging
from pathlib import Path

from htmldecks.schemas.theme_schema import ThemeDescriptor

logger = logging.getLogger(__name__)

THEMES_DIR = Path(__file__).resolve().parent.parent / "themes"
DEFAULT_THEME = "swiss-modern"


class ThemeNotFoundError(LookupError):
    """Raised when a theme id matches no bundled descriptor."""


def list_themes(themes_dir: str | Path = THEMES_DIR) -> list[str]:
    """Return the ids of all available themes, sorted."""
    themes_dir = Path(themes_dir)
    if not themes_dir.is_dir():
        return []
    return sorted(p.stem for p in themes_dir.glob("*.yaml"))


def load_theme(theme: str | Path, themes_dir: str | Path = THEMES_DIR) -> ThemeDescriptor:
    """Load a theme by id (e.g. 'paper-ink') or by path to a YAML file.

    Raises:
        ThemeNotFoundError: ``theme`` is neither a file nor a known id.
        FileNotFoundError: an explicit ``.yaml`` path does not exist.
    """
    path = Path(theme)
    if path.suffix in (".yaml", ".yml"):
        return ThemeDescriptor.from_yaml(path)

    candidate = Path(themes_dir) / f"{theme}.yaml"
    if not candidate.exists():
        available = ", ".join(list_themes(themes_dir)) or "none"
        raise ThemeNotFoundError(f"Unknown theme {str(theme)!r} (available: {available})")

    descriptor = ThemeDescriptor.from_yaml(candidate)
    if descriptor.id != candidate.stem:
        logger.warning(f"Theme file {candidate.name} declares id {descriptor.id!r}")
    return descriptor


def load_all_themes(themes_dir: str | Path = THEMES_DIR) -> dict[str, ThemeDescriptor]:
    """Load every bundled theme, keyed by id."""
    return {theme_id: load_theme(theme_id, themes_dir) for theme_id in list_themes(themes_dir)}
