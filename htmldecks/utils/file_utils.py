"""File I/O and path utilities."""

import json
import logging
import re
import unicodedata
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_json(path: str | Path) -> Any:
    """Load a JSON file and return its contents."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Save data to a JSON file."""
    path = Path(path)
    ensure_directory(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str)


def save_text(text: str, path: str | Path) -> Path:
    """Write text verbatim (UTF-8), creating parent directories."""
    path = Path(path)
    ensure_directory(path.parent)
    path.write_text(text, encoding="utf-8")
    return path


def find_deck_files(directory: str | Path) -> list[Path]:
    """Recursively find all deck .json files in a directory."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    files = sorted(directory.rglob("*.json"))
    # Exclude temp/hidden files
    return [f for f in files if not f.name.startswith(("~", "."))]


def slugify(text: str, fallback: str = "deck") -> str:
    """Lowercase ASCII slug: 'Acme & Co.' -> 'acme-co'."""
    normalized = unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    slug = _NON_SLUG.sub("-", normalized.lower()).strip("-")
    return slug or fallback


def deck_filename(company_name: str, theme_id: str) -> str:
    """Download name for a rendered deck: '{slug}-{theme}.html'."""
    return f"{slugify(company_name)}-{theme_id}.html"
