#!/usr/bin/env python3
"""Render a standalone HTML slide deck from a deck description JSON.

The theme is a bundled theme id or a path to a theme YAML file. The output
is one self-contained HTML document with inline styles, charts and
navigation script.

Usage:
    python scripts/render_deck.py workspace/deck.json --theme paper-ink
    python scripts/render_deck.py workspace/deck.json -o out/acme.html \
        --theme my_themes/custom.yaml
    python scripts/render_deck.py --list-themes
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from htmldecks.html_engine.document import render
from htmldecks.html_engine.theme_registry import (
    DEFAULT_THEME,
    ThemeNotFoundError,
    list_themes,
    load_theme,
)
from htmldecks.schemas.slide_schema import DeckDescription
from htmldecks.utils.file_utils import deck_filename, save_text


def main():
    parser = argparse.ArgumentParser(description="Render an HTML slide deck")
    parser.add_argument("input_json", type=Path, nargs="?", help="Deck description JSON")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output HTML path (default: workspace/<company>-<theme>.html)")
    parser.add_argument("--theme", default=DEFAULT_THEME,
                        help=f"Theme id or theme YAML path (default: {DEFAULT_THEME})")
    parser.add_argument("--list-themes", action="store_true", help="List bundled themes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.list_themes:
        for theme_id in list_themes():
            theme = load_theme(theme_id)
            print(f"{theme_id:18s} {theme.name}")
        return

    if args.input_json is None:
        parser.error("input_json is required unless --list-themes is given")

    if not args.input_json.exists():
        print(f"Error: Input not found: {args.input_json}", file=sys.stderr)
        sys.exit(1)

    try:
        theme = load_theme(args.theme)
    except (ThemeNotFoundError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        data = json.loads(args.input_json.read_text(encoding="utf-8"))
        deck = DeckDescription.model_validate(data)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input_json}: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: {args.input_json} is not a valid deck description", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        sys.exit(1)

    output = args.output or Path("workspace") / deck_filename(deck.company_name, theme.id)
    html_str = render(deck, theme)
    save_text(html_str, output)

    print(f"HTML deck: {output}")
    print(f"Slides: {len(deck.slides)}")
    print(f"Theme: {theme.name}")
    if deck.watermark:
        print("Watermark: on")


if __name__ == "__main__":
    main()
