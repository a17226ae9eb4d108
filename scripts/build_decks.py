#!/usr/bin/env python3
"""Render every deck description in a directory (or a JSON list) to HTML.

Each deck is rendered independently; invalid decks are reported and
skipped without stopping the batch.

Usage:
    python scripts/build_decks.py decks/ -o site/decks --theme swiss-modern
    python scripts/build_decks.py decks.json -o site/decks --theme deep-space
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from htmldecks.html_engine.batch import build_decks
from htmldecks.html_engine.theme_registry import DEFAULT_THEME, ThemeNotFoundError, load_theme
from htmldecks.utils.file_utils import find_deck_files, load_json


def _collect_items(source: Path) -> list:
    """Deck records from a directory of JSON files or a single JSON list."""
    if source.is_dir():
        items = []
        for path in find_deck_files(source):
            try:
                items.append(load_json(path))
            except json.JSONDecodeError as e:
                print(f"Warning: Skipping {path}: invalid JSON ({e})", file=sys.stderr)
        return items

    data = load_json(source)
    return data if isinstance(data, list) else [data]


def main():
    parser = argparse.ArgumentParser(description="Batch render HTML slide decks")
    parser.add_argument("source", type=Path, help="Directory of deck JSON files, or a JSON list of decks")
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("workspace/decks"),
                        help="Output directory (default: workspace/decks)")
    parser.add_argument("--theme", default=DEFAULT_THEME,
                        help=f"Theme id or theme YAML path (default: {DEFAULT_THEME})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if not args.source.exists():
        print(f"Error: Source not found: {args.source}", file=sys.stderr)
        sys.exit(1)

    try:
        theme = load_theme(args.theme)
    except (ThemeNotFoundError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        items = _collect_items(args.source)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.source}: {e}", file=sys.stderr)
        sys.exit(1)

    result = build_decks(items, theme, args.output_dir)

    print(f"Output: {args.output_dir}")
    print(f"Theme: {theme.name}")
    print(f"Written: {result.written_count}")
    print(f"Failed: {len(result.failures)}")
    for failure in result.failures:
        label = failure.label or "unnamed"
        first_line = failure.error.splitlines()[0] if failure.error else ""
        print(f"  [{failure.index}] {label}: {first_line}", file=sys.stderr)

    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
