#!/usr/bin/env python3
"""Validate a JSON or YAML file against a named Pydantic schema.

Usage:
    python scripts/validate_schema.py <file> <schema_name>

Schema names:
    DeckDescription   -- Deck input record (company, accent, slides)
    ThemeDescriptor   -- Theme fonts, colors, chart palette, navigation tuning
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import yaml

from htmldecks.html_engine.composers import resolve_slide_type
from htmldecks.schemas.slide_schema import DeckDescription, FallbackSlide
from htmldecks.schemas.theme_schema import ThemeDescriptor
from htmldecks.utils.file_utils import load_json, load_yaml

SCHEMA_MAP = {
    "DeckDescription": DeckDescription,
    "ThemeDescriptor": ThemeDescriptor,
}


def main():
    parser = argparse.ArgumentParser(description="Validate a file against a Pydantic schema")
    parser.add_argument("data_file", type=Path, help="Path to JSON (or YAML) file to validate")
    parser.add_argument("schema_name", choices=list(SCHEMA_MAP.keys()),
                        help="Name of the Pydantic schema to validate against")
    args = parser.parse_args()

    if not args.data_file.exists():
        print(f"Error: File not found: {args.data_file}", file=sys.stderr)
        sys.exit(1)

    schema_cls = SCHEMA_MAP[args.schema_name]

    try:
        if args.data_file.suffix in (".yaml", ".yml"):
            data = load_yaml(args.data_file)
        else:
            data = load_json(args.data_file)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        print(f"Error: Cannot parse {args.data_file}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        instance = schema_cls.model_validate(data)
    except ValueError as e:
        print(f"Validation FAILED: {args.data_file} does not conform to {args.schema_name}", file=sys.stderr)
        print(f"  Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Validation PASSED: {args.data_file} conforms to {args.schema_name}")

    # Print summary info based on schema type
    if args.schema_name == "DeckDescription":
        default_theme = ThemeDescriptor()
        print(f"  Company: {instance.company_name}")
        print(f"  Slides: {len(instance.slides)}")
        for i, slide in enumerate(instance.slides):
            resolved = resolve_slide_type(slide, i, default_theme).value
            note = ""
            if isinstance(slide, FallbackSlide) and slide.type is not None:
                note = f" (declared {slide.type!r}, rendered as fallback)"
            print(f"    {i + 1:02d}. {resolved}{note}: {slide.title}")
    elif args.schema_name == "ThemeDescriptor":
        print(f"  Name: {instance.name}")
        print(f"  Fonts: {instance.fonts.heading} / {instance.fonts.body}")
        print(f"  Palette: {', '.join(instance.chart.palette)}")


if __name__ == "__main__":
    main()
