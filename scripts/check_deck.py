#!/usr/bin/env python3
"""Audit an emitted HTML deck for navigation and chart contract violations.

Checks for: dot/slide count mismatch, out-of-order data-index values,
missing progress bar, counter or script, and non-finite chart geometry.

Usage:
    python scripts/check_deck.py workspace/acme-swiss-modern.html [-o report.json]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from htmldecks.html_engine.document_check import audit_document
from htmldecks.utils.file_utils import save_json


def main():
    parser = argparse.ArgumentParser(description="Audit an emitted HTML deck")
    parser.add_argument("html_file", type=Path, help="Path to the deck HTML")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Optional JSON report path")
    args = parser.parse_args()

    if not args.html_file.exists():
        print(f"Error: File not found: {args.html_file}", file=sys.stderr)
        sys.exit(1)

    issues = audit_document(args.html_file.read_text(encoding="utf-8"))

    if args.output:
        save_json({"file": str(args.html_file), "issues": issues}, args.output)

    errors = [i for i in issues if i["severity"] == "error"]
    warnings = [i for i in issues if i["severity"] == "warning"]

    print(f"Checked: {args.html_file}")
    print(f"Errors: {len(errors)}  Warnings: {len(warnings)}")
    for issue in issues:
        where = f"slide {issue['slide_number']}" if issue["slide_number"] else "document"
        print(f"  [{issue['severity']}] {issue['category']} ({where}): {issue['description']}")

    if errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
