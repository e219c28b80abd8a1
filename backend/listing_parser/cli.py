#!/usr/bin/env python3
"""
CLI for listing extraction.

Usage:
    # Parse a saved HTML page and print a summary
    python -m backend.listing_parser.cli parse page.html

    # Resolve relative images against a known origin
    python -m backend.listing_parser.cli parse page.html --base-url https://www.example.com

    # Print the full result as JSON
    python -m backend.listing_parser.cli parse page.html --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .details import build_project_details
from .logger import log_trace, logger
from .parser import parse


def print_result(result, console: Console):
    """Pretty print an extraction result."""
    table = Table(title=f"Extraction ({result.site or 'fallback'}) - confidence {result.confidence}/100")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Name", result.name)
    table.add_row("Type", result.type.value)
    table.add_row("Location", result.location)
    table.add_row("Price", result.price or "N/A")
    table.add_row("Units", str(result.number_of_units) if result.number_of_units is not None else "N/A")
    size = f"{result.size} {result.size_unit}" if result.size is not None else "N/A"
    table.add_row("Size", size)
    table.add_row("Base URL", result.base_url or "N/A")
    table.add_row("Thumbnail", result.thumbnail_url or "N/A")
    table.add_row("Images", str(len(result.image_urls)))
    table.add_row("Amenities", ", ".join(a.name for a in result.amenities) or "N/A")
    table.add_row("Description", result.description)

    console.print(table)

    if result.needs_review():
        console.print("[yellow]⚠ Low confidence - review before saving[/yellow]")


def cmd_parse(args, console: Console) -> int:
    path = Path(args.file)
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        return 1

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    html = path.read_text(encoding='utf-8', errors='replace')
    result = parse(html, args.site, args.base_url, trace=log_trace if args.verbose else None)

    if args.json:
        payload = {"parsedData": result.to_dict(), "projectDetails": build_project_details(result)}
        print(json.dumps(payload, indent=2))
    else:
        print_result(result, console)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract listing data from saved HTML pages")
    sub = parser.add_subparsers(dest="command")

    parse_cmd = sub.add_parser("parse", help="Parse an HTML file")
    parse_cmd.add_argument("file", help="Path to the HTML file")
    parse_cmd.add_argument("--base-url", default=None, help="Origin for relative image URLs")
    parse_cmd.add_argument("--site", default=None, help="Force a pattern set (99acres, housing, magicbricks, generic)")
    parse_cmd.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parse_cmd.add_argument("-v", "--verbose", action="store_true", help="Log each image URL normalization")
    return parser


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    console = Console()

    if args.command == "parse":
        return cmd_parse(args, console)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
