#!/usr/bin/env python3
"""
Command line entry point.

Usage:
    grocery-list parse [items.txt] [-o grocery-list.csv]
    grocery-list submit [grocery-list.csv] [--base-url http://localhost:3000]
    grocery-list serve

Typical flow: start the form server, parse the list, replay it into the form.
"""

import argparse
import asyncio
import logging
import sys

from grocery_list.config import get_settings
from grocery_list.errors import GroceryListError
from grocery_list.models.grocery import ParsedGroceryList
from grocery_list.services.csv_export import read_items_csv, write_items_csv
from grocery_list.services.form_submitter import replay_items
from grocery_list.services.list_parser import parse_list_file

logger = logging.getLogger("grocery_list")


def print_summary(parsed: ParsedGroceryList, sample_size: int = 10):
    """Print the item count, a sample and the category breakdown."""
    print(f"Found {parsed.items_count} items across {parsed.categories_count} categories")

    print("\nSample of parsed items:")
    for item in parsed.sample(sample_size):
        print(f"  {item.category}: {item.item} ({item.quantity})")

    print("\nCategory breakdown:")
    for category, count in parsed.category_counts.items():
        print(f"  {category}: {count} items")


def cmd_parse(args) -> int:
    parsed = parse_list_file(args.input)
    write_items_csv(parsed.items, args.output)
    print(f"Created {args.output}")
    print_summary(parsed)
    return 0


def cmd_submit(args) -> int:
    items = read_items_csv(args.csv)
    report = asyncio.run(replay_items(items, base_url=args.base_url))

    print(f"\nSubmitted {report.submitted_count}/{report.total_count} items")
    for result in report.results:
        if not result.success:
            print(f"  [{result.index}] {result.item.item}: {result.error}")
    return 0 if report.failed_count == 0 else 2


def cmd_serve(args) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "grocery_list.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="grocery-list",
        description="Parse hand-written grocery lists and replay them into a web form",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a list file into CSV")
    parse_cmd.add_argument("input", nargs="?", default=settings.input_file)
    parse_cmd.add_argument("-o", "--output", default=settings.output_csv)
    parse_cmd.set_defaults(func=cmd_parse)

    submit_cmd = subparsers.add_parser("submit", help="Replay a CSV into the form server")
    submit_cmd.add_argument("csv", nargs="?", default=settings.output_csv)
    submit_cmd.add_argument("--base-url", default=settings.form_base_url)
    submit_cmd.set_defaults(func=cmd_submit)

    serve_cmd = subparsers.add_parser("serve", help="Run the form server")
    serve_cmd.add_argument("--host", default=None)
    serve_cmd.add_argument("--port", type=int, default=None)
    serve_cmd.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return args.func(args)
    except GroceryListError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
