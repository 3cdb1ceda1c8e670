"""
Search an e-commerce site for one keyword and save the result cards as JSON.

    python main.py "wireless mouse"
    python main.py "wireless mouse" --pages 2 --screenshot output/search.png
"""

import argparse
import sys
from typing import List, Optional

from config import ACTIVE_CONFIG
from product_scraper.errors.exceptions import UsageError
from product_scraper.sources.amazon_search import scrape_search_sync
from product_scraper.utils.logging_config import setup_logging
from product_scraper.utils.output import save_records

EXIT_OK = 0
EXIT_USAGE = 2


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(description="Scrape product search results into a JSON file.")
    parser.add_argument("keyword", help="search keyword")
    parser.add_argument(
        "--output",
        default=ACTIVE_CONFIG.OUTPUT["PATH"],
        help="JSON file to write (default: %(default)s)",
    )
    parser.add_argument("--screenshot", default=None, help="save a full-page PNG of the first results page")
    parser.add_argument("--pages", type=int, default=1, help="number of result pages (default: 1)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if not args.keyword.strip():
            raise UsageError("keyword must not be empty")
        if args.pages < 1:
            raise UsageError("--pages must be at least 1")
    except UsageError:
        parser.print_usage(sys.stderr)
        raise
    return args


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger = setup_logging(ACTIVE_CONFIG.LOGGING)

    run = scrape_search_sync(
        args.keyword,
        pages=args.pages,
        screenshot_path=args.screenshot,
        logger=logger,
    )
    logger(f"✅ {len(run.records)} products scraped for '{run.keyword}'")

    # exit status does not depend on the write
    save_records(run.records, args.output, logger=logger, indent=ACTIVE_CONFIG.OUTPUT["INDENT"])
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
