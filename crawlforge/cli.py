"""CLI for crawling a git forge."""

import argparse
import logging
import sys
from pathlib import Path

import httpx

from .crawler import crawl
from .errors import CrawlForgeError, ParseForgeError
from .fetcher import ListingFetcher
from .models import TraversalOrder
from .registry import FORGE_NAMES, parse_forge
from .settings import get_settings

logger = logging.getLogger("crawlforge")


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _emit(url: str) -> None:
    print(url, flush=True)


def main(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="crawlforge",
        description="Crawl a git forge and print the raw URL of every file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "url",
        help="URL of the directory listing to start from",
    )
    parser.add_argument(
        "-f",
        "--forge",
        default=settings.forge,
        help=f"Type of git forge, one of {', '.join(FORGE_NAMES)} (default: {settings.forge})",
    )
    parser.add_argument(
        "--breadth-first",
        action="store_true",
        help="Visit directories level by level instead of depth-first",
    )
    parser.add_argument(
        "--cache",
        action="store_true",
        help="Cache fetched listing pages on disk",
    )
    parser.add_argument(
        "--skip-cache",
        action="store_true",
        help="Skip reading from cache (still writes to cache, requires --cache)",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help=f"Cache directory (default: {settings.cache_dir})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output)",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    # Validate everything before touching the network
    try:
        kind = parse_forge(args.forge)
    except ParseForgeError as e:
        parser.error(str(e))
    try:
        url_ok = httpx.URL(args.url).is_absolute_url
    except httpx.InvalidURL:
        url_ok = False
    if not url_ok:
        parser.error(f"URL must be absolute, got {args.url!r}")
    if args.skip_cache and not args.cache:
        parser.error("--skip-cache requires --cache")

    order = TraversalOrder.BREADTH_FIRST if args.breadth_first else TraversalOrder.DEPTH_FIRST

    try:
        with ListingFetcher(args.cache_dir, use_cache=args.cache, skip_cache=args.skip_cache) as fetcher:
            stats = crawl(kind, args.url, fetcher.fetch, emit=_emit, order=order)
    except CrawlForgeError as e:
        print(f"crawlforge: error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    logger.info(
        "Done: %d files from %d listings, %d links skipped, %d directories revisited",
        stats.files, stats.listings, stats.skipped_hrefs, stats.revisited_dirs,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
