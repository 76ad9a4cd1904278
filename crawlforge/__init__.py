"""Crawl git forge directory listings and print raw-content URLs.

Walks GitHub and OpenGrok listing pages recursively, telling directories from
files by each forge's markup, and rewrites file links to their raw form.
"""

__version__ = "0.1.0"

from .crawler import CrawlStats, Crawler, crawl
from .errors import (
    CannotDeriveBase,
    CrawlForgeError,
    FetchError,
    ListingNotFound,
    MissingHref,
    ParseForgeError,
)
from .models import EntryKind, ForgeKind, TraversalOrder
from .registry import get_adapter, parse_forge

__all__ = [
    "CannotDeriveBase",
    "CrawlForgeError",
    "CrawlStats",
    "Crawler",
    "EntryKind",
    "FetchError",
    "ForgeKind",
    "ListingNotFound",
    "MissingHref",
    "ParseForgeError",
    "TraversalOrder",
    "crawl",
    "get_adapter",
    "parse_forge",
]
