"""Recursive walk over a forge's directory listings."""

import logging
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .errors import UnresolvableHref
from .models import EntryKind, ForgeKind, Listing, TraversalOrder
from .registry import get_adapter
from .urls import resolve

logger = logging.getLogger(__name__)

Fetch = Callable[[str], str]


@dataclass
class CrawlStats:
    """Counters for one crawl."""

    listings: int = 0
    files: int = 0
    skipped_hrefs: int = 0
    revisited_dirs: int = 0


class Crawler:
    """Walks directory listings starting at root and yields raw file URLs.

    The walk uses an explicit worklist. Depth-first order yields exactly what
    visiting each subdirectory recursively, in page order, would. Directory
    URLs already visited are not fetched again, so self-referencing listings
    can't loop forever.
    """

    def __init__(
        self,
        kind: ForgeKind,
        root: str,
        fetch: Fetch,
        order: TraversalOrder = TraversalOrder.DEPTH_FIRST,
    ):
        self.kind = kind
        self.root = root
        self.adapter = get_adapter(kind)
        self._fetch = fetch
        self.order = order
        self.stats = CrawlStats()

    def walk(self) -> Iterator[str]:
        """Yield absolute raw-content URLs as each listing is processed.

        Raises FetchError, ListingNotFound, MissingHref or CannotDeriveBase,
        ending the walk.
        """
        pending = deque([self.root])
        visited = {self.root}

        while pending:
            if self.order is TraversalOrder.DEPTH_FIRST:
                url = pending.pop()
            else:
                url = pending.popleft()

            listing = self._visit(url)
            yield from self._raw_files(listing)

            subdirs = []
            for dir_url in self._directories(listing):
                if dir_url in visited:
                    logger.info("Already visited %s, not descending again", dir_url)
                    self.stats.revisited_dirs += 1
                    continue
                visited.add(dir_url)
                subdirs.append(dir_url)

            # A stack pops last-in first, so push in reverse to keep page order
            if self.order is TraversalOrder.DEPTH_FIRST:
                pending.extend(reversed(subdirs))
            else:
                pending.extend(subdirs)

    def _visit(self, url: str) -> Listing:
        logger.debug("Fetching listing %s", url)
        body = self._fetch(url)
        self.stats.listings += 1
        return Listing(url=url, body=body)

    def _raw_files(self, listing: Listing) -> Iterator[str]:
        base = self.adapter.raw_base(listing.url)
        for entry in self.adapter.entries(EntryKind.RAW_FILE, listing.body, listing.url):
            url = self._resolve(base, entry.href, listing)
            if url is not None:
                self.stats.files += 1
                yield url

    def _directories(self, listing: Listing) -> list[str]:
        entries = self.adapter.entries(EntryKind.DIRECTORY, listing.body, listing.url)
        urls = (self._resolve(listing.url, entry.href, listing) for entry in entries)
        return [url for url in urls if url is not None]

    def _resolve(self, base: str, href: str, listing: Listing) -> str | None:
        try:
            return resolve(base, href)
        except UnresolvableHref as e:
            logger.warning("Skipping link on %s: %s", listing.url, e)
            self.stats.skipped_hrefs += 1
            return None


def crawl(
    kind: ForgeKind,
    root: str,
    fetch: Fetch,
    emit: Callable[[str], None] = print,
    order: TraversalOrder = TraversalOrder.DEPTH_FIRST,
) -> CrawlStats:
    """Crawl from root, passing every raw file URL to emit as it is found."""
    crawler = Crawler(kind, root, fetch, order=order)
    for url in crawler.walk():
        emit(url)
    return crawler.stats
