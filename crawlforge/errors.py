"""Errors raised while crawling a forge.

Everything except UnresolvableHref aborts the crawl.
"""


class CrawlForgeError(Exception):
    """Base class for crawl errors."""


class ParseForgeError(CrawlForgeError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown forge, {name!r}")


class FetchError(CrawlForgeError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ListingNotFound(CrawlForgeError):
    def __init__(self, anchor: str):
        self.anchor = anchor
        super().__init__(f"Listing not found (looked for {anchor!r})")


class MissingHref(CrawlForgeError):
    def __init__(self, element: str):
        self.element = element
        super().__init__(f"Failed to get href from link element: {element}")


class CannotDeriveBase(CrawlForgeError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Cannot derive a base URL from {url}")


class UnresolvableHref(CrawlForgeError):
    """An href that can't be turned into an absolute URL. Skipped, not fatal."""

    def __init__(self, href: str, reason: str):
        self.href = href
        self.reason = reason
        super().__init__(f"Cannot resolve {href!r}: {reason}")
