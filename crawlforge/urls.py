"""URL joining and raw-content base derivation."""

import httpx

from .errors import CannotDeriveBase, UnresolvableHref
from .models import GITHUB_RAW_BASE_URL, ForgeKind


def resolve(base: str, href: str) -> str:
    """Resolve href against base (RFC 3986), returning an absolute URL.

    Raises UnresolvableHref when href isn't a usable reference.
    """
    try:
        url = httpx.URL(base).join(href)
    except httpx.InvalidURL as e:
        raise UnresolvableHref(href, str(e)) from e
    if not url.is_absolute_url:
        raise UnresolvableHref(href, f"no absolute URL against {base}")
    return str(url)


def origin(current: str) -> str:
    """Reduce a URL to scheme, host and port with an empty path."""
    try:
        url = httpx.URL(current)
    except httpx.InvalidURL as e:
        raise CannotDeriveBase(current) from e
    if not url.scheme or not url.host:
        # Opaque URLs like mailto: have no path segments to clear
        raise CannotDeriveBase(current)
    return str(url.copy_with(path="/", query=None, fragment=None))


def raw_base(kind: ForgeKind, current: str) -> str:
    """Base that raw-file hrefs are resolved against for a given listing.

    OpenGrok serves raw content from the listing's own host, so this must be
    called per listing rather than once per crawl.
    """
    if kind is ForgeKind.GITHUB:
        return GITHUB_RAW_BASE_URL
    return origin(current)
