"""OpenGrok xref directory listings."""

import posixpath
import re

import httpx

from ..errors import ListingNotFound
from ..models import EntryKind, ForgeKind
from .base import ForgeAdapter, get_href, parse_html

PARENT_HREF = ".."
XREF_SEGMENT = "xref"
RAW_SEGMENT = "raw"

_REDUNDANT_SEPARATORS = re.compile(r"/{2,}")


def raw_prefix(path: str) -> str:
    """Swap the first xref segment of a listing path for raw."""
    segments = path.split("/")
    if XREF_SEGMENT in segments:
        segments[segments.index(XREF_SEGMENT)] = RAW_SEGMENT
    return "/".join(segments)


def join_path(prefix: str, href: str) -> str:
    """Join like a filesystem path, keeping any trailing slash on href."""
    return _REDUNDANT_SEPARATORS.sub("/", posixpath.join(prefix, href))


class OpenGrokAdapter(ForgeAdapter):
    """Scrapes the dirlist table of an OpenGrok /xref/ page.

    Directory links end in a slash. Hrefs are relative to the listing, so they
    are returned joined onto the listing path (under /raw/ for raw files).
    """

    kind = ForgeKind.OPENGROK

    def extract(self, kind: EntryKind, body: str, root: str) -> list[str]:
        soup = parse_html(body)
        tbody = soup.find("tbody")
        if tbody is None:
            raise ListingNotFound("tbody")

        # Keep percent-escapes so names like c%23 stay one path segment
        path = httpx.URL(root).raw_path.decode("ascii").split("?", 1)[0]
        prefix = raw_prefix(path) if kind is EntryKind.RAW_FILE else path
        want_dirs = kind is EntryKind.DIRECTORY

        hrefs = []
        for row in tbody.find_all("tr"):
            cells = row.find_all("td", recursive=False)
            if len(cells) < 2:
                continue
            link = cells[1].find("a")
            if link is None:
                continue
            href = get_href(link)
            if href == PARENT_HREF:
                continue
            if href.endswith("/") != want_dirs:
                continue
            hrefs.append(join_path(prefix, href))
        return hrefs
