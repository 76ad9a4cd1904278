"""Contract shared by the per-forge listing adapters."""

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag

from ..errors import MissingHref
from ..models import Entry, EntryKind, ForgeKind
from ..urls import raw_base


class ForgeAdapter(ABC):
    """Pulls child links of one kind out of a forge's listing page.

    Adapters hold no state, so a single instance serves the whole crawl.
    """

    kind: ForgeKind

    @abstractmethod
    def extract(self, kind: EntryKind, body: str, root: str) -> list[str]:
        """Return hrefs of the given kind in document order.

        Raises ListingNotFound when the page lacks the listing markup and
        MissingHref when a matched link has no href.
        """

    def entries(self, kind: EntryKind, body: str, root: str) -> list[Entry]:
        return [Entry(href, kind) for href in self.extract(kind, body, root)]

    def raw_base(self, current: str) -> str:
        return raw_base(self.kind, current)


def parse_html(body: str) -> BeautifulSoup:
    return BeautifulSoup(body, "html.parser")


def get_href(link: Tag) -> str:
    href = link.get("href")
    if href is None:
        raise MissingHref(_describe(link))
    return href


def _describe(tag: Tag) -> str:
    classes = " ".join(tag.get("class", []))
    text = tag.get_text(strip=True)
    desc = f"<{tag.name} class={classes!r}>" if classes else f"<{tag.name}>"
    return f"{desc} {text!r}" if text else desc
