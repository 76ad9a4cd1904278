"""GitHub repository browser listings."""

import re

from ..errors import ListingNotFound
from ..models import EntryKind, ForgeKind
from .base import ForgeAdapter, get_href, parse_html

CONTAINER_CLASS = "repository-content"
ROW_CLASS = "js-navigation-item"
LINK_CLASS = "js-navigation-open"
DIRECTORY_ICON_CLASS = "octicon-file-directory"
FILE_ICON_CLASS = "octicon-file"

# Raw content paths are the blob paths minus the "blob" segment:
# /owner/repo/blob/master/README.md -> /owner/repo/master/README.md
BLOB_SEGMENT_INDEX = 3
_BLOB_SEGMENT = re.compile(r"(^|/)blob/")


def to_raw_path(href: str) -> str:
    segments = href.split("/")
    # Tree links are absolute: "", owner, repo, "blob", ref, ...
    if href.startswith("/") and segments[BLOB_SEGMENT_INDEX:BLOB_SEGMENT_INDEX + 1] == ["blob"]:
        del segments[BLOB_SEGMENT_INDEX]
        return "/".join(segments)
    return _BLOB_SEGMENT.sub(r"\1", href, count=1)


class GitHubAdapter(ForgeAdapter):
    """Scrapes the file table of a github.com tree page.

    Directories and files are told apart by the octicon in each row; raw
    files share the file icon and only differ in how the href is rewritten.
    """

    kind = ForgeKind.GITHUB

    def extract(self, kind: EntryKind, body: str, root: str) -> list[str]:
        soup = parse_html(body)
        container = soup.find(class_=CONTAINER_CLASS)
        if container is None:
            raise ListingNotFound(CONTAINER_CLASS)

        icon_class = DIRECTORY_ICON_CLASS if kind is EntryKind.DIRECTORY else FILE_ICON_CLASS

        hrefs = []
        for child in container.find_all(recursive=False):
            for row in child.find_all(class_=ROW_CLASS):
                if row.find("svg", class_=icon_class) is None:
                    continue
                for link in row.find_all("a", class_=LINK_CLASS):
                    hrefs.append(get_href(link))

        if kind is EntryKind.RAW_FILE:
            return [to_raw_path(href) for href in hrefs]
        return hrefs
