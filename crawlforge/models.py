"""Data models and constants for forge crawling."""

from dataclasses import dataclass
from enum import Enum

GITHUB_RAW_BASE_URL = "https://raw.githubusercontent.com/"


class ForgeKind(str, Enum):
    """The forges we know how to crawl. Values are the accepted config names."""

    GITHUB = "github"
    OPENGROK = "opengrok"


class EntryKind(Enum):
    """What to pull out of a listing page.

    The same page is queried once per kind; each forge marks directories and
    raw-content links differently.
    """

    DIRECTORY = "directory"
    FILE = "file"
    RAW_FILE = "raw_file"


class TraversalOrder(Enum):
    DEPTH_FIRST = "depth-first"
    BREADTH_FIRST = "breadth-first"


@dataclass(frozen=True)
class Entry:
    """A child reference extracted from a listing, href possibly relative."""

    href: str
    kind: EntryKind


@dataclass(frozen=True)
class Listing:
    """One fetched directory page."""

    url: str
    body: str
