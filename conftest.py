"""Shared fixtures: recorded forge listings and builders for small fake ones."""

from pathlib import Path

import httpx
import pytest

from crawlforge.settings import get_settings

FIXTURES_DIR = Path(__file__).parent / "tests" / "fixtures"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; re-read them for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def github_listing() -> str:
    """github.com/tompreston/sup at master: 2 directories, 5 files."""
    return (FIXTURES_DIR / "github_listing.html").read_text()


@pytest.fixture
def opengrok_listing() -> str:
    """OpenGrok /xref/AGL/metalayers/: 12 directories and the file foofile."""
    return (FIXTURES_DIR / "opengrok_listing.html").read_text()


def _github_row(href: str, icon: str) -> str:
    name = href.rstrip("/").rsplit("/", 1)[-1]
    return (
        '<div role="row" class="Box-row py-2 d-flex js-navigation-item">'
        f'<div role="gridcell"><svg height="16" class="octicon {icon}"></svg></div>'
        '<div role="rowheader"><span class="css-truncate">'
        f'<a class="js-navigation-open link-gray-dark" title="{name}" href="{href}">{name}</a>'
        "</span></div></div>"
    )


@pytest.fixture
def github_page():
    """Build a GitHub tree page from directory and blob hrefs."""

    def build(dirs=(), files=()):
        rows = [_github_row(href, "octicon-file-directory") for href in dirs]
        rows += [_github_row(href, "octicon-file") for href in files]
        return (
            "<html><body>"
            '<div class="repository-content"><div class="js-details-container">'
            f'<div class="js-navigation-container">{"".join(rows)}</div>'
            "</div></div></body></html>"
        )

    return build


@pytest.fixture
def opengrok_page():
    """Build an OpenGrok xref listing; hrefs ending in / are directories."""

    def build(hrefs=()):
        rows = ['<tr><td><p class="r"/></td><td><b><a href="..">..</a></b></td><td></td></tr>']
        for href in hrefs:
            name = href.rstrip("/")
            rows.append(
                f'<tr><td><p class="r"/></td><td><a href="{href}"><b>{name}</b></a></td>'
                f'<td class="q"><a href="/history/{name}" title="History">H</a></td></tr>'
            )
        return (
            '<html><body><table id="dirlist"><thead><tr><th></th><th>Name</th></tr></thead>'
            f'<tbody>{"".join(rows)}</tbody></table></body></html>'
        )

    return build


@pytest.fixture
def site():
    """A fake forge: register url -> body in the dict, then use transport."""
    pages: dict[str, str] = {}
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested.append(url)
        if url in pages:
            return httpx.Response(200, text=pages[url])
        return httpx.Response(404, text="not found")

    class Site:
        def __init__(self):
            self.pages = pages
            self.requested = requested
            self.transport = httpx.MockTransport(handler)

    return Site()
