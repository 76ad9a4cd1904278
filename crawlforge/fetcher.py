"""HTTP fetching of listing pages using httpx, with optional Cachetta caching."""

import hashlib
import logging
import time
from datetime import timedelta
from pathlib import Path

import httpx
from cachetta import Cachetta

from .errors import FetchError
from .settings import get_settings

logger = logging.getLogger(__name__)

BACKOFF_FACTOR = 1.5

# Transport failures worth another attempt
_TRANSIENT_ERRORS = (
    httpx.ConnectError,
    httpx.RemoteProtocolError,
    httpx.ReadError,
    httpx.TimeoutException,
)


class _RetryableError(Exception):
    pass


class ListingFetcher:
    """Blocking GET of listing pages, returning the body text.

    Server errors and dropped connections are retried with backoff; anything
    else that isn't a 2xx raises FetchError. With use_cache, successful bodies
    are kept on disk keyed by URL. Failures are never cached.
    """

    def __init__(
        self,
        cache_dir: Path | None = None,
        use_cache: bool = False,
        skip_cache: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        settings = get_settings()
        self._client = httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
            transport=transport,
        )
        self.max_retries = max(1, settings.max_retries)

        # Pure fetch function -- no retry logic. Exceptions propagate (not cached).
        def _do_fetch(url):
            resp = self._client.get(url)
            if resp.status_code >= 500:
                raise _RetryableError(f"HTTP {resp.status_code}")
            if 200 <= resp.status_code < 300:
                return {"status": resp.status_code, "url": str(resp.url), "body": resp.text}
            raise FetchError(url, f"HTTP {resp.status_code}")

        if use_cache:
            cache_dir = Path(cache_dir or settings.cache_dir)

            def _cache_path(url):
                key = hashlib.sha256(url.encode()).hexdigest()[:16]
                return cache_dir / f"{key}.json"

            cache = Cachetta(path=_cache_path, duration=timedelta(days=settings.cache_days))
            if skip_cache:
                cache = cache.copy(read=False)
            self._fetch_page = cache(_do_fetch)
        else:
            self._fetch_page = _do_fetch

    def fetch(self, url: str) -> str:
        """Fetch a listing page body. Raises FetchError on failure."""
        reason = ""
        for attempt in range(self.max_retries):
            try:
                return self._fetch_page(url)["body"]
            except _RetryableError as e:
                reason = str(e)
            except _TRANSIENT_ERRORS as e:
                reason = f"{type(e).__name__}: {e}"
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise FetchError(url, str(e)) from e

            if attempt + 1 < self.max_retries:
                logger.warning(
                    "Fetching %s failed (%s), retrying (%d/%d)",
                    url, reason, attempt + 1, self.max_retries,
                )
                time.sleep(BACKOFF_FACTOR**attempt)

        raise FetchError(url, f"{reason}, gave up after {self.max_retries} attempts")

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

