from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .detail import extract_detail
from .exceptions import NavigationError
from .fetchers import Fetcher
from .models import DetailResult, Scheme


LOGGER = logging.getLogger(__name__)


class CrawlState(str, Enum):
    PENDING = "pending"
    FETCHING = "fetching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class DetailCrawl:
    """Fetches and extracts one scheme's detail page without letting a fault escape.

    A crawl runs once: PENDING -> FETCHING -> SUCCEEDED or FAILED. A failed
    crawl still yields the scheme, with error markers in place of details and
    criteria, and is never retried.
    """

    scheme: Scheme
    state: CrawlState = CrawlState.PENDING
    error: str = ""

    @property
    def finished(self) -> bool:
        return self.state in (CrawlState.SUCCEEDED, CrawlState.FAILED)

    def run(self, fetcher: Fetcher) -> Scheme:
        if self.state is not CrawlState.PENDING:
            raise RuntimeError(f"Detail crawl for {self.scheme.url} already {self.state.value}")

        self.state = CrawlState.FETCHING
        try:
            document = fetcher.load(self.scheme.url, purpose="detail")
            result = extract_detail(document)
        except NavigationError as exc:
            LOGGER.error("Failed to navigate to %s: %s", self.scheme.url, exc.reason)
            return self._fail(str(exc))
        except Exception as exc:  # noqa: BLE001 - per-scheme fault isolation
            LOGGER.exception("Unexpected failure while crawling %s", self.scheme.url)
            return self._fail(str(exc))

        self.state = CrawlState.SUCCEEDED
        self.scheme = replace(self.scheme, details=result.details, criteria=result.criteria)
        return self.scheme

    def _fail(self, error: str) -> Scheme:
        failed = DetailResult.failed()
        self.state = CrawlState.FAILED
        self.error = error
        self.scheme = replace(self.scheme, details=failed.details, criteria=failed.criteria)
        return self.scheme
