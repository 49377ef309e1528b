from __future__ import annotations

import logging
from typing import Protocol

import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import PipelineConfig
from .document import Document
from .exceptions import NavigationError


LOGGER = logging.getLogger(__name__)


class Fetcher(Protocol):
    def load(self, url: str, *, purpose: str = "detail") -> Document:
        ...


class RequestsFetcher:
    """Fetches static HTML with a single reused requests session."""

    def __init__(self, config: PipelineConfig, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})

    def __enter__(self) -> "RequestsFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def load(self, url: str, *, purpose: str = "detail") -> Document:
        LOGGER.debug("GET %s (%s)", url, purpose)
        try:
            response = self.session.get(url, timeout=self.config.http_timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NavigationError(url, str(exc)) from exc

        # Without a charset requests decodes text/html as ISO-8859-1.
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = response.apparent_encoding or response.encoding
        html = response.text
        if not html.strip():
            raise NavigationError(url, "empty response")
        return Document.from_html(html, url=response.url or url)


class PlaywrightFetcher:
    """Renders pages in headless Chromium, reusing one page for every load."""

    def __init__(self, config: PipelineConfig) -> None:
        self.config = config
        self._playwright = None
        self._browser = None
        self._page = None

    def __enter__(self) -> "PlaywrightFetcher":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def open(self) -> None:
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=self.config.headless)
            context = self._browser.new_context(user_agent=self.config.user_agent)
            self._page = context.new_page()
        except BaseException:
            self.close()
            raise
        LOGGER.info("Chromium started (headless=%s)", self.config.headless)

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
        self._page = None

    def load(self, url: str, *, purpose: str = "detail") -> Document:
        if self._page is None:
            raise RuntimeError("PlaywrightFetcher.load() called before open()")

        wait_until = self.config.wait_until_for(purpose)
        try:
            response = self._page.goto(
                url,
                wait_until=wait_until,
                timeout=self.config.navigation_timeout_ms,
            )
            if response is not None and not response.ok:
                raise NavigationError(url, f"HTTP {response.status}")
            html = self._page.content()
        except PlaywrightError as exc:
            raise NavigationError(url, str(exc)) from exc

        return Document.from_html(html, url=self._page.url or url)
