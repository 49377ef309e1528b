from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import PipelineConfig
from .document import Document
from .exceptions import NavigationError
from .fetchers import Fetcher
from .io_utils import write_catalog
from .listing import assign_ids, filter_sections, new_scheme_id, parse_listing
from .models import Section
from .recovery import CrawlState, DetailCrawl
from .text_cleaning import clean_text


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CrawlSummary:
    sections: int = 0
    schemes: int = 0
    succeeded: int = 0
    failed: int = 0
    failed_urls: List[str] = field(default_factory=list)


class SchemeCatalogPipeline:
    def __init__(
        self,
        config: PipelineConfig,
        fetcher: Fetcher,
        id_factory: Callable[[], str] = new_scheme_id,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.id_factory = id_factory
        self.summary = CrawlSummary()

    def run(self) -> List[Section]:
        self.summary = CrawlSummary()
        LOGGER.info("Loading listing page %s", self.config.start_url)
        listing = self._load_listing()

        sections = filter_sections(parse_listing(listing))
        sections = assign_ids(sections, self.id_factory)
        self.summary.sections = len(sections)
        self.summary.schemes = sum(len(section.schemes) for section in sections)
        LOGGER.info(
            "Crawling details: sections=%s, schemes=%s",
            self.summary.sections,
            self.summary.schemes,
        )

        catalog: list[Section] = []
        for section in sections:
            title = clean_text(section.title)
            schemes = []
            for scheme in section.schemes:
                crawl = DetailCrawl(scheme)
                crawled = crawl.run(self.fetcher)
                self._record(crawl)
                schemes.append(replace(crawled, name=clean_text(crawled.name)))
            catalog.append(Section(title=title, schemes=tuple(schemes)))

        LOGGER.info(
            "Crawl finished: schemes=%s, succeeded=%s, failed=%s",
            self.summary.schemes,
            self.summary.succeeded,
            self.summary.failed,
        )
        return catalog

    def _load_listing(self) -> Document:
        max_wait = self.config.listing_retry_max_wait_seconds

        @retry(
            stop=stop_after_attempt(self.config.listing_retries),
            wait=wait_exponential(multiplier=1, min=min(2, max_wait), max=max_wait),
            retry=retry_if_exception_type(NavigationError),
            reraise=True,
        )
        def load() -> Document:
            try:
                return self.fetcher.load(self.config.start_url, purpose="listing")
            except NavigationError as exc:
                LOGGER.warning("Listing page failed to load: %s", exc.reason)
                raise

        return load()

    def _record(self, crawl: DetailCrawl) -> None:
        if crawl.state is CrawlState.SUCCEEDED:
            self.summary.succeeded += 1
            return
        self.summary.failed += 1
        self.summary.failed_urls.append(crawl.scheme.url)


def run_catalog(
    config: PipelineConfig,
    fetcher: Fetcher,
    id_factory: Callable[[], str] = new_scheme_id,
) -> List[Section]:
    pipeline = SchemeCatalogPipeline(config, fetcher, id_factory=id_factory)
    catalog = pipeline.run()
    write_catalog(config.output_json, catalog)
    return catalog
