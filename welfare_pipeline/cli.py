from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import PipelineConfig
from .exceptions import NavigationError
from .fetchers import PlaywrightFetcher, RequestsFetcher
from .logging_utils import setup_logging
from .pipeline import run_catalog


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = PipelineConfig()
    parser = argparse.ArgumentParser(
        description="Scrape the welfare scheme listing and its detail pages into a JSON catalog."
    )
    parser.add_argument("--start-url", type=str, default=defaults.start_url)
    parser.add_argument("--output-dir", type=Path, default=defaults.output_dir)
    parser.add_argument("--output-filename", type=str, default=defaults.output_filename)
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument(
        "--fetcher",
        choices=["playwright", "requests"],
        default="playwright",
        help="playwright renders pages in Chromium; requests fetches static HTML only.",
    )
    parser.add_argument("--headful", action="store_true", help="Run browser with UI")
    parser.add_argument("--navigation-timeout-ms", type=int, default=defaults.navigation_timeout_ms)
    parser.add_argument("--listing-retries", type=int, default=defaults.listing_retries)
    return parser


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    return PipelineConfig(
        start_url=args.start_url,
        output_dir=args.output_dir,
        output_filename=args.output_filename,
        navigation_timeout_ms=max(1_000, int(args.navigation_timeout_ms)),
        http_timeout_seconds=max(1, int(args.navigation_timeout_ms) // 1000),
        listing_retries=max(1, int(args.listing_retries)),
        headless=not args.headful,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    config = config_from_args(args)
    config.ensure_directories()
    setup_logging(config.pipeline_log_file, level=args.log_level)

    fetcher_cls = PlaywrightFetcher if args.fetcher == "playwright" else RequestsFetcher
    try:
        with fetcher_cls(config) as fetcher:
            catalog = run_catalog(config, fetcher)
    except NavigationError as exc:
        LOGGER.error("Listing page could not be loaded, nothing to crawl: %s", exc)
        raise SystemExit(1) from exc

    LOGGER.info(
        "Done: %s sections, %s schemes -> %s",
        len(catalog),
        sum(len(section.schemes) for section in catalog),
        config.output_json.as_posix(),
    )


if __name__ == "__main__":
    main()
