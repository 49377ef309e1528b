"""Extraction pipeline for the Jammu & Kashmir social welfare scheme catalog."""

from .config import PipelineConfig
from .detail import extract_detail
from .listing import parse_listing
from .pipeline import SchemeCatalogPipeline
from .recovery import DetailCrawl
from .text_cleaning import clean_text

__all__ = [
    "PipelineConfig",
    "SchemeCatalogPipeline",
    "DetailCrawl",
    "clean_text",
    "extract_detail",
    "parse_listing",
]
