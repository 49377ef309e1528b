"""Errors raised by the welfare scheme pipeline."""

from __future__ import annotations


class WelfarePipelineError(Exception):
    """Base class for pipeline errors."""


class NavigationError(WelfarePipelineError):
    """A page could not be fetched (network fault, timeout or HTTP error)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to navigate to {url}: {reason}")
