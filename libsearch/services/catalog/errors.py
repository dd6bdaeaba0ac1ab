from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog search failures."""


class ValidationError(CatalogError):
    """The inbound search request is unusable (e.g. empty query)."""


class FetchError(CatalogError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"fetch failed for {url}: {reason}")
        self.url = url
        self.reason = reason


class ExtractionError(CatalogError):
    """A catalog page embedded data in an unexpected shape."""
