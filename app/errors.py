from __future__ import annotations


class CatalogError(Exception):
    """Base class for failures that leave the catalog without data."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(CatalogError):
    """The CSV source could not be read (network, HTTP status, missing file)."""


class ParseError(CatalogError):
    """The CSV text is unusable (undecodable bytes, no header row)."""
