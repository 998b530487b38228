"""Exceptions raised by the quote cache and parser."""

from __future__ import annotations


class QuoteError(Exception):
    """Base class for quote cache failures."""


class MalformedDocument(QuoteError):
    """The remote document is not a JSON object of years at the top level."""


class FetchFailure(QuoteError):
    """The remote document could not be retrieved."""


class EmptyCache(QuoteError):
    """No snapshot has ever been loaded successfully."""

    def __init__(self, message: str = "Cache miss!") -> None:
        super().__init__(message)


class CacheInitError(QuoteError):
    """The first cache population failed, leaving nothing to serve."""


__all__ = [
    "QuoteError",
    "MalformedDocument",
    "FetchFailure",
    "EmptyCache",
    "CacheInitError",
]
