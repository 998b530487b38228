"""Quote cache, parser and random selection."""

from .cache import QuoteCache, fetch_document
from .errors import (
    CacheInitError,
    EmptyCache,
    FetchFailure,
    MalformedDocument,
    QuoteError,
)
from .model import Quote, QuoteCollection, QuoteMonth, QuoteYear
from .parser import loads_quotes, parse_quotes
from .selector import select_random

__all__ = [
    "QuoteCache",
    "fetch_document",
    "CacheInitError",
    "EmptyCache",
    "FetchFailure",
    "MalformedDocument",
    "QuoteError",
    "Quote",
    "QuoteCollection",
    "QuoteMonth",
    "QuoteYear",
    "loads_quotes",
    "parse_quotes",
    "select_random",
]
