"""
Parse the remote quote document into a :class:`QuoteCollection`.

Expected shape::

    {"2018": {"1": ["quote", "quote"], "2": [...]}, "2019": {...}}

Only the top level is strict. A year that is not an object, a month that is
not an array, or an array element that is not a string is skipped on its own
while the rest of the document is still collected.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Tuple

from .errors import MalformedDocument
from .model import Quote, QuoteCollection, QuoteMonth, QuoteYear

logger = logging.getLogger(__name__)


def parse_quotes(document: Any) -> Tuple[QuoteCollection, int]:
    """Return the collection built from ``document`` and its quote count."""

    if not isinstance(document, dict):
        raise MalformedDocument(
            f"expected a JSON object at the top level, got {type(document).__name__}"
        )

    years: Dict[str, QuoteYear] = {}
    skipped = 0
    for year_key, months_dto in document.items():
        if not isinstance(months_dto, dict):
            skipped += 1
            continue

        months: Dict[str, QuoteMonth] = {}
        for month_key, quotes_dto in months_dto.items():
            if not isinstance(quotes_dto, list):
                skipped += 1
                continue

            quotes: List[Quote] = []
            for quote_dto in quotes_dto:
                if not isinstance(quote_dto, str):
                    skipped += 1
                    continue
                quotes.append(Quote(year=year_key, month=month_key, text=quote_dto))
            months[month_key] = QuoteMonth(tuple(quotes))

        years[year_key] = QuoteYear(months)

    if skipped:
        logger.debug("Skipped %d malformed node(s) while parsing quotes", skipped)

    collection = QuoteCollection.from_years(years)
    return collection, collection.size


def loads_quotes(raw: bytes | str) -> Tuple[QuoteCollection, int]:
    """Decode JSON text and parse it; undecodable text is a malformed document."""

    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedDocument(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise MalformedDocument("JSON nested too deeply to decode") from exc
    return parse_quotes(document)


__all__ = ["parse_quotes", "loads_quotes"]
