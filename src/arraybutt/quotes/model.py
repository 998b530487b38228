"""
Quote collection model
======================
The collection is a two-level mapping ``year -> month -> quotes``. Every
:class:`Quote` carries its own year and month labels so a flattened view
keeps the attribution without a back-reference into the hierarchy.

``QuoteCollection.size`` is computed once when the collection is built and
never mutated afterwards. Refreshes replace the whole collection instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Tuple


@dataclass(frozen=True)
class Quote:
    """A single quote attributed to a year/month bucket."""

    year: str
    month: str
    text: str


@dataclass(frozen=True)
class QuoteMonth:
    quotes: Tuple[Quote, ...] = ()

    def __len__(self) -> int:
        return len(self.quotes)


@dataclass(frozen=True)
class QuoteYear:
    months: Dict[str, QuoteMonth] = field(default_factory=dict)

    def count(self) -> int:
        return sum(len(month) for month in self.months.values())


@dataclass(frozen=True)
class QuoteCollection:
    """Immutable snapshot of every parsed quote plus its precomputed total."""

    years: Dict[str, QuoteYear]
    size: int

    @classmethod
    def from_years(cls, years: Mapping[str, QuoteYear]) -> "QuoteCollection":
        """Build a collection from ``years``, computing ``size`` in one pass."""

        snapshot = dict(years)
        return cls(years=snapshot, size=sum(y.count() for y in snapshot.values()))

    @classmethod
    def empty(cls) -> "QuoteCollection":
        return cls(years={}, size=0)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Quote]:
        for year in self.years.values():
            for month in year.months.values():
                yield from month.quotes

    def flatten(self) -> List[Quote]:
        """Return every quote across all years and months (order not meaningful)."""

        return list(self)


__all__ = ["Quote", "QuoteMonth", "QuoteYear", "QuoteCollection"]
