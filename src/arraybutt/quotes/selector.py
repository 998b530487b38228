"""Uniform random selection over a :class:`QuoteCollection`."""

from __future__ import annotations

import random
from typing import Optional

from .model import Quote, QuoteCollection


def select_random(
    collection: QuoteCollection, rng: Optional[random.Random] = None
) -> Optional[Quote]:
    """
    Draw one quote with probability ``1 / collection.size``.

    The hierarchy is flattened first so years and months are weighted by how
    many quotes they hold. Returns ``None`` for an empty collection.
    """

    if collection.size == 0:
        return None

    quotes = collection.flatten()
    index = (rng or random).randrange(len(quotes))
    return quotes[index]


__all__ = ["select_random"]
