"""
Invocation handling shared by prefix messages and the ``/says`` command.

The caller supplies ``send``, an async callable that delivers a
:class:`QuotePayload` through whatever Discord surface triggered the request.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .quotes import EmptyCache, Quote, QuoteCache, select_random

logger = logging.getLogger(__name__)

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class QuotePayload:
    """Display fields handed to the messaging layer."""

    text: str
    month: str
    year: str

    @property
    def footer(self) -> str:
        return f"Arraying, {self.month} {self.year}"


def month_name(label: str) -> str:
    """Map a ``"1"``..``"12"`` month label to its English name."""

    try:
        index = int(label)
    except (TypeError, ValueError):
        index = 0
    if 1 <= index <= len(MONTHS):
        return MONTHS[index - 1]
    logger.warning("Unknown month label %r; displaying it verbatim", label)
    return str(label)


def build_payload(quote: Quote) -> QuotePayload:
    return QuotePayload(text=quote.text, month=month_name(quote.month), year=quote.year)


async def handle_invocation(
    cache: QuoteCache,
    query: Optional[str],
    send: Callable[[QuotePayload], Awaitable[None]],
    *,
    rng: Optional[random.Random] = None,
) -> QuotePayload | None:
    """
    Answer one invocation and return the payload that was sent.

    A non-empty ``query`` is accepted but not acted on yet. ``None`` is
    returned when nothing was sent.
    """

    if query:
        logger.info("Query invocations are not supported yet: %r", query)
        return None

    try:
        quotes = await cache.get_quotes()
    except EmptyCache:
        logger.warning("Quote cache is empty; declining to respond")
        return None

    quote = select_random(quotes, rng)
    if quote is None:
        logger.warning("Quote cache holds no quotes; declining to respond")
        return None

    payload = build_payload(quote)
    await send(payload)
    return payload


__all__ = ["MONTHS", "QuotePayload", "month_name", "build_payload", "handle_invocation"]
