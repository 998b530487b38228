import logging

import discord

from arraybutt.commands.prefix import build_prefix_pattern
from arraybutt.config import quotes
from arraybutt.quotes import QuoteCache
from arraybutt.state import BotState

logger = logging.getLogger(__name__)


async def handle(client: discord.Client) -> BotState:
    """
    Build the invocation prefix and populate the quote cache.

    Raises :class:`~arraybutt.quotes.CacheInitError` when the first population
    fails so the bot never starts without quotes to serve.
    """

    logger.info("Building prefix pattern...")
    prefix = build_prefix_pattern(client.user.id)
    logger.info("Pattern built: %s", prefix.pattern)

    logger.info("Preparing quote cache...")
    cache = QuoteCache(
        quotes.SOURCE_URL,
        quotes.TTL,
        fetch_timeout=quotes.FETCH_TIMEOUT,
    )
    await cache.populate()

    logger.info("Bot initialization completed!")
    return BotState(prefix=prefix, cache=cache)
