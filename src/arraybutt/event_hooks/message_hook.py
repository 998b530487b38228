import logging

import discord

from arraybutt.clients.embeds import build_embed
from arraybutt.commands.prefix import HELP_TEXT, match_invocation
from arraybutt.invocation import QuotePayload, handle_invocation

logger = logging.getLogger(__name__)

async def handle(client: discord.Client, message: discord.Message):
    """Handle incoming Discord messages."""

    # 1) Never answer other bots (or ourselves)
    if message.author.bot:
        return

    state = getattr(client, "state", None)
    if state is None:
        logger.debug("Skipping message %s received before startup finished", message.id)
        return

    # 2) Direct messages without an invocation get the help text
    invocation = match_invocation(state.prefix, message.content)
    if invocation is None:
        if message.guild is None:
            try:
                await message.channel.send(HELP_TEXT)
            except discord.HTTPException as e:
                logger.error("Failed to send message: %s", e)
        return

    logger.info(
        "Invocation from %s in channel %s (query=%r)",
        getattr(message.author, "id", "unknown"),
        getattr(message.channel, "id", "unknown"),
        invocation.query,
    )

    async def _send(payload: QuotePayload) -> None:
        await message.channel.send(embed=build_embed(payload))

    # 3) Reply with a random quote
    try:
        await handle_invocation(state.cache, invocation.query, _send)
    except discord.HTTPException as e:
        logger.error("Failed to send message: %s", e)
