import discord

import logging

logger = logging.getLogger(__name__)

async def handle(client: discord.Client):
    """Log the authenticated identity once the gateway is ready."""
    logger.info("Authenticated successfully as %s (ID: %s)", client.user.name, client.user.id)
