"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands as discord_commands

from arraybutt import commands as ab_commands
from arraybutt.config import core
from arraybutt.event_hooks import message_hook, ready_hook, startup_hook
from arraybutt.quotes import CacheInitError
from arraybutt.state import BotState

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.default()
intents.message_content = True


class ArrayButtBot(discord_commands.Bot):
    """Quote bot holding its prefix pattern and quote cache as explicit state."""

    def __init__(self) -> None:
        super().__init__(command_prefix=discord_commands.when_mentioned, intents=intents)
        self.state: BotState | None = None

    async def setup_hook(self) -> None:
        """Register slash commands, populate the quote cache and sync commands."""

        await ab_commands.setup(self)

        self.state = await startup_hook.handle(self)

        try:
            synced = await self.tree.sync()
            logger.info("Synced %d application command(s)", len(synced))
        except Exception:
            logger.exception("Failed to sync application commands")


bot = ArrayButtBot()


@bot.event
async def on_ready() -> None:
    await ready_hook.handle(bot)


@bot.event
async def on_message(message: discord.Message) -> None:
    await message_hook.handle(bot, message)


def run() -> int:
    """Start the Discord bot and return a process exit status."""

    if not core.DISCORD_API_TOKEN:
        logger.error("No BOT_TOKEN configured. Cannot run client.")
        return 1

    logger.info("Initializing client...")
    try:
        bot.run(core.DISCORD_API_TOKEN, log_handler=None)
    except CacheInitError as exc:
        logger.critical("%s", exc)
        return 1
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
        return 1
    return 0
