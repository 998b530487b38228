"""
Slash commands offered alongside the ``[]says`` text prefix.

``/says`` mirrors the prefix invocation and ``/help`` repeats the help text.
:func:`setup` attaches both cogs while the bot is starting up.
"""

from __future__ import annotations

import logging
from typing import Sequence, Type

from discord.ext import commands as commands_ext

from .handlers.help import Help
from .handlers.says import Says

logger = logging.getLogger(__name__)

COGS: tuple[Type[commands_ext.Cog], ...] = (Help, Says)


async def setup(
    bot: commands_ext.Bot, cogs: Sequence[Type[commands_ext.Cog]] = COGS
) -> list[str]:
    """Attach ``cogs`` that ``bot`` does not have yet and return their names."""

    added: list[str] = []
    for cog_cls in cogs:
        if bot.get_cog(cog_cls.__name__) is not None:
            continue
        await bot.add_cog(cog_cls(bot))
        added.append(cog_cls.__name__)

    logger.info("Registered %d command cog(s): %s", len(added), ", ".join(added) or "none new")
    return added


__all__ = ["COGS", "setup"]
