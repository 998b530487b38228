from __future__ import annotations

import discord
from discord import app_commands
from discord.ext import commands

from ..prefix import HELP_TEXT


class Help(commands.Cog):
    """Explain how to invoke the bot."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="help", description="Explain how to get a quote.")
    async def help(self, interaction: discord.Interaction) -> None:
        """
        Send the introduction text plus the registered slash commands.
        """

        command_names = sorted(cmd.name for cmd in self.bot.tree.get_commands())
        listing = ", ".join(f"/{name}" for name in command_names) or "None registered"
        await interaction.response.send_message(
            f"{HELP_TEXT}\nSlash commands: {listing}", ephemeral=True
        )
