from __future__ import annotations

import discord
from discord import app_commands
from discord.ext import commands

from arraybutt.clients.embeds import build_embed
from arraybutt.invocation import QuotePayload, handle_invocation

UNSUPPORTED_QUERY_TEXT = "Date and text queries aren't supported yet."
UNAVAILABLE_TEXT = "No quotes are available right now. Try again later."
STARTING_TEXT = "Still waking up. Try again in a moment."


class Says(commands.Cog):
    """Slash-command twin of the ``[]says`` prefix."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="says", description="Share a random quote.")
    @app_commands.describe(query="Date or text to search for (not supported yet)")
    async def says(
        self, interaction: discord.Interaction, query: str | None = None
    ) -> None:
        state = getattr(self.bot, "state", None)
        if state is None:
            await interaction.response.send_message(STARTING_TEXT, ephemeral=True)
            return

        if query and query.strip():
            await interaction.response.send_message(UNSUPPORTED_QUERY_TEXT, ephemeral=True)
            return

        # A refresh may outlast the interaction acknowledgement window.
        await interaction.response.defer()

        async def _send(payload: QuotePayload) -> None:
            await interaction.followup.send(embed=build_embed(payload))

        payload = await handle_invocation(state.cache, None, _send)
        if payload is None:
            await interaction.followup.send(UNAVAILABLE_TEXT)
