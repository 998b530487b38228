"""Discord embed rendering for quote payloads."""

from __future__ import annotations

import discord

from arraybutt.invocation import QuotePayload

EMBED_COLOUR = 0x2196F3
FOOTER_ICON_URL = "https://avatars1.githubusercontent.com/u/16021050?s=460&v=4"


def build_embed(payload: QuotePayload) -> discord.Embed:
    embed = discord.Embed(description=payload.text, colour=EMBED_COLOUR)
    embed.set_footer(text=payload.footer, icon_url=FOOTER_ICON_URL)
    return embed
