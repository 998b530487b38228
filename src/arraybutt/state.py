"""Per-bot state built during startup and owned by the bot instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Pattern

from .quotes import QuoteCache


@dataclass
class BotState:
    prefix: Pattern[str]
    cache: QuoteCache
