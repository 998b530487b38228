"""Text-prefix invocation matching (``[]says`` or a mention of the bot)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern

HELP_TEXT = """__Introducing... **ArrayButt!**__
A revolution in philosophy!
Invoke me with `[]says [date|query]`"""


@dataclass(frozen=True)
class Invocation:
    """A matched prefix invocation and its optional trailing query."""

    query: Optional[str] = None


def build_prefix_pattern(bot_user_id: int) -> Pattern[str]:
    return re.compile(rf"(?:\[]says|<@!?{int(bot_user_id)}>)\s*(?:(.*)\s*)?")


def match_invocation(pattern: Pattern[str], content: str) -> Invocation | None:
    """Return the invocation found in ``content``, or ``None`` if there is none."""

    match = pattern.search(content or "")
    if match is None:
        return None
    query = (match.group(1) or "").strip()
    return Invocation(query=query or None)


__all__ = ["HELP_TEXT", "Invocation", "build_prefix_pattern", "match_invocation"]
