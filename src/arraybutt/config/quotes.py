import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_REQ_DELAY_MS = 1000 * 60 * 30
DEFAULT_FETCH_TIMEOUT = 20.0


def _parse_delay(raw: object) -> int:
    """Parse a refresh delay in milliseconds, falling back to the default."""

    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        logger.warning(
            "Invalid refresh delay %r; using default of %d ms", raw, DEFAULT_REQ_DELAY_MS
        )
        return DEFAULT_REQ_DELAY_MS
    if value < 0:
        logger.warning(
            "Negative refresh delay %d; using default of %d ms", value, DEFAULT_REQ_DELAY_MS
        )
        return DEFAULT_REQ_DELAY_MS
    return value


class Quotes:
    def __init__(self, config: dict | None = None) -> None:
        quotes_cfg = (config or {}).get("arraybutt", {}).get("quotes", {})

        self.SOURCE_URL: str | None = quotes_cfg.get("source_url") or os.getenv("BOT_URL")
        self.REQUEST_DELAY_MS: int = _parse_delay(
            quotes_cfg.get("request_delay_ms", os.getenv("BOT_REQ_DELAY", DEFAULT_REQ_DELAY_MS))
        )
        self.FETCH_TIMEOUT: float = float(
            quotes_cfg.get("fetch_timeout", os.getenv("BOT_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT))
        )

        if not self.SOURCE_URL:
            raise ValueError("Missing environment variables: BOT_URL")

    @property
    def TTL(self) -> float:
        """Refresh delay in seconds."""

        return self.REQUEST_DELAY_MS / 1000
