"""Application configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .quotes import Quotes

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=logging.INFO)
logging.getLogger("discord.http").setLevel(logging.WARNING)
logging.getLogger("aiohttp").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

logger.info("Loading configuration...")
_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
quotes = Quotes(_RAW_CONFIG)

logger.info(
    "url: %s, delay: %ds, fetch timeout: %ss",
    quotes.SOURCE_URL,
    quotes.TTL,
    quotes.FETCH_TIMEOUT,
)


class Config:
    core = core
    quotes = quotes


__all__ = ["core", "quotes", "Config"]
