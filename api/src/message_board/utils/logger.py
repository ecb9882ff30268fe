import logging

from message_board.utils.config import get_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("message_board")


def configure_logging(level: str = None):
    """Set up root logging once, using LOG_LEVEL from configuration."""
    level_name = (level or get_config("LOG_LEVEL", "INFO") or "INFO").upper()
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level_name, logging.INFO))
    logger.setLevel(getattr(logging, level_name, logging.INFO))


def log(level: str, source: str, message: str, details: str = ""):
    entry = logger.getChild(source.lower())
    text = message[:500]
    if details:
        text = f"{text} | {details[:4000]}"
    entry.log(getattr(logging, level.upper(), logging.INFO), text)
