import logging

from finmitra.core.config import settings

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger under the finmitra namespace, one stderr handler, level from LOG_LEVEL."""
    logger = logging.getLogger(f"finmitra.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        level = logging.getLevelName((settings.LOG_LEVEL or "INFO").upper())
        # unknown names come back as "Level X" strings
        logger.setLevel(level if isinstance(level, int) else logging.INFO)
    return logger
