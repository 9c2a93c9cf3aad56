import sys

from loguru import logger

from common.config import config

_sink_id: int | None = None


def configure_logging(level: str = config.log_level, fmt: str = config.log_format) -> None:
    """Install (or replace) the stderr sink used by the client and scripts."""
    global _sink_id
    if _sink_id is None:
        logger.remove()
    else:
        logger.remove(_sink_id)
    _sink_id = logger.add(sys.stderr, format=fmt, level=level.upper(), colorize=True)


configure_logging()


def get_logger(name: str | None = None):
    return logger.bind(name=name) if name else logger
