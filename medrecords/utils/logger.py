"""Logging setup for the records client.

Every module takes its logger from here:
    from medrecords.utils.logger import get_logger
    logger = get_logger(__name__)

The level comes from MEDREC_LOG_LEVEL. `main()` calls `setup_logging`
explicitly; library use falls back to it on the first `get_logger` call.
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("MEDREC_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
