"""
Logger configuration for pyoptic.
The library only logs at DEBUG level and installs no handler by itself.
"""
import logging

from rich.logging import RichHandler

LOGGER_NAME = "pyoptic"


def configure_logging(level: int = logging.DEBUG,
                      rich_output: bool = True) -> logging.Logger:
    """
    Attach a handler to the pyoptic logger, unless one is already there.
    Messages are printed through rich, or a plain stream handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler: logging.Handler = RichHandler(show_path=False) \
            if rich_output else logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
