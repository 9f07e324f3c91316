import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING, name: str = "opcalc") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove old handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_level=True,
        show_path=level <= logging.DEBUG,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger
