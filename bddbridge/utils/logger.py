"""Logging setup shared by the CLI and the preview host"""
import logging
import sys
from typing import Optional

from colorama import Fore, Style, init as colorama_init

colorama_init()

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name for console output"""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno, '')
        original = record.levelname
        record.levelname = f"{color}{original}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class ConsoleHandler(logging.StreamHandler):
    """Writes to the current sys.stderr, even if it was replaced after setup"""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def setup_logger(name: str, level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Return a configured logger, adding handlers only once per name"""
    logger = logging.getLogger(name)

    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        console = ConsoleHandler()
        console.setFormatter(ColoredFormatter(LOG_FORMAT))
        logger.addHandler(console)
        logger.propagate = False
        if not level:
            logger.setLevel(logging.INFO)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
