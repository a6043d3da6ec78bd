"""
Logging setup - rich console output plus an optional log file.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .config_loader import LoggingConfig

LOG_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the "gridsnake" logger.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        config: Logging settings (defaults to LoggingConfig())

    Returns:
        The package logger
    """
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    logger = logging.getLogger("gridsnake")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
