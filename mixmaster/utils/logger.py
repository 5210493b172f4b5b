import logging
from typing import Optional

from rich.logging import RichHandler

from mixmaster.config import config

LOGGER_NAME = "mixmaster"

logger = logging.getLogger(LOGGER_NAME)

def _console_handler() -> logging.Handler:
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler

def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger; a file handler is only attached when `log_file` is given"""
    logger.setLevel((level or config.LOG_LEVEL).upper())
    logger.propagate = False
    
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    
    logger.addHandler(_console_handler())
    
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
    
    return logger

# Console only until a command asks for the log file
setup_logger()
