from .logger import setup_logger, logger
from .retry import RetryConfig

__all__ = ["setup_logger", "logger", "RetryConfig"]
