"""Logging setup."""

from log_config.logger import configure_logging, get_logger, log_performance, logger

__all__ = ["logger", "configure_logging", "get_logger", "log_performance"]
