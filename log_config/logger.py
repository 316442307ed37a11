"""Logging setup for PixelArt Studio using loguru.

Modules log through ``get_logger(__name__)`` at import time. Sinks are only
installed when the application starts (``configure_logging``), so importing
the packages from tests or tools never creates a ``logs`` directory.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_LOG_DIR = Path("logs")

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(log_dir: Path = DEFAULT_LOG_DIR, console_level: str = "INFO") -> Path:
    """Replace all sinks with the application's console and file sinks.

    Writes a rotating debug log ``pixelstudio_{time}.log`` and an error-only
    ``errors_{time}.log`` under ``log_dir``. File sinks are enqueued because
    the export worker logs from its own thread.

    Args:
        log_dir: Directory for log files, created if missing
        console_level: Minimum level shown on stderr

    Returns:
        The log directory
    """
    logger.remove()
    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT, colorize=True)

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "pixelstudio_{time}.log",
        rotation="50 MB",
        retention="10 days",
        level="DEBUG",
        format=FILE_FORMAT,
        enqueue=True,
    )
    logger.add(
        log_dir / "errors_{time}.log",
        rotation="10 MB",
        retention="30 days",
        level="ERROR",
        format=FILE_FORMAT,
        enqueue=True,
    )
    logger.debug(f"Logging to {log_dir.resolve()}")
    return log_dir


def get_logger(name: Optional[str] = None):
    """Get a logger instance with the given name.

    Args:
        name: Module name for the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


def log_performance(operation: str, duration_ms: float, threshold_ms: float = 100.0) -> None:
    """Debug-log how long ``operation`` took; warn above ``threshold_ms``."""
    if duration_ms > threshold_ms:
        logger.warning(f"Slow operation: {operation} took {duration_ms:.2f}ms (threshold: {threshold_ms}ms)")
    else:
        logger.debug(f"{operation} took {duration_ms:.2f}ms")


__all__ = ["DEFAULT_LOG_DIR", "configure_logging", "get_logger", "log_performance", "logger"]
