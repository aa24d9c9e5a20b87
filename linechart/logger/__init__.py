"""
Logger module for linechart

Every component takes a Logger so callers can drop in their own
implementation; ConsoleLogger is the default.

Usage:
    from linechart.logger import ConsoleLogger

    logger = ConsoleLogger(name="renderer")
    logger.info("Render completed", size_bytes=1234)
"""

from .interface import Logger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "ConsoleLogger",
]
