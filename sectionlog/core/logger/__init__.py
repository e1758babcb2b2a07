"""
Logging Package.

Divider vocabulary, console formatting and logger setup.
"""

from .formatters import ColorFormatter
from .setup import Logger, setup_logger
from .styles import DividerType, LogStyle

__all__ = [
    "LogStyle",
    "DividerType",
    "ColorFormatter",
    "Logger",
    "setup_logger",
]
