"""
Console Formatters.

Level-aware ANSI coloring for terminal output. Colors come from `LogStyle`
so that every console surface of the package shares one palette.
"""

import logging

from .styles import LogStyle

_LEVEL_COLORS = {
    logging.DEBUG: LogStyle.DIM,
    logging.INFO: LogStyle.GREEN,
    logging.WARNING: LogStyle.YELLOW,
    logging.ERROR: LogStyle.RED,
    logging.CRITICAL: LogStyle.BOLD + LogStyle.RED,
}


class ColorFormatter(logging.Formatter):
    """
    Formatter that wraps the rendered record in the color of its level.

    When ``use_color`` is False the output is identical to the plain
    `logging.Formatter` output, which keeps captured logs free of escape codes.
    """

    DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
    DEFAULT_DATEFMT = "%H:%M:%S"

    def __init__(self, fmt=None, datefmt=None, use_color: bool = True):
        super().__init__(fmt or self.DEFAULT_FORMAT, datefmt or self.DEFAULT_DATEFMT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        rendered = super().format(record)
        if not self.use_color:
            return rendered

        color = _LEVEL_COLORS.get(record.levelno, "")
        if not color:
            return rendered
        return f"{color}{rendered}{LogStyle.RESET}"
