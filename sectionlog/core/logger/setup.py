"""
Console Logger Configuration.

Centralized setup for the loggers that back debugger sinks. Only console
handlers are installed: debugger output is ephemeral by nature.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import sys
from typing import Optional, TextIO

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .formatters import ColorFormatter

# =========================================================================== #
#                                LOGGER SETUP                                 #
# =========================================================================== #

# Marker attribute identifying handlers installed by Logger.setup
_OWNED_HANDLER_FLAG = "_sectionlog_owned"


class Logger:
    """
    Idempotent console logger factory.

    Repeated calls for the same name replace the handler installed by a
    previous call instead of stacking duplicates, so output is never doubled.
    """

    @staticmethod
    def setup(
        name: str = "sectionlog",
        level: str = "DEBUG",
        use_color: bool = True,
        stream: Optional[TextIO] = None,
        propagate: bool = False,
    ) -> logging.Logger:
        """
        Configures and returns a named console logger.

        Args:
            name: Logger name (dotted hierarchy as usual).
            level: Level name ('DEBUG', 'INFO', ...).
            use_color: Apply ANSI level colors to console output.
            stream: Target stream (defaults to stderr).
            propagate: Forward records to ancestor loggers.

        Returns:
            The configured `logging.Logger`.
        """
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        logger.propagate = propagate

        for handler in list(logger.handlers):
            if getattr(handler, _OWNED_HANDLER_FLAG, False):
                logger.removeHandler(handler)
                handler.close()

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(ColorFormatter(use_color=use_color))
        setattr(handler, _OWNED_HANDLER_FLAG, True)
        logger.addHandler(handler)

        return logger


def setup_logger(telemetry) -> logging.Logger:
    """Builds a console logger from a `TelemetryConfig` manifest."""
    return Logger.setup(
        name=telemetry.logger_name,
        level=telemetry.log_level,
        use_color=telemetry.use_color,
        propagate=telemetry.propagate,
    )
