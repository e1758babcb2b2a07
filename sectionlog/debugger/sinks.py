"""
Leveled Output Sinks.

A sink is any callable taking one finished message string. `Sinks` bundles
the four levels a debugger writes to and knows how to derive them from a
`logging.Logger` or from explicit callbacks.
"""

import logging
from typing import Callable, NamedTuple, Optional

Sink = Callable[[str], None]


def _discard(message: str) -> None:
    return None


class Sinks(NamedTuple):
    """Leveled sinks used by debugger sections."""

    info: Sink
    debug: Sink
    warning: Sink
    error: Sink

    @classmethod
    def from_logger(cls, logger: logging.Logger) -> "Sinks":
        """Binds every level to the matching method of `logger`."""
        return cls(
            info=logger.info,
            debug=logger.debug,
            warning=logger.warning,
            error=logger.error,
        )

    @classmethod
    def resolve(
        cls,
        logger: Optional[logging.Logger] = None,
        info: Optional[Sink] = None,
        debug: Optional[Sink] = None,
        warning: Optional[Sink] = None,
        error: Optional[Sink] = None,
    ) -> "Sinks":
        """
        Merges explicit callbacks with a logger backend.

        `info` and `debug` stand in for each other when only one is given,
        mirroring the single info/debug channel of explicit-callback setups.
        Remaining gaps come from `logger`; without a logger they discard.
        """
        base = cls.from_logger(logger) if logger is not None else cls(
            _discard, _discard, _discard, _discard
        )

        if info is None and debug is not None:
            info = debug
        if debug is None and info is not None:
            debug = info

        return cls(
            info=info if info is not None else base.info,
            debug=debug if debug is not None else base.debug,
            warning=warning if warning is not None else base.warning,
            error=error if error is not None else base.error,
        )
