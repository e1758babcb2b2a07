"""
Debugger Sections.

A section is a named scope of output bounded by opening and closing banners.
Every line it writes carries the section name in brackets, indented by the
section's nesting depth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..core.logger.styles import DividerType, LogStyle

if TYPE_CHECKING:
    from .debugger import Debugger


class Section:
    """
    Named, prefixed view over the sinks of its owning `Debugger`.

    Sections are created through `Debugger.create`, never directly by callers.
    Leveled methods return the section itself so calls can be chained:

        >>> section.info("loading").warning("cache cold")  # doctest: +SKIP
    """

    def __init__(
        self,
        debugger: "Debugger",
        name: str,
        divider_type: DividerType,
        indentation: int = 0,
    ):
        self.name = name
        self.divider_type = divider_type
        self.indentation = max(0, indentation)
        self._debugger = debugger

    def __repr__(self) -> str:
        return (
            f"Section(name={self.name!r}, divider_type={self.divider_type.name}, "
            f"indentation={self.indentation})"
        )

    # --- Rendering ---

    @property
    def prefix(self) -> str:
        """Indentation followed by the bracketed section name."""
        indent = self._debugger.config.section.indent_unit * self.indentation
        return f"{indent}[{self.name}] "

    def _emit(self, sink: Callable[[str], None], message: str) -> "Section":
        sink(f"{self.prefix}{message}")
        return self

    def open(self) -> None:
        """Writes the opening divider and, if enabled, the beginning banner."""
        self.debug(self.divider_type.divider)
        if self._debugger.config.section.banners:
            self.debug(LogStyle.BEGIN_BANNER)

    def close(self) -> None:
        """Writes the closing banner, if enabled, then the divider."""
        if self._debugger.config.section.banners:
            self.debug(LogStyle.END_BANNER)
        self.debug(self.divider_type.divider)

    # --- Leveled output ---

    def info(self, message: str) -> "Section":
        return self._emit(self._debugger.sinks.info, message)

    log = info

    def debug(self, message: str) -> "Section":
        return self._emit(self._debugger.sinks.debug, message)

    def warning(self, message: str) -> "Section":
        return self._emit(self._debugger.sinks.warning, message)

    warn = warning

    def error(self, message: str) -> "Section":
        return self._emit(self._debugger.sinks.error, message)

    # --- Lifecycle ---

    def dedent(self) -> None:
        """Moves the section one level out, never below zero."""
        if self.indentation > 0:
            self.indentation -= 1

    def finish(self) -> None:
        """Finishes this section through its owning debugger."""
        self._debugger.finish(self)

    def __enter__(self) -> "Section":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.finish()
