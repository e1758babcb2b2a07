"""
Section Registry.

This module provides the `Debugger`, a registry of named output sections
layered over a logging backend. Sections open with a divider banner, prefix
every line with their name and close with a matching banner.

The registry is a plain dictionary: concurrent use from several threads is
not supported.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from typing import Dict, List, Optional, Union

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.config import Config
from ..core.logger import DividerType, setup_logger
from .section import Section
from .sinks import Sink, Sinks

# =========================================================================== #
#                                DEBUGGER                                     #
# =========================================================================== #


class Debugger:
    """
    Registry of named sections writing through leveled sinks.

    Either pass a `logging.Logger`, explicit sink callables, or both (explicit
    callables win for their level). Unknown section names are tolerated by
    every operation: lookups return None and finishing is a no-op.

    Example:
        >>> dbg = Debugger(logging.getLogger("app"))
        >>> with dbg.create("loader", DividerType.THIN) as section:
        ...     section.info("reading manifest")
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        debug: Optional[Sink] = None,
        warning: Optional[Sink] = None,
        error: Optional[Sink] = None,
        info: Optional[Sink] = None,
        config: Optional[Config] = None,
    ):
        self.logger = logger
        self.config = config if config is not None else Config()
        self.sinks = Sinks.resolve(
            logger=logger, info=info, debug=debug, warning=warning, error=error
        )
        self._sections: Dict[str, Section] = {}

    @classmethod
    def from_config(cls, config: Config) -> "Debugger":
        """Builds a debugger over a console logger described by `config`."""
        return cls(setup_logger(config.telemetry), config=config)

    # --- Registry ---

    def create(self, name: str, divider_type: Optional[DividerType] = None) -> Section:
        """
        Registers a new section and writes its opening banner.

        A section already registered under `name` is replaced without being
        closed. The new section is indented one level per active section.
        """
        if divider_type is None:
            divider_type = self.config.section.default_divider

        section = Section(self, name, divider_type, indentation=len(self._sections))
        self._sections[name] = section
        section.open()
        return section

    def section(self, name: str) -> Optional[Section]:
        """Returns the active section called `name`, if any."""
        return self._sections.get(name)

    def finish(self, section: Union[str, Section]) -> None:
        """
        Closes and unregisters a section, given by name or by object.

        Remaining sections with positive indentation move one level out when
        indentation tracking is enabled.
        """
        name = section.name if isinstance(section, Section) else section
        active = self._sections.pop(name, None)
        if active is None:
            return

        active.close()

        if self.config.section.track_indentation:
            for remaining in self._sections.values():
                remaining.dedent()

    def finish_all(self) -> None:
        """Finishes every active section, most recently created first."""
        for name in reversed(list(self._sections)):
            self.finish(name)

    @property
    def active_sections(self) -> List[str]:
        """Names of the active sections in creation order."""
        return list(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    # --- Top-level output (no section prefix) ---

    def info(self, message: str) -> None:
        """Writes an unprefixed line on the info sink."""
        self.sinks.info(message)

    def debug(self, message: str) -> None:
        """Writes an unprefixed line on the debug sink."""
        self.sinks.debug(message)

    def warn(self, message: str) -> None:
        """Writes an unprefixed line on the warning sink."""
        self.sinks.warning(message)

    warning = warn

    def error(self, message: str) -> None:
        """Writes an unprefixed line on the error sink."""
        self.sinks.error(message)

    def divider(self, divider_type: Optional[DividerType] = None) -> None:
        """Writes a bare divider line."""
        if divider_type is None:
            divider_type = self.config.section.default_divider
        self.sinks.info(divider_type.divider)

    def blank(self) -> None:
        """Writes a spacer line."""
        self.sinks.info(DividerType.BLANK.divider)
