"""
sectionlog: named, nestable sections for diagnostic console output.

Usage:
    import logging
    from sectionlog import Debugger, DividerType

    dbg = Debugger(logging.getLogger("app"))
    section = dbg.create("loader", DividerType.THIN)
    section.info("reading manifest")
    dbg.finish("loader")
"""

from .core import Config, DividerType, Logger, LogStyle, SectionConfig, TelemetryConfig
from .debugger import Debugger, Section, Sinks

__version__ = "0.3.0"

__all__ = [
    "Debugger",
    "Section",
    "Sinks",
    "DividerType",
    "LogStyle",
    "Logger",
    "Config",
    "SectionConfig",
    "TelemetryConfig",
]
