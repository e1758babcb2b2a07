"""
Core Package.

Configuration manifests, logging setup and YAML I/O.
"""

from .config import Config, SectionConfig, TelemetryConfig
from .io import load_config_from_yaml, save_config_as_yaml
from .logger import ColorFormatter, DividerType, Logger, LogStyle, setup_logger

__all__ = [
    # Config
    "Config",
    "SectionConfig",
    "TelemetryConfig",
    # Logging
    "LogStyle",
    "DividerType",
    "ColorFormatter",
    "Logger",
    "setup_logger",
    # I/O
    "load_config_from_yaml",
    "save_config_as_yaml",
]
