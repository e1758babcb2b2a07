"""
Configuration Package.

Frozen pydantic manifests for section rendering and console telemetry.
"""

from .engine import Config
from .section_config import SectionConfig
from .telemetry_config import TelemetryConfig

__all__ = [
    "Config",
    "SectionConfig",
    "TelemetryConfig",
]
