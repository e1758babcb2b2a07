"""
Telemetry Manifest.

Declarative schema for the console logger that backs debugger sinks.
"""

from pydantic import BaseModel, ConfigDict, Field

from .types import LoggerName, LogLevel


class TelemetryConfig(BaseModel):
    """
    Declarative manifest for console logging.

    Attributes:
        logger_name: Name of the `logging.Logger` receiving section output.
        log_level: Minimum level emitted by that logger.
        use_color: Apply ANSI level colors on the console.
        propagate: Forward records to ancestor loggers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    logger_name: LoggerName = Field(default="sectionlog")
    log_level: LogLevel = Field(default="DEBUG")
    use_color: bool = Field(default=True)
    propagate: bool = Field(default=False)
