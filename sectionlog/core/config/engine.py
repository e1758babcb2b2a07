"""
Root Configuration Manifest.

Aggregates the section and telemetry sub-configs into one frozen manifest,
buildable from Python mappings or YAML recipes.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from pathlib import Path
from typing import Any, Mapping, Union

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..io import load_config_from_yaml, save_config_as_yaml
from .section_config import SectionConfig
from .telemetry_config import TelemetryConfig

# =========================================================================== #
#                                ROOT CONFIG                                  #
# =========================================================================== #


class Config(BaseModel):
    """
    Single source of truth for a debugger session.

    Example YAML:

        section:
          default_divider: star
          banners: false
        telemetry:
          log_level: info
          use_color: false
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    section: SectionConfig = Field(default_factory=SectionConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Validates a nested mapping into a manifest."""
        return cls.model_validate(dict(data))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """
        Loads and validates a YAML recipe.

        Raises:
            FileNotFoundError: If the recipe does not exist.
            ValueError: If the document is not a mapping.
            pydantic.ValidationError: If any field is invalid.
        """
        return cls.from_dict(load_config_from_yaml(Path(path)))

    def to_yaml(self, path: Union[str, Path]) -> Path:
        """Writes the manifest as a YAML recipe readable by `from_yaml`."""
        return save_config_as_yaml(self.model_dump(mode="json"), Path(path))
