"""
Configuration Serialization.

YAML loading for configuration recipes.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def load_config_from_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Loads a raw configuration mapping from a YAML file.

    Args:
        yaml_path: Path to the YAML recipe.

    Returns:
        The parsed mapping (empty documents yield an empty dict).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the top-level document is not a mapping.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.debug(f"Empty configuration file: {yaml_path}")
        return {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration root must be a mapping, got {type(data).__name__} in {yaml_path}"
        )

    return data


def save_config_as_yaml(data: Dict[str, Any], yaml_path: Path) -> Path:
    """
    Writes a configuration mapping to YAML, creating parent folders.

    Returns:
        The path written.
    """
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    return yaml_path
