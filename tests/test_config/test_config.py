"""
Test Suite for configuration manifests.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sectionlog import Config, DividerType, SectionConfig, TelemetryConfig


@pytest.mark.unit
def test_defaults():
    cfg = Config()

    assert cfg.section.default_divider is DividerType.THICK
    assert cfg.section.banners is True
    assert cfg.section.track_indentation is True
    assert cfg.section.indent_unit == "  "
    assert cfg.telemetry.logger_name == "sectionlog"
    assert cfg.telemetry.log_level == "DEBUG"


@pytest.mark.unit
def test_divider_accepts_names_and_members():
    assert SectionConfig(default_divider="underscore").default_divider is DividerType.UNDERSCORE
    assert SectionConfig(default_divider=DividerType.BLANK).default_divider is DividerType.BLANK


@pytest.mark.unit
def test_invalid_divider_rejected():
    with pytest.raises(ValidationError):
        SectionConfig(default_divider="zigzag")


@pytest.mark.unit
def test_indent_unit_must_be_spaces():
    with pytest.raises(ValidationError):
        SectionConfig(indent_unit="->")


@pytest.mark.unit
def test_log_level_normalized():
    assert TelemetryConfig(log_level="info").log_level == "INFO"
    with pytest.raises(ValidationError):
        TelemetryConfig(log_level="verbose")


@pytest.mark.unit
def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        Config.from_dict({"section": {"colour": "red"}})


@pytest.mark.unit
def test_config_is_frozen():
    cfg = Config()
    with pytest.raises(ValidationError):
        cfg.section.banners = False


@pytest.mark.integration
def test_from_yaml(temp_yaml_config):
    cfg = Config.from_yaml(temp_yaml_config)

    assert cfg.section.default_divider is DividerType.STAR
    assert cfg.section.banners is False
    assert cfg.telemetry.log_level == "WARNING"
    assert cfg.telemetry.use_color is False


@pytest.mark.integration
def test_from_yaml_invalid(temp_invalid_yaml):
    with pytest.raises(ValidationError):
        Config.from_yaml(temp_invalid_yaml)


@pytest.mark.integration
def test_yaml_round_trip(tmp_path):
    cfg = Config.from_dict({"section": {"default_divider": "blank", "indent_unit": "    "}})

    restored = Config.from_yaml(cfg.to_yaml(tmp_path / "out" / "cfg.yaml"))

    assert restored == cfg


@pytest.mark.integration
def test_bundled_recipe_loads():
    recipe = Path(__file__).resolve().parents[2] / "recipes" / "compact.yaml"
    cfg = Config.from_yaml(recipe)

    assert cfg.section.default_divider is DividerType.THIN
    assert cfg.section.banners is False
