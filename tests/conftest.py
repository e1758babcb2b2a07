"""Pytest fixtures for sectionlog tests."""
import pytest

from sectionlog import Config, Debugger


class SinkRecorder:
    """Collects every line written to each level, plus a merged timeline."""

    def __init__(self):
        self.lines = []
        self.by_level = {"info": [], "debug": [], "warning": [], "error": []}

    def sink(self, level):
        def _write(message):
            self.by_level[level].append(message)
            self.lines.append((level, message))
        return _write


@pytest.fixture
def recorder():
    """Fresh line recorder."""
    return SinkRecorder()


@pytest.fixture
def make_debugger(recorder):
    """Factory for debuggers writing into the shared recorder."""
    def _make(**section_overrides):
        config = Config(section=section_overrides) if section_overrides else Config()
        return Debugger(
            info=recorder.sink("info"),
            debug=recorder.sink("debug"),
            warning=recorder.sink("warning"),
            error=recorder.sink("error"),
            config=config,
        )
    return _make


@pytest.fixture
def debugger(make_debugger):
    """Debugger with default configuration."""
    return make_debugger()


@pytest.fixture
def temp_yaml_config(tmp_path):
    """Temporary YAML config file."""
    yaml_content = """
section:
  default_divider: star
  banners: false
  track_indentation: true

telemetry:
  logger_name: sectionlog.tests
  log_level: warning
  use_color: false
"""
    yaml_file = tmp_path / "test_config.yaml"
    yaml_file.write_text(yaml_content)
    return yaml_file


@pytest.fixture
def temp_invalid_yaml(tmp_path):
    """Invalid YAML config."""
    yaml_content = """
section:
  default_divider: zigzag
"""
    yaml_file = tmp_path / "invalid.yaml"
    yaml_file.write_text(yaml_content)
    return yaml_file
