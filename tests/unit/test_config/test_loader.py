"""Tests for configuration loading."""

from pathlib import Path

import pytest

from docsym.config.loader import load_config
from docsym.config.models import Config
from docsym.errors import ConfigurationError


def test_load_config_defaults() -> None:
    """No path returns defaults."""
    assert load_config(None) == Config()


def test_load_config_from_yaml(tmp_path: Path) -> None:
    """Values from YAML override defaults."""
    config_file = tmp_path / "docsym.yaml"
    config_file.write_text(
        """
server:
  transport: sse
  port: 9000
parser:
  position_encoding: utf-32
dsl:
  extra_callbacks:
    - after_publish
  test_base_suffix: Spec
logging:
  level: DEBUG
"""
    )

    config = load_config(config_file)

    assert config.server.transport == "sse"
    assert config.server.port == 9000
    assert config.parser.position_encoding == "utf-32"
    assert config.dsl.extra_callbacks == ["after_publish"]
    assert config.dsl.test_base_suffix == "Spec"
    assert config.logging.level == "DEBUG"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """An empty file yields defaults."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert load_config(config_file) == Config()


def test_load_config_missing_file(tmp_path: Path) -> None:
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML raises ValueError."""
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("server: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(config_file)


def test_load_config_non_mapping(tmp_path: Path) -> None:
    """A YAML list at the root is rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(config_file)


def test_load_config_invalid_values(tmp_path: Path) -> None:
    """Values failing validation raise ConfigurationError."""
    config_file = tmp_path / "bad_values.yaml"
    config_file.write_text("server:\n  port: 80\n")

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config(config_file)
