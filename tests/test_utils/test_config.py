"""Tests for configuration system."""

import os
import tempfile

import pytest
import yaml
from pydantic import ValidationError

from dsg.core.scene_graph import DynamicSceneGraph
from dsg.utils.config import (
    DSGConfig, load_config, GeometryConfig,
    DescriptionConfig, LoggingConfig, _apply_overrides
)


def test_default_config():
    """Test default configuration values."""
    config = DSGConfig()

    assert config.project_name == "DSG"
    assert config.version == "0.1.0"
    assert config.debug_mode is False
    assert config.geometry.overlap_threshold == 0.75
    assert config.description.output_file == "SceneDescription.json"
    assert config.logging.log_to_file is False


def test_config_from_dict():
    """Test creating config from dictionary."""
    config = DSGConfig(**{
        "project_name": "Test Project",
        "geometry": {"overlap_threshold": 0.5},
    })

    assert config.project_name == "Test Project"
    assert config.geometry.overlap_threshold == 0.5


def test_invalid_threshold():
    """Threshold must be a fraction in (0, 1]."""
    with pytest.raises(ValidationError):
        GeometryConfig(overlap_threshold=0.0)
    with pytest.raises(ValidationError):
        GeometryConfig(overlap_threshold=1.5)


def test_load_config_from_yaml():
    """Test loading config from YAML file."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump({
            "project_name": "YAML Test",
            "description": {"json_indent": 4},
        }, f)
        temp_path = f.name

    try:
        config = load_config(temp_path)
        assert config.project_name == "YAML Test"
        assert config.description.json_indent == 4
    finally:
        os.unlink(temp_path)


def test_load_missing_file_uses_defaults():
    config = load_config("does/not/exist.yaml")
    assert config.geometry.overlap_threshold == 0.75


def test_default_path_prefers_working_directory(tmp_path, monkeypatch):
    """Without a path, config/default.yaml in the working directory is used."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    with open(config_dir / "default.yaml", "w") as f:
        yaml.dump({"project_name": "FromCwd", "geometry": {"overlap_threshold": 0.6}}, f)
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config.project_name == "FromCwd"
    assert config.geometry.overlap_threshold == 0.6


def test_config_overrides():
    """Test applying overrides to config."""
    config_dict = {"geometry": {"overlap_threshold": 0.75}}
    overrides = {
        "geometry.overlap_threshold": 0.6,
        "debug_mode": True,
    }

    result = _apply_overrides(config_dict, overrides)

    assert result["geometry"]["overlap_threshold"] == 0.6
    assert result["debug_mode"] is True


def test_load_config_with_overrides():
    """Test load_config with overrides."""
    config = load_config(overrides={
        "geometry.overlap_threshold": 0.9,
        "logging.level": "WARNING",
    })

    assert config.geometry.overlap_threshold == 0.9
    assert config.logging.level == "WARNING"


def test_nested_config_access():
    config = DSGConfig()
    assert isinstance(config.geometry, GeometryConfig)
    assert isinstance(config.description, DescriptionConfig)
    assert isinstance(config.logging, LoggingConfig)


def test_graph_from_config():
    config = DSGConfig(geometry={"overlap_threshold": 0.5})
    graph = DynamicSceneGraph.from_config(config, name="configured")

    assert graph.name == "configured"
    assert graph.overlap_threshold == 0.5
