"""Tests for tessera.toml loading."""

from pathlib import Path

import pytest

from tessera.core.config import CONFIG_FILENAME, load_project_config
from tessera.core.errors import ConfigError


def test_defaults(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('[project]\nname = "palette"\n')

    config = load_project_config(tmp_path)

    assert config.project.name == "palette"
    assert config.graph_path == tmp_path.resolve() / "graph.yaml"
    assert config.compiler.target == "web"
    assert config.compiler.output == Path("build")
    assert config.compiler.sdk_version == "0.1.0"
    assert config.compiler.hot_port == 8081
    assert config.compiler.options == {}


def test_file_path(tmp_path):
    path = tmp_path / CONFIG_FILENAME
    path.write_text('[project]\nname = "palette"\ngraph = "design/graph.yaml"\n\n[compiler]\ntarget = "ios"\n')

    config = load_project_config(path)

    assert config.compiler.target == "ios"
    assert config.graph_path == tmp_path.resolve() / "design" / "graph.yaml"


def test_missing(tmp_path):
    with pytest.raises(ConfigError, match="No tessera.toml"):
        load_project_config(tmp_path)


def test_invalid_toml(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("[project\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_project_config(tmp_path)


def test_missing_project_name(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("[compiler]\ntarget = 'web'\n")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_project_config(tmp_path)


def test_invalid_hot_port(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text('[project]\nname = "palette"\n\n[compiler]\nhot_port = 0\n')
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_project_config(tmp_path)
