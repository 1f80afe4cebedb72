"""
Tests for YAML configuration loading.
"""

from pathlib import Path

import pytest
import yaml

from hailstorm.utils.config_loader import (
    load_yaml_config,
    load_area_config,
    load_algorithm_config,
    merge_configs,
)


CONFIG_DIR = Path(__file__).parent.parent / "configs"


class TestLoadYamlConfig:
    """Tests for load_yaml_config."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_config(str(tmp_path / "missing.yaml"))

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_yaml_config(str(config_file)) == {}

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("target_area: [unclosed")
        with pytest.raises(yaml.YAMLError):
            load_yaml_config(str(config_file))


class TestShippedConfigs:
    """Tests against the configs/ directory of the project."""

    def test_area_config(self):
        area = load_area_config(str(CONFIG_DIR))
        assert area['x_min'] == 200000000000000
        assert area['y_max'] == 400000000000000

    def test_sweep_line_config(self):
        config = load_algorithm_config('sweep_line', str(CONFIG_DIR))
        assert config['parameters']['epsilon'] == pytest.approx(1e-9)
        assert config['parameters']['check_order'] is False

    def test_brute_force_config(self):
        config = load_algorithm_config('brute_force', str(CONFIG_DIR))
        assert config['output']['results_filename'] == 'crossings.json'


class TestAreaConfig:
    """Tests for load_area_config validation."""

    def test_missing_bound(self, tmp_path):
        (tmp_path / "area.yaml").write_text("target_area:\n  x_min: 0\n  y_min: 0\n  x_max: 5\n")
        with pytest.raises(ValueError, match="y_max"):
            load_area_config(str(tmp_path))


class TestMergeConfigs:
    """Tests for merge_configs."""

    def test_later_overrides_earlier(self):
        assert merge_configs({'a': 1, 'b': 2}, {'b': 3, 'c': 4}) == {'a': 1, 'b': 3, 'c': 4}

    def test_nested_merge(self):
        base = {'parameters': {'epsilon': 1e-9, 'check_order': False}}
        override = {'parameters': {'check_order': True}}
        merged = merge_configs(base, override)
        assert merged == {'parameters': {'epsilon': 1e-9, 'check_order': True}}
        assert base['parameters']['check_order'] is False
