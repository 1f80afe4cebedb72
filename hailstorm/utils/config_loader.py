"""
YAML configuration file loader for the crossing-count solvers.

This module provides utilities to load YAML configuration files for the
target area and for solver parameters.
"""

import yaml
from typing import Dict, Any
from pathlib import Path


def load_yaml_config(filepath: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If file is not valid YAML

    Example:
        >>> config = load_yaml_config('configs/area.yaml')
        >>> print(config['target_area']['x_min'])
        7
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        try:
            config = yaml.safe_load(f)
            return config if config is not None else {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {filepath}: {e}")


def load_area_config(config_dir: str = 'configs') -> Dict[str, Any]:
    """
    Load the target area from area.yaml.

    Args:
        config_dir: Directory containing config files (default: 'configs')

    Returns:
        Dictionary with x_min, y_min, x_max and y_max

    Raises:
        ValueError: If a bound is missing
    """
    config_path = Path(config_dir) / 'area.yaml'
    config = load_yaml_config(str(config_path))
    area = config.get('target_area', {})

    missing = [key for key in ('x_min', 'y_min', 'x_max', 'y_max') if key not in area]
    if missing:
        raise ValueError(f"Missing target area bounds in {config_path}: {', '.join(missing)}")

    return area


def load_algorithm_config(algorithm_name: str, config_dir: str = 'configs') -> Dict[str, Any]:
    """
    Load solver-specific configuration from YAML file.

    Args:
        algorithm_name: Name of solver ('sweep_line', 'brute_force')
        config_dir: Directory containing config files (default: 'configs')

    Returns:
        Dictionary with solver-specific parameters

    Raises:
        FileNotFoundError: If the solver config file doesn't exist

    Example:
        >>> sweep_config = load_algorithm_config('sweep_line')
        >>> epsilon = sweep_config['parameters']['epsilon']
    """
    config_path = Path(config_dir) / f'{algorithm_name}.yaml'
    config = load_yaml_config(str(config_path))
    return config.get('algorithm', {})


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.

    Later dictionaries override earlier ones for conflicting keys; nested
    dictionaries are merged key by key.

    Example:
        >>> base = {'parameters': {'epsilon': 1e-9, 'check_order': False}}
        >>> override = {'parameters': {'check_order': True}}
        >>> merge_configs(base, override)['parameters']
        {'epsilon': 1e-09, 'check_order': True}
    """
    merged = {}
    for config in configs:
        for key, value in config.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = merge_configs(merged[key], value)
            else:
                merged[key] = value
    return merged
