import json
from pathlib import Path
from typing import Any, Dict

import yaml


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from file

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        Configuration dictionary (empty for an empty file)
    """
    config_path = Path(config_path)

    if config_path.suffix == '.json':
        with open(config_path, 'r') as f:
            config = json.load(f)
    elif config_path.suffix in ['.yaml', '.yml']:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    else:
        raise ValueError(f"Unknown config format: {config_path.suffix}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return config


def merge_configs(base_config: Dict, update_config: Dict) -> Dict:
    """
    Recursively merge two configuration dictionaries

    Args:
        base_config: Base configuration
        update_config: Configuration with updates

    Returns:
        Merged configuration
    """
    merged = base_config.copy()

    for key, value in update_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged
