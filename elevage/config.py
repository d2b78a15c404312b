"""Configuration loading and validation for elevage."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, fields

from .exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = 'elevage.yaml'


@dataclass
class ElevageConfig:
    """Settings for a breeding collection."""
    save_path: str = 'elevage.txt'
    min_breeding_level: int = 5
    xp_per_level: int = 100
    offspring_name: str = 'Mystere'
    offspring_level: int = 1


def load_config(config_path: str) -> ElevageConfig:
    """
    Load and validate configuration from YAML or JSON file.
    
    Args:
        config_path: Path to configuration file
        
    Returns:
        Validated ElevageConfig object
        
    Raises:
        ConfigurationError: If file doesn't exist or configuration is invalid
    """
    path = Path(config_path)
    
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() == '.json':
                raw_config = json.load(f)
            else:
                raw_config = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to parse configuration file: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read configuration file: {e}") from e
    
    # An empty YAML document means "all defaults"
    if raw_config is None:
        raw_config = {}
    
    validate_config(raw_config)
    return build_config(raw_config)


def load_default_config(config_path: Optional[str] = None) -> ElevageConfig:
    """Load ``config_path`` (or ``elevage.yaml``) if present, defaults otherwise."""
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    if path.exists():
        return load_config(str(path))
    return ElevageConfig()


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.
    
    Args:
        config: Raw configuration dictionary
        
    Raises:
        ConfigurationError: If validation fails
    """
    if not isinstance(config, dict):
        raise ConfigurationError("Configuration must be a mapping")
    
    known_fields = {f.name for f in fields(ElevageConfig)}
    for key in config:
        if key not in known_fields:
            raise ConfigurationError(f"Unknown configuration field: {key}")
    
    for key in ('save_path', 'offspring_name'):
        if key in config:
            value = config[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{key} must be a non-empty string")
    
    # bool is a subclass of int, reject it explicitly
    minimums = {'min_breeding_level': 0, 'xp_per_level': 1, 'offspring_level': 0}
    for key, minimum in minimums.items():
        if key in config:
            value = config[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
                raise ConfigurationError(f"{key} must be an integer >= {minimum}, got {value!r}")


def build_config(raw_config: Dict[str, Any]) -> ElevageConfig:
    """
    Build ElevageConfig object from validated raw config.
    
    Args:
        raw_config: Validated configuration dictionary
        
    Returns:
        ElevageConfig object, unspecified fields keep their defaults
    """
    return ElevageConfig(**raw_config)
