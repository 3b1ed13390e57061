"""
Configuration management for apifilter.

Provides dataclasses for configuration and utilities
for loading settings from YAML files.
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..core.exceptions import ConfigError
from ..query.operators import OperatorRegistry
from ..utils.logging import resolve_level


@dataclass
class LoggingConfig:
    """Logging configuration."""
    format: Optional[str] = None
    date_format: Optional[str] = None
    log_file: Optional[str] = None


@dataclass
class Settings:
    """
    Main settings container for apifilter.

    Attributes:
        log_level: Logging level
        logging: Logger format and output settings
        operators: Extra comparison operators, name -> symbol
            (e.g. {"ne": "!=", "like": "LIKE"})
    """
    log_level: str = "INFO"
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    operators: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        try:
            resolve_level(self.log_level)
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        data = dict(data)
        logging_data = data.pop("logging", None) or {}
        operators = data.pop("operators", None) or {}

        if not isinstance(operators, dict):
            raise ConfigError(
                f"'operators' must be a mapping, got {type(operators).__name__}"
            )

        try:
            return cls(
                logging=LoggingConfig(**logging_data),
                operators={str(k): str(v) for k, v in operators.items()},
                **data
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        return asdict(self)


def build_registry(settings: Optional[Settings] = None) -> OperatorRegistry:
    """
    Create an operator registry with the builtin and configured operators.

    Args:
        settings: Settings with extra operators. If None, builtins only.

    Raises:
        ConfigError: If a configured operator is already registered or
            is not a valid comparison operator
    """
    registry = OperatorRegistry()
    if settings is not None:
        for name, symbol in settings.operators.items():
            try:
                registry.register_operator(name, symbol)
            except ValueError as e:
                raise ConfigError(f"Invalid operator '{name}': {e}") from e
    return registry


def get_default_config_path() -> Path:
    """Get path to default configuration file."""
    local_config = Path("./config/apifilter.yaml")
    if local_config.exists():
        return local_config

    env_config = os.environ.get("APIFILTER_CONFIG")
    if env_config:
        return Path(env_config)

    return local_config


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Settings object with loaded configuration

    Raises:
        ConfigError: If the file is not valid YAML or has unknown keys

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./apifilter.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    if not path.exists():
        # Return default settings if no config file
        return Settings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")

    return Settings.from_dict(data)
