"""
Configuration module for apifilter.

Example:
    >>> from apifilter.config import load_config, build_registry
    >>>
    >>> settings = load_config("./apifilter.yaml")
    >>> registry = build_registry(settings)
"""

from .settings import (
    Settings,
    LoggingConfig,
    load_config,
    build_registry,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "LoggingConfig",
    "load_config",
    "build_registry",
    "get_default_config_path",
]
