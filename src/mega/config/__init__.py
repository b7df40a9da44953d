"""Configuration system."""

from mega.config.errors import ConfigError, FieldError
from mega.config.loader import load_config
from mega.config.schema import AppConfig, LoggingConfig, ServerConfig

__all__ = [
    "AppConfig",
    "ConfigError",
    "FieldError",
    "LoggingConfig",
    "ServerConfig",
    "load_config",
]
