"""Module de configuration."""

from commandline_api.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    ConfigFileLoader,
)
from commandline_api.config.models import CommandsConfig
from commandline_api.config.commands_loader import CommandsConfigLoader

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "ConfigFileLoader",
    "CommandsConfig",
    "CommandsConfigLoader",
]
