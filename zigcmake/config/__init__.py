"""
Configuration module for zigcmake.

Loads optional defaults from a zigcmake.yaml file.
"""

from zigcmake.config.parser import (
    DEFAULT_CONFIG_FILENAME,
    ZigCMakeConfig,
    load_config,
    parse_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "ZigCMakeConfig",
    "load_config",
    "parse_config",
]
