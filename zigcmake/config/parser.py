"""YAML configuration parser for zigcmake.

This module provides parsing and validation for zigcmake.yaml configuration
files. Every setting is optional; command-line options override the file.

Example zigcmake.yaml:

    version: 1
    zig: /opt/zig/zig
    output: cmake/toolchains
    targets:
      - x86_64-linux-musl
      - aarch64-macos-none
    jobs: 4
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from zigcmake.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "zigcmake.yaml"

_KNOWN_KEYS = {"version", "zig", "output", "targets", "all", "jobs"}


@dataclass
class ZigCMakeConfig:
    """Complete zigcmake configuration."""

    version: int = 1
    zig: str = "zig"
    output: Path = Path(".")
    targets: List[str] = field(default_factory=list)
    all: bool = False
    jobs: Optional[int] = None


def parse_config(config_path: Path) -> ZigCMakeConfig:
    """
    Parse zigcmake.yaml configuration file.

    Args:
        config_path: Path to zigcmake.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is missing or invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Could not read {config_path}: {e}")

    if data is None:
        logger.debug(f"Configuration file is empty: {config_path}")
        return ZigCMakeConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    return _parse_and_validate(data)


def load_config(
    config_path: Optional[Path] = None, project_root: Optional[Path] = None
) -> ZigCMakeConfig:
    """
    Load configuration from an explicit path or the default location.

    An explicit ``config_path`` must exist. Without one, ``zigcmake.yaml`` in
    ``project_root`` (default: current directory) is used when present and
    defaults are returned otherwise.
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    default_config = (project_root or Path.cwd()) / DEFAULT_CONFIG_FILENAME
    if default_config.exists():
        logger.debug(f"Loading configuration from {default_config}")
        return parse_config(default_config)

    logger.debug("No config file found, using defaults")
    return ZigCMakeConfig()


def _parse_and_validate(data: dict) -> ZigCMakeConfig:
    """Parse and validate configuration data."""
    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    version = data.get("version", 1)
    # bool is a subclass of int
    if isinstance(version, bool) or version != 1:
        raise ConfigError(f"Unsupported version: {version} (expected 1)")

    zig = data.get("zig", "zig")
    if not isinstance(zig, str) or not zig:
        raise ConfigError("zig must be a non-empty string")

    output = data.get("output", ".")
    if not isinstance(output, str) or not output:
        raise ConfigError("output must be a non-empty string")

    all_targets = data.get("all", False)
    if not isinstance(all_targets, bool):
        raise ConfigError("all must be true or false")

    return ZigCMakeConfig(
        version=version,
        zig=zig,
        output=Path(output),
        targets=_parse_targets(data.get("targets")),
        all=all_targets,
        jobs=_parse_jobs(data.get("jobs")),
    )


def _parse_targets(data) -> List[str]:
    """Parse the default target list."""
    if data is None:
        return []

    if not isinstance(data, list):
        raise ConfigError("targets must be a list of target triples")

    for target in data:
        if not isinstance(target, str):
            raise ConfigError(f"Invalid target entry: {target!r} (expected string)")

    return list(data)


def _parse_jobs(data) -> Optional[int]:
    """Parse worker count."""
    if data is None:
        return None

    # bool is a subclass of int
    if isinstance(data, bool) or not isinstance(data, int) or data < 1:
        raise ConfigError(f"jobs must be a positive integer, got {data!r}")

    return data
