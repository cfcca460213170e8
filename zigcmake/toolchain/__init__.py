"""
Zig toolchain module for zigcmake.

This module provides functionality for:
- Zig target triple parsing
- Discovery of the targets supported by the installed Zig
"""

from zigcmake.toolchain.triple import TargetTriple
from zigcmake.toolchain.discovery import (
    DEFAULT_ZIG_EXECUTABLE,
    TargetDiscovery,
    discover_targets,
    parse_targets,
)

__all__ = [
    "TargetTriple",
    "DEFAULT_ZIG_EXECUTABLE",
    "TargetDiscovery",
    "discover_targets",
    "parse_targets",
]
