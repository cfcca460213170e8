"""
Core functionality for zigcmake.

This package contains the error hierarchy and file system helpers that the
other components depend on. Orchestration lives in
``zigcmake.core.orchestrator`` and is imported from there directly.
"""

from .exceptions import (
    ZigCMakeError,
    DiscoveryError,
    DiscoveryProcessError,
    DiscoveryFormatError,
    InvalidTargetError,
    ValidationError,
    FilesystemError,
    GenerationError,
    ConfigError,
)

from .filesystem import (
    atomic_write,
    ensure_directory,
)

__all__ = [
    # Exceptions
    "ZigCMakeError",
    "DiscoveryError",
    "DiscoveryProcessError",
    "DiscoveryFormatError",
    "InvalidTargetError",
    "ValidationError",
    "FilesystemError",
    "GenerationError",
    "ConfigError",
    # Filesystem
    "atomic_write",
    "ensure_directory",
]
