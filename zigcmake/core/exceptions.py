"""
Centralized exception hierarchy for zigcmake.

This module defines all custom exceptions raised while discovering Zig
targets, generating CMake toolchain files and loading configuration.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Union


# ============================================================================
# Base Exceptions
# ============================================================================


class ZigCMakeError(Exception):
    """Base exception for all zigcmake errors."""

    pass


# ============================================================================
# Discovery Exceptions
# ============================================================================


class DiscoveryError(ZigCMakeError):
    """Base exception for target discovery errors."""

    pass


class DiscoveryProcessError(DiscoveryError):
    """Raised when `zig targets` cannot be run or terminates abnormally."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        signal_name: Optional[str] = None,
        stderr: str = "",
    ):
        self.returncode = returncode
        self.signal_name = signal_name
        self.stderr = stderr
        if stderr:
            message = f"{message}\n{stderr.rstrip()}"
        super().__init__(message)


class DiscoveryFormatError(DiscoveryError):
    """Raised when `zig targets` output does not contain the libc listing."""

    pass


# ============================================================================
# Target Exceptions
# ============================================================================


class InvalidTargetError(ZigCMakeError, ValueError):
    """Raised when a string is not an arch-os-libc target triple."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(
            f"Invalid target triple '{target}' (expected <arch>-<os>-<libc>)"
        )


class ValidationError(ZigCMakeError):
    """Raised when requested targets are not supported by Zig."""

    def __init__(self, invalid_targets: Iterable[str]):
        self.invalid_targets = list(invalid_targets)
        super().__init__("Invalid targets:\n" + "\n".join(self.invalid_targets))


# ============================================================================
# Output Exceptions
# ============================================================================


class FilesystemError(ZigCMakeError):
    """Raised when a directory or toolchain file cannot be written."""

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(message)


class GenerationError(ZigCMakeError):
    """Raised when toolchain files for several targets failed to generate."""

    def __init__(self, failures: Dict[str, Exception]):
        self.failures = dict(failures)
        details = "\n".join(
            f"  {target}: {error}" for target, error in self.failures.items()
        )
        super().__init__(
            f"Failed to generate {len(self.failures)} toolchain files:\n{details}"
        )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(ZigCMakeError):
    """Configuration parsing or validation error."""

    pass
