"""
Zig target discovery.

This module asks the Zig executable which target triples it can build a
libc for. ``zig targets`` prints a ZON document describing the compiler; the
``.libc = .{ ... }`` entry lists every supported ``<arch>-<os>-<libc>``
triple as a quoted string:

    .libc = .{
        "aarch64-linux-gnu",
        "x86_64-windows-gnu",
        ...
    },

The layout of that document is not a documented interface of Zig, so parsing
is strict: anything unexpected raises DiscoveryFormatError instead of
producing an empty or partial target list.
"""

import logging
import re
import signal
import subprocess
from typing import List, Optional

from zigcmake.core.exceptions import (
    DiscoveryFormatError,
    DiscoveryProcessError,
    InvalidTargetError,
)
from zigcmake.toolchain.triple import TargetTriple

logger = logging.getLogger(__name__)

DEFAULT_ZIG_EXECUTABLE = "zig"

_LIBC_BLOCK_RE = re.compile(r"\.libc\s*=\s*\.(\{[^}]*\})")
_QUOTED_RE = re.compile(r'"([^"]*)"')


def parse_targets(output: str) -> List[str]:
    """
    Extract libc target triples from ``zig targets`` output.

    Args:
        output: Standard output of ``zig targets``

    Returns:
        Target triples in the order Zig lists them

    Raises:
        DiscoveryFormatError: If the libc block is missing, empty, or lists
            something that is not a target triple

    Example:
        >>> parse_targets('.libc = .{ "a-b-c", "d-e-f" },')
        ['a-b-c', 'd-e-f']
    """
    match = _LIBC_BLOCK_RE.search(output)
    if match is None:
        raise DiscoveryFormatError(
            "Could not find the '.libc' target list in `zig targets` output"
        )

    targets = _QUOTED_RE.findall(match.group(1))
    if not targets:
        raise DiscoveryFormatError(
            "The '.libc' target list in `zig targets` output is empty"
        )

    for target in targets:
        try:
            TargetTriple.parse(target)
        except InvalidTargetError as e:
            raise DiscoveryFormatError(
                f"Unexpected entry in `zig targets` libc list: {e}"
            ) from e

    return targets


class TargetDiscovery:
    """
    Discover the target triples supported by a Zig installation.

    Example:
        >>> discovery = TargetDiscovery()
        >>> targets = discovery.discover()
        >>> 'x86_64-linux-gnu' in targets
        True
    """

    def __init__(self, zig_executable: Optional[str] = None):
        """
        Initialize target discovery.

        Args:
            zig_executable: Zig executable name or path (default: ``zig``
                looked up on PATH)
        """
        self.zig_executable = zig_executable or DEFAULT_ZIG_EXECUTABLE

    def discover(self) -> List[str]:
        """
        Run ``zig targets`` and return the supported target triples.

        Returns:
            Target triples in the order Zig lists them

        Raises:
            DiscoveryProcessError: If Zig cannot be run, exits non-zero or is
                killed by a signal
            DiscoveryFormatError: If the output cannot be parsed
        """
        cmd = [self.zig_executable, "targets"]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise DiscoveryProcessError(
                f"Failed to execute `{' '.join(cmd)}`: {e}"
            ) from e

        if result.returncode < 0:
            signal_name = _signal_name(-result.returncode)
            raise DiscoveryProcessError(
                f"`zig targets` failed with signal {signal_name}",
                returncode=result.returncode,
                signal_name=signal_name,
                stderr=result.stderr,
            )

        if result.returncode != 0:
            raise DiscoveryProcessError(
                f"`zig targets` failed with exit code {result.returncode}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        targets = parse_targets(result.stdout)
        logger.debug(f"Discovered {len(targets)} Zig targets")
        return targets


def discover_targets(zig_executable: Optional[str] = None) -> List[str]:
    """Convenience wrapper around TargetDiscovery.discover()."""
    return TargetDiscovery(zig_executable).discover()


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)
