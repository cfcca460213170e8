"""Zig target triple value type."""

from dataclasses import dataclass

from zigcmake.core.exceptions import InvalidTargetError


@dataclass(frozen=True)
class TargetTriple:
    """
    A Zig libc target, e.g. ``x86_64-linux-gnu``.

    Attributes:
        arch: CPU architecture as Zig names it (e.g. 'x86_64', 'aarch64')
        os: Operating system as Zig names it (e.g. 'linux', 'windows')
        libc: C library / ABI variant (e.g. 'gnu', 'musl', 'none')
    """

    arch: str
    os: str
    libc: str

    @classmethod
    def parse(cls, target: str) -> "TargetTriple":
        """
        Split a target string into its three components.

        Raises:
            InvalidTargetError: If the string is not exactly three non-empty
                dash-separated components
        """
        parts = target.split("-")
        if len(parts) != 3 or not all(parts):
            raise InvalidTargetError(target)
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.arch}-{self.os}-{self.libc}"
