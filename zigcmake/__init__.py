"""
zigcmake - CMake toolchain files for cross-compiling with Zig.

Discovers the targets supported by the installed ``zig`` and writes one
``<target>.cmake`` toolchain file per requested target.
"""

__version__ = "0.1.0"
