"""
CMake integration module for zigcmake.

This module renders CMake toolchain files that drive ``zig`` as the
compiler for a given Zig target triple.
"""

from .toolchain_generator import (
    SYSTEM_NAMES,
    SYSTEM_PROCESSORS,
    DEFAULT_SYSTEM_NAME,
    REQUIRED_GENERATOR,
    cmake_system_name,
    cmake_system_processor,
    generate_toolchain,
    toolchain_filename,
)

__all__ = [
    "SYSTEM_NAMES",
    "SYSTEM_PROCESSORS",
    "DEFAULT_SYSTEM_NAME",
    "REQUIRED_GENERATOR",
    "cmake_system_name",
    "cmake_system_processor",
    "generate_toolchain",
    "toolchain_filename",
]
