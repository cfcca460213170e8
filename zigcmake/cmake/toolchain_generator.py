"""
CMake Toolchain File Generator

This module renders CMake toolchain files that use ``zig`` as the C/C++
compiler, archiver and ranlib for a single Zig target triple. Rendering is a
pure function of the triple: the same target always yields byte-identical
text.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from zigcmake.toolchain.triple import TargetTriple

# Zig OS name -> CMAKE_SYSTEM_NAME
SYSTEM_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "windows": "Windows",
        "macos": "Darwin",
        "wasi": "WASI",
    }
)
DEFAULT_SYSTEM_NAME = "Linux"

# Zig arch name -> CMAKE_SYSTEM_PROCESSOR; unlisted architectures keep Zig's name
SYSTEM_PROCESSORS: Mapping[str, str] = MappingProxyType(
    {
        "x86": "X86",
        "x86_64": "AMD64",
    }
)

REQUIRED_GENERATOR = "Ninja"

# (CMake tool variable, zig subcommand)
ZIG_TOOLS: Tuple[Tuple[str, str], ...] = (
    ("CMAKE_C_COMPILER", "cc"),
    ("CMAKE_CXX_COMPILER", "c++"),
    ("CMAKE_AR", "ar"),
    ("CMAKE_RANLIB", "ranlib"),
)

TOOLCHAIN_FILE_SUFFIX = ".cmake"


def cmake_system_name(zig_os: str) -> str:
    """Translate a Zig OS name to CMake's CMAKE_SYSTEM_NAME."""
    return SYSTEM_NAMES.get(zig_os, DEFAULT_SYSTEM_NAME)


def cmake_system_processor(zig_arch: str) -> str:
    """Translate a Zig architecture name to CMake's CMAKE_SYSTEM_PROCESSOR."""
    return SYSTEM_PROCESSORS.get(zig_arch, zig_arch)


def toolchain_filename(target: str) -> str:
    """Return the toolchain file name for a target, e.g. 'x86_64-linux-gnu.cmake'."""
    return f"{target}{TOOLCHAIN_FILE_SUFFIX}"


def generate_toolchain(target: str) -> str:
    """Generate CMake toolchain file content for a Zig target.

    The generated file:
      - refuses to configure with any generator other than Ninja
      - points the C/C++ compilers, archiver and ranlib at ``zig`` with the
        matching zig subcommand as first argument
      - records the raw Zig triple components and the reassembled triple
      - sets CMAKE_SYSTEM_NAME and CMAKE_SYSTEM_PROCESSOR

    Args:
        target: Zig target triple, e.g. 'x86_64-linux-gnu'

    Returns:
        Complete file content as string

    Raises:
        InvalidTargetError: If target is not an arch-os-libc triple

    Example:
        >>> content = generate_toolchain('x86_64-windows-gnu')
        >>> 'set ( CMAKE_SYSTEM_NAME "Windows" )' in content
        True
    """
    triple = TargetTriple.parse(target)

    sections = [
        _generate_generator_check(),
        _generate_zig_lookup(),
        *_generate_tool_settings(),
        _generate_target_settings(triple),
    ]
    return "\n\n".join("\n".join(section) for section in sections)


def _generate_generator_check() -> List[str]:
    return [
        f'if ( NOT CMAKE_GENERATOR STREQUAL "{REQUIRED_GENERATOR}" )',
        '  message ( FATAL_ERROR "Unsupported generator" )',
        "endif ()",
    ]


def _generate_zig_lookup() -> List[str]:
    return ["find_program ( ZIG_EXECUTABLE zig REQUIRED )"]


def _generate_tool_settings() -> List[List[str]]:
    # One block per tool: the executable and the zig subcommand passed as ARG1
    return [
        [
            f"set ( {variable} ${{ZIG_EXECUTABLE}} )",
            f'set ( {variable}_ARG1 "{subcommand}" )',
        ]
        for variable, subcommand in ZIG_TOOLS
    ]


def _generate_target_settings(triple: TargetTriple) -> List[str]:
    return [
        f'set ( ZIG_ARCH "{triple.arch}" )',
        f'set ( ZIG_OS "{triple.os}" )',
        f'set ( ZIG_LIBC "{triple.libc}" )',
        "",
        'set ( ZIG_TARGET "${ZIG_ARCH}-${ZIG_OS}-${ZIG_LIBC}")',
        f'set ( CMAKE_SYSTEM_NAME "{cmake_system_name(triple.os)}" )',
        f'set ( CMAKE_SYSTEM_PROCESSOR "{cmake_system_processor(triple.arch)}" )',
    ]
