"""
Shared utilities for the zigcmake CLI.

Provides argument types and output formatting used by the command-line
interface.
"""

import argparse
import sys
from typing import Iterable


# ============================================================================
# Argument Types
# ============================================================================


def positive_int(value: str) -> int:
    """
    argparse type accepting integers >= 1.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")

    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")

    return number


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_target_list(targets: Iterable[str]) -> str:
    """Format the available targets listing, one triple per line."""
    lines = ["Available targets:"]
    lines.extend(targets)
    return "\n".join(lines)


def print_target_list(targets: Iterable[str], file=None):
    """
    Print available targets.

    Args:
        targets: Target triples to print
        file: Output file (default: stdout)
    """
    print(format_target_list(targets), file=file or sys.stdout)
