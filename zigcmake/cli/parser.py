"""
zigcmake CLI argument parser.

This module implements the command-line interface for zigcmake using argparse.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from zigcmake.cli.utils import positive_int, print_target_list
from zigcmake.config import DEFAULT_CONFIG_FILENAME, ZigCMakeConfig, load_config
from zigcmake.core.orchestrator import ToolchainOrchestrator
from zigcmake.toolchain.discovery import TargetDiscovery

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("zigcmake")
except Exception:
    from zigcmake import __version__

logger = logging.getLogger(__name__)


class CLI:
    """zigcmake command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="zigcmake",
            description="Generate CMake toolchain files for cross-compiling with Zig",
            epilog=(
                "Without --target or --all, the targets supported by the "
                "installed zig are listed and nothing is written."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"zigcmake {__version__}"
        )
        parser.add_argument(
            "--target",
            "-t",
            action="append",
            default=[],
            metavar="TRIPLE",
            help="Zig target to generate a toolchain file for, e.g. "
            "x86_64-linux-gnu (can be used multiple times)",
        )
        parser.add_argument(
            "--all",
            "-a",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Generate toolchain files for every target zig supports "
            "(ignores --target); --no-all overrides the configuration file",
        )
        parser.add_argument(
            "--output",
            "-o",
            type=Path,
            metavar="DIR",
            help="Output directory, created if missing (default: current directory)",
        )
        parser.add_argument(
            "--zig",
            metavar="PATH",
            help="Zig executable used to list targets (default: zig)",
        )
        parser.add_argument(
            "--jobs",
            "-j",
            type=positive_int,
            metavar="N",
            help="Number of toolchain files to write in parallel",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help=f"Path to configuration file (default: ./{DEFAULT_CONFIG_FILENAME})",
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        try:
            return self._generate(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _generate(self, args) -> int:
        """
        Generate toolchain files, or list targets when none were requested.

        Args:
            args: Parsed arguments

        Returns:
            Exit code
        """
        config = self._merge_config(args, load_config(args.config))
        logger.debug(f"Configuration: {config}")

        orchestrator = ToolchainOrchestrator(
            discovery=TargetDiscovery(config.zig), max_workers=config.jobs
        )
        result = orchestrator.run(
            config.targets, config.output, all_targets=config.all
        )

        if not result.targets:
            print_target_list(result.universe)
            return 0

        logger.info(
            f"Generated {len(result.written)} toolchain file(s) in {config.output}"
        )
        return 0

    def _merge_config(self, args, config: ZigCMakeConfig) -> ZigCMakeConfig:
        """
        Override configuration file values with command-line options.

        Target selection (targets, all) is only taken from a file given
        with --config; a zigcmake.yaml picked up from the current
        directory never turns a bare run into a generating one.

        Args:
            args: Parsed arguments
            config: Configuration loaded from file (or defaults)

        Returns:
            Effective configuration
        """
        if args.config is None:
            config = replace(config, targets=[], all=False)

        return ZigCMakeConfig(
            version=config.version,
            zig=args.zig or config.zig,
            output=args.output if args.output is not None else config.output,
            targets=list(args.target) if args.target else list(config.targets),
            all=args.all if args.all is not None else config.all,
            jobs=args.jobs if args.jobs is not None else config.jobs,
        )

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
