"""
cbake CLI argument parser.

This module implements the command-line interface for cbake using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cbake.core.exceptions import CommandError

from .utils import print_error

try:
    from importlib.metadata import version

    __version__ = version("cbake")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

BUILD_TYPES = ["Debug", "Release", "RelWithDebInfo", "MinSizeRel"]


class CLI:
    """cbake command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="cbake",
            description="Let me bake cmake for you",
            epilog='Use "cbake COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"cbake {__version__}"
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
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./cbake.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=None,
            help="Project root directory (default: current directory)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_new_command(subparsers)
        self._add_init_command(subparsers)
        self._add_build_command(subparsers)
        self._add_run_command(subparsers)
        self._add_clean_command(subparsers)

        return parser

    def _add_new_command(self, subparsers):
        """Add 'new' subcommand."""
        parser = subparsers.add_parser(
            "new",
            help="Create a project at PATH",
            description="Create a new project directory with a CMakeLists.txt",
        )
        parser.add_argument("path", type=Path, help="Directory to create")
        parser.add_argument(
            "--cpp-standard",
            type=int,
            metavar="N",
            help="C++ standard (default: 11)",
        )
        parser.add_argument(
            "--build-type",
            choices=BUILD_TYPES,
            metavar="TYPE",
            help="Build type used when cmake is run without one",
        )

    def _add_init_command(self, subparsers):
        """Add 'init' subcommand."""
        parser = subparsers.add_parser(
            "init",
            help="Initialize a project in an existing directory",
            description="Generate CMakeLists.txt for the sources in the project root",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing CMakeLists.txt",
        )

    def _add_build_command(self, subparsers):
        """Add 'build' subcommand."""
        parser = subparsers.add_parser(
            "build",
            help="Build a project",
            description="Sync sources into CMakeLists.txt, configure and build",
        )
        parser.add_argument(
            "--release", action="store_true", help="Use release configuration"
        )

    def _add_run_command(self, subparsers):
        """Add 'run' subcommand."""
        parser = subparsers.add_parser(
            "run",
            help="Build and run a project",
            description="Build the project and run its executable",
        )
        parser.add_argument(
            "--release", action="store_true", help="Use release configuration"
        )

    def _add_clean_command(self, subparsers):
        """Add 'clean' subcommand."""
        subparsers.add_parser(
            "clean",
            help="Clean up cmake cache",
            description="Remove the build directory and its cmake cache",
        )

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

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except CommandError as e:
            print_error(e)
            return 1
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

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

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "new": "cbake.cli.commands.new",
            "init": "cbake.cli.commands.init",
            "build": "cbake.cli.commands.build",
            "run": "cbake.cli.commands.run",
            "clean": "cbake.cli.commands.clean",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
