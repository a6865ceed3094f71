"""
Common CLI utilities.

This module provides shared helpers for the selpg command-line interface:
logging configuration and the base argument parser.
"""

import argparse
import logging
from typing import Optional


def setup_logging() -> None:
    """
    Configure logging for CLI usage.

    Log records go to stderr with timestamp, level and message, leaving
    stdout for selected content. Only warnings are shown until
    `configure_logging_level` adjusts the level.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


class BaseArgumentParser:
    """
    Base argument parser class that provides common CLI argument patterns.
    """

    @staticmethod
    def create_base_parser(prog: str, description: str, epilog: Optional[str] = None) -> argparse.ArgumentParser:
        """
        Create a base argument parser with standard configuration.

        Args:
            prog: Program name for the parser
            description: Description of the command
            epilog: Optional epilog text with examples

        Returns:
            Configured ArgumentParser instance
        """
        return argparse.ArgumentParser(
            prog=prog,
            description=description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=epilog
        )

    @staticmethod
    def add_input_path_argument(parser: argparse.ArgumentParser, required: bool = True,
                               help: str = "Path to input file") -> None:
        """
        Add input path argument to parser.

        Args:
            parser: ArgumentParser to add argument to
            required: Whether the argument is required
            help: Help text for the argument
        """
        if required:
            parser.add_argument("input_path", help=help)
        else:
            parser.add_argument("input_path", nargs='?', default="", help=help)

    @staticmethod
    def add_verbose_quiet_arguments(parser: argparse.ArgumentParser) -> None:
        """
        Add verbose and quiet logging arguments.

        Args:
            parser: ArgumentParser to add arguments to
        """
        group = parser.add_mutually_exclusive_group()
        group.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Log progress and diagnostics to stderr"
        )
        group.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only log errors"
        )


def configure_logging_level(args: argparse.Namespace) -> None:
    """
    Configure logging level based on verbose/quiet arguments.

    Args:
        args: Parsed arguments with potential verbose/quiet flags
    """
    if getattr(args, 'quiet', False):
        logging.getLogger().setLevel(logging.ERROR)
    elif getattr(args, 'verbose', False):
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.WARNING)
