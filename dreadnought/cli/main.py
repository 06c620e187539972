"""
cli/main.py - `dreadnought` console entry point
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import sys

from dreadnought import __version__
from dreadnought.bootstrap import load_config, setup_logging
from dreadnought.errors import DreadnoughtError
from .core import CLIContext, OutputFormat, command_registry, format_output
from .commands import register_commands

logger = logging.getLogger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Warship pre-design calculator",
        prog="dreadnought",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    for command in command_registry:
        sub = subparsers.add_parser(command.name, help=command.description, aliases=command.aliases)
        command.configure_parser(sub)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    if not command_registry:
        register_commands()

    parser = build_parser()
    parsed = parser.parse_args(argv)

    try:
        config = load_config(parsed.config)
    except DreadnoughtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Setup logging
    if parsed.debug or config.debug:
        log_level = "DEBUG"
    elif parsed.verbose:
        log_level = "INFO"
    else:
        log_level = config.logging.level
    setup_logging(
        level=log_level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    if not parsed.command:
        parser.print_help()
        return 1

    command = command_registry.get(parsed.command)
    if command is None:
        logger.error(f"Unknown command: {parsed.command}")
        return 1

    output_format = OutputFormat.JSON if getattr(parsed, "json", False) else OutputFormat.TEXT
    ctx = CLIContext(config=config, output_format=output_format)

    logger.debug(f"Running command: {command.name}")
    result = command.execute(ctx, parsed)

    output = format_output(result, ctx.output_format)
    if result.success:
        print(output)
    else:
        print(output, file=sys.stderr)

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
