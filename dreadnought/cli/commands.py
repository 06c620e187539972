"""
cli/commands.py - CLI command implementations
"""

from __future__ import annotations
from pathlib import Path
import argparse
import logging

from .core import CLICommand, CLIContext, CommandResult, OutputFormat, command_registry
from dreadnought.core.units import Units
from dreadnought.errors import CommandError, DreadnoughtError, ErrorCode
from dreadnought.reporting import build_report, render_text
from dreadnought.ship import Ship, load_ship, save_ship

logger = logging.getLogger("cli.commands")


def _failure(e: DreadnoughtError) -> CommandResult:
    logger.debug(f"{e.category.value} error {e.code.value}: {e}")
    return CommandResult(success=False, error=str(e), data=e.to_dict(), exit_code=1)


class ReportCommand(CLICommand):
    """Print the design report for a design file."""

    name = "report"
    description = "Print the design report"
    aliases = ["show"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path to design file")
        parser.add_argument("--json", action="store_true", help="Output the report as JSON")
        parser.add_argument("--metric", action="store_true", help="Report in metric units")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            ship = load_ship(args.path)
        except DreadnoughtError as e:
            return _failure(e)

        if getattr(args, "metric", False):
            units = Units.METRIC
        else:
            try:
                units = ctx.config.report.resolve_units(ship.units)
            except ValueError as e:
                return _failure(CommandError(
                    "Unknown units in configuration", detail=str(e), code=ErrorCode.VAL_UNKNOWN_VALUE
                ))

        report = build_report(ship, units)
        logger.debug(f"Report built for {args.path}")

        if getattr(args, "json", False) or ctx.output_format == OutputFormat.JSON:
            return CommandResult(success=True, message=ship.name, data=report.to_dict())

        return CommandResult(
            success=True,
            message=render_text(report, ctx.config.report.precision),
        )


class InternalsCommand(CLICommand):
    """Dump intermediate calculation values for a design file."""

    name = "internals"
    description = "Print intermediate calculation values"
    aliases = ["debug"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path to design file")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            ship = load_ship(args.path)
        except DreadnoughtError as e:
            return _failure(e)

        return CommandResult(
            success=True,
            message=f"Internals for {ship.name}:",
            data=ship.internals(),
        )


class NewCommand(CLICommand):
    """Write a default design to a new file."""

    name = "new"
    description = "Create a new design file"
    aliases = ["create"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path of the design file to create")
        parser.add_argument("--name", default=None, help="Ship name")
        parser.add_argument("--force", "-f", action="store_true", help="Overwrite an existing file")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        path = Path(args.path)
        if path.exists() and not getattr(args, "force", False):
            return _failure(CommandError(
                "Design file already exists", detail="use --force to overwrite", path=str(path)
            ))

        ship = Ship()
        if getattr(args, "name", None):
            ship.name = args.name

        try:
            save_ship(ship, path)
        except DreadnoughtError as e:
            return _failure(e)

        return CommandResult(
            success=True,
            message=f"Created new design: {path}",
            data={"path": str(path), "name": ship.name},
        )


def register_commands() -> None:
    """Register the built-in commands with the global registry."""
    for command in (ReportCommand(), InternalsCommand(), NewCommand()):
        command_registry.register(command)
