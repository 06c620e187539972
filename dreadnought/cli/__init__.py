"""
cli/ - Command Line Interface

Provides command-line access to the calculator:
- report: design report as text or JSON
- internals: intermediate calculation values
- new: write a default design file
"""

from .core import (
    CLIContext,
    OutputFormat,
    CommandResult,
    CommandRegistry,
    CLICommand,
    command_registry,
    format_output,
)

from .commands import (
    ReportCommand,
    InternalsCommand,
    NewCommand,
    register_commands,
)

from .main import main

__all__ = [
    # Core
    "CLIContext",
    "OutputFormat",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    "command_registry",
    "format_output",
    # Commands
    "ReportCommand",
    "InternalsCommand",
    "NewCommand",
    "register_commands",
    # Entry point
    "main",
]
