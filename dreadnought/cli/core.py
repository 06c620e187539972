"""
cli/core.py - Core CLI infrastructure

Command base class, the registry the entry point dispatches through, and
result formatting.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json

from dreadnought.bootstrap.config import DreadnoughtConfig


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"


@dataclass
class CLIContext:
    """Settings shared by every command of one invocation."""

    config: DreadnoughtConfig = field(default_factory=DreadnoughtConfig)
    output_format: OutputFormat = OutputFormat.TEXT


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None

    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = ""
    aliases: List[str] = []

    @abstractmethod
    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Add the command's arguments to its subparser."""

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""


class CommandRegistry:
    """Commands by name; aliases resolve to the command they name."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        return self._commands.get(self._aliases.get(name, name))

    def __iter__(self) -> Iterator[CLICommand]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)


# Global registry
command_registry = CommandRegistry()


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    if not result.success:
        return f"Error: {result.error}"

    output = result.message
    if isinstance(result.data, dict):
        for k, v in result.data.items():
            output += f"\n  {k} = {v}"
    return output
