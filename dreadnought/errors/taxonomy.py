"""
errors/taxonomy.py - Error classification

The calculators never raise for numeric singularities. Errors only arise at
the edges: reading and writing design files, loading configuration and
running CLI commands.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Validation errors (1xxx)
    VALIDATION = "validation"

    # Persistence errors (6xxx)
    PERSISTENCE = "persistence"

    # Configuration errors (6xxx)
    CONFIGURATION = "configuration"

    # Command errors (7xxx)
    COMMAND = "command"


class ErrorCode(Enum):
    """Specific error codes."""

    # Validation (1xxx)
    VAL_FAILED = 1001
    VAL_SCHEMA = 1002
    VAL_UNKNOWN_VALUE = 1003
    VAL_TYPE_MISMATCH = 1004

    # System (6xxx)
    SYS_CONFIG = 6001
    SYS_FILE_NOT_FOUND = 6002
    SYS_FILE_READ = 6003
    SYS_FILE_WRITE = 6004

    # Command (7xxx)
    CMD_UNKNOWN = 7001
    CMD_FAILED = 7002


class DreadnoughtError(Exception):
    """Base class for errors raised outside the formula core."""

    code: ErrorCode = ErrorCode.VAL_FAILED
    category: ErrorCategory = ErrorCategory.VALIDATION
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        detail: str = "",
        code: Optional[ErrorCode] = None,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.path = path
        if code is not None:
            self.code = code

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "detail": self.detail,
            "path": self.path,
        }

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class DesignFileError(DreadnoughtError):
    """A design file is missing, unreadable or holds an invalid design."""
    code = ErrorCode.SYS_FILE_READ
    category = ErrorCategory.PERSISTENCE


class ConfigError(DreadnoughtError):
    """The configuration file cannot be used."""
    code = ErrorCode.SYS_CONFIG
    category = ErrorCategory.CONFIGURATION


class CommandError(DreadnoughtError):
    """A CLI command could not run."""
    code = ErrorCode.CMD_FAILED
    category = ErrorCategory.COMMAND


def create_design_file_error(
    message: str,
    path: str,
    exc: Optional[BaseException] = None,
    code: ErrorCode = ErrorCode.SYS_FILE_READ,
) -> DesignFileError:
    """Factory for design file errors, keeping the cause as detail."""
    return DesignFileError(
        message,
        detail=str(exc) if exc is not None else "",
        code=code,
        path=path,
    )
