"""
errors/ - Error Taxonomy

Structured error classification for design files, configuration and the
command line.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    DreadnoughtError,
    DesignFileError,
    ConfigError,
    CommandError,
    create_design_file_error,
)

__all__ = [
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "DreadnoughtError",
    "DesignFileError",
    "ConfigError",
    "CommandError",
    "create_design_file_error",
]
