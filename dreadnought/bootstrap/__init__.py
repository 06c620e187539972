"""
bootstrap/ - Configuration and logging setup
"""

from .config import (
    LoggingConfig,
    ReportConfig,
    DreadnoughtConfig,
    load_config,
    get_config,
)

from .logging_setup import (
    JSONFormatter,
    setup_logging,
)

__all__ = [
    # Config
    "LoggingConfig",
    "ReportConfig",
    "DreadnoughtConfig",
    "load_config",
    "get_config",
    # Logging
    "JSONFormatter",
    "setup_logging",
]
