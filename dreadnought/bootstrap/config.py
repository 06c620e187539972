"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from dreadnought.core.units import Units
from dreadnought.errors import ConfigError

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("DREADNOUGHT_LOG_LEVEL", "WARNING"),
            format=os.getenv("DREADNOUGHT_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("DREADNOUGHT_LOG_FILE"),
            json_logs=os.getenv("DREADNOUGHT_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class ReportConfig:
    """Report presentation configuration."""

    units: Optional[str] = None  # None: use the units stored in the design
    precision: int = 2

    @classmethod
    def from_env(cls) -> "ReportConfig":
        return cls(
            units=os.getenv("DREADNOUGHT_UNITS"),
            precision=int(os.getenv("DREADNOUGHT_PRECISION", "2")),
        )

    def resolve_units(self, design_units: Units) -> Units:
        """Units to report in: the configured override, else the design's own."""
        if self.units is None:
            return design_units
        return Units.from_str(self.units)


@dataclass
class DreadnoughtConfig:
    """Root configuration for the dreadnought tools."""

    debug: bool = False
    version: str = "0.3.0"

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_env(cls) -> "DreadnoughtConfig":
        """Create configuration from environment variables."""
        return cls(
            debug=os.getenv("DREADNOUGHT_DEBUG", "false").lower() == "true",
            logging=LoggingConfig.from_env(),
            report=ReportConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "DreadnoughtConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError("Cannot read config file", detail=str(e), path=str(path)) from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must hold a JSON object", path=str(path))

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "DreadnoughtConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        # Override with file values
        if "debug" in data:
            config.debug = data["debug"]

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        if "report" in data:
            for key, value in data["report"].items():
                if hasattr(config.report, key):
                    setattr(config.report, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "debug": self.debug,
            "version": self.version,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
            "report": {
                "units": self.report.units,
                "precision": self.report.precision,
            },
        }


# Global config instance
_config: Optional[DreadnoughtConfig] = None


def load_config(filepath: str = None) -> DreadnoughtConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        DreadnoughtConfig instance
    """
    global _config

    if filepath:
        _config = DreadnoughtConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./dreadnought.json",
            "./config/dreadnought.json",
            os.path.expanduser("~/.dreadnought/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = DreadnoughtConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = DreadnoughtConfig.from_env()

    logger.debug(f"Configuration loaded: debug={_config.debug}")
    return _config


def get_config() -> DreadnoughtConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
