"""
Design File Persistence

Designs are stored as JSON written from `Ship.to_dict()`. Enumerations are
stored by value, capability sets as lists of member names and the optional
length/form entries as `{"kind": ..., "value": ...}` or null.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union
import json
import logging

from dreadnought.errors import ErrorCode, create_design_file_error
from dreadnought.ship.ship import Ship

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_ship(path: PathLike) -> Ship:
    """
    Load a design from a JSON file.

    Args:
        path: Design file path

    Returns:
        The design

    Raises:
        DesignFileError: The file is missing, is not JSON, or holds values
            the design model does not accept
    """
    path = Path(path)

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise create_design_file_error(
            "Design file not found", str(path), e, ErrorCode.SYS_FILE_NOT_FOUND
        ) from e
    except json.JSONDecodeError as e:
        raise create_design_file_error(
            "Design file is not valid JSON", str(path), e, ErrorCode.VAL_SCHEMA
        ) from e
    except OSError as e:
        raise create_design_file_error("Cannot read design file", str(path), e) from e

    if not isinstance(data, dict):
        raise create_design_file_error(
            "Design file must hold a JSON object", str(path), code=ErrorCode.VAL_SCHEMA
        )

    try:
        ship = Ship.from_dict(data)
    except (AttributeError, KeyError, ValueError, TypeError) as e:
        raise create_design_file_error(
            "Design file holds an invalid design", str(path), e, ErrorCode.VAL_UNKNOWN_VALUE
        ) from e

    logger.info(f"Loaded design '{ship.name}' from {path}")
    return ship


def save_ship(ship: Ship, path: PathLike) -> None:
    """
    Write a design to a JSON file.

    Raises:
        DesignFileError: The file cannot be written
    """
    path = Path(path)

    try:
        with open(path, 'w') as f:
            json.dump(ship.to_dict(), f, indent=2)
    except OSError as e:
        raise create_design_file_error(
            "Cannot write design file", str(path), e, ErrorCode.SYS_FILE_WRITE
        ) from e

    logger.info(f"Saved design '{ship.name}' to {path}")
