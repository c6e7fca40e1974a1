"""
Configuration
=============
This module serves as the central registry for global constants.

Exports:
    DEFAULT_POLYLINE_SEGMENTS (int): Number of segments used when a curved
        shape is discretized and no explicit count is given.
    LOG_LEVEL (int): Default level for `setup_logging`, taken from the
        PLANEGEOM_LOG_LEVEL environment variable (e.g. "DEBUG").
"""
import logging
import os

LOG_LEVEL_ENV_VAR: str = "PLANEGEOM_LOG_LEVEL"


def get_log_level(default: int = logging.WARNING) -> int:
    """
    Resolve the logging level from the environment.

    Accepts level names ("DEBUG", "info", ...) or numeric values ("10").
    Unknown values fall back to `default`.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return default

    raw = raw.strip()
    if raw.isdigit():
        return int(raw)

    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level

    print(f"WARNING: Unknown log level '{raw}' in {LOG_LEVEL_ENV_VAR}, using default")
    return default


# Global Constants
DEFAULT_POLYLINE_SEGMENTS: int = 100
LOG_LEVEL: int = get_log_level()
