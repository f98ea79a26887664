"""
Global configuration for the ygg-keys command line.

This module contains environment-specific settings. Protocol constants
such as the routing prefix live with the code that uses them and are
not configurable.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]

YGG_KEYS_LOG_LEVEL = os.environ.get("YGG_KEYS_LOG_LEVEL", "INFO").upper()
"""Default log level of the command line. Defaults to 'INFO'."""

if YGG_KEYS_LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid YGG_KEYS_LOG_LEVEL environment variable: '{YGG_KEYS_LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )
