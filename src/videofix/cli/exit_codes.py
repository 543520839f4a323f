"""Process exit codes for the videofix CLI.

Codes are grouped by decade: 1x configuration, 2x lookup, 3x external
tools, 4x processing.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by videofix commands."""

    SUCCESS = 0
    GENERAL_ERROR = 1

    # Configuration
    CONFIG_ERROR = 11

    # Lookup
    TARGET_NOT_FOUND = 20
    PATH_NOT_FOUND = 21

    # External tools
    TOOL_NOT_AVAILABLE = 32

    # Processing
    OPERATION_FAILED = 40
