"""Process exit codes for the hostredirect CLI."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    CONFIG_ERROR = 1
    BAD_MAPPING_FILE = 8
    INVALID_LOGLEVEL = 9
