"""
Mapping component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemPort(Protocol):
    """Read access to mappings files."""

    def read_bytes(self, path: Path) -> bytes:
        """Read a file's raw contents."""
        ...

    def exists(self, path: Path) -> bool:
        """Check that path is an existing regular file."""
        ...


class EnvironmentPort(Protocol):
    """Source of MAPPING_FILE / LOG_LEVEL overrides; faked in tests."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look up a setting, falling back to default when unset."""
        ...
