"""
File system and environment adapters for the mapping component.
"""

from __future__ import annotations

import os
from pathlib import Path


class LocalFileSystemAdapter:
    """Reads mappings files from local disk."""

    def read_bytes(self, path: Path) -> bytes:
        """Read a file's raw contents."""
        with open(path, "rb") as f:
            return f.read()

    def exists(self, path: Path) -> bool:
        """Check that path is an existing regular file."""
        return path.is_file()


class OsEnvironmentAdapter:
    """Reads MAPPING_FILE and LOG_LEVEL from os.environ."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look up a setting, falling back to default when unset."""
        return os.environ.get(key, default)


# Shared by the loader, component entry points and CLI config
default_filesystem = LocalFileSystemAdapter()
default_environment = OsEnvironmentAdapter()
