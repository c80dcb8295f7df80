"""
Mapping tables - per-host redirect rules and the host-level aggregate.

Key behaviors:
- Paths must be non-empty and start with '/'
- Redirect targets must be absolute https URIs
- The host name 'localhost' is reserved
- Lookup is exact match first, then the root path '/' as a catch-all
- Tables are read-only once built; reloading means building a new MappingsFile
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import urlsplit

from .errors import (
    EmptyMappingsFileError,
    InvalidPathError,
    InvalidRedirectSchemeError,
    MappingValidationError,
    ReservedHostNameError,
)

ROOT_PATH = "/"
REDIRECT_SCHEME = "https"
RESERVED_HOST_NAMES = frozenset({"localhost"})


# --- Validation Functions ---


def is_valid_path(path: str) -> bool:
    """Check that a path is non-empty and rooted."""
    return bool(path) and path.startswith("/")


def is_https_uri(target: str) -> bool:
    """Check that target is an absolute URI with the https scheme."""
    if not target:
        return False

    # urlsplit silently drops tabs and newlines, so reject them up front
    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7F for c in target):
        return False

    try:
        parts = urlsplit(target)
        # Raises ValueError on a non-numeric or out of range port
        parts.port
    except ValueError:
        return False

    return parts.scheme == REDIRECT_SCHEME and bool(parts.hostname)


def validate_entry(path: str, target: str) -> None:
    """
    Validate a single path -> target rule.

    Raises:
        InvalidPathError: If path is empty or not rooted.
        InvalidRedirectSchemeError: If target is not an absolute https URI.
    """
    if not is_valid_path(path):
        raise InvalidPathError(path)

    if not is_https_uri(target):
        raise InvalidRedirectSchemeError(path, target)


# --- Models ---


@dataclass(frozen=True)
class MappingEntry:
    """One redirect rule within a host."""

    path: str  # e.g., "/docs"
    target: str  # e.g., "https://docs.example.com"


@dataclass(frozen=True)
class Mapping:
    """Path -> redirect target table for a single host."""

    entries: tuple[MappingEntry, ...] = ()
    _index: MappingProxyType[str, str] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index = {entry.path: entry.target for entry in self.entries}
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_dict(cls, table: dict[str, str | None] | None) -> Mapping:
        """Build a Mapping from a decoded path -> target dict; a null target becomes ""."""
        if not table:
            return cls()
        return cls(
            tuple(MappingEntry(path, target or "") for path, target in table.items())
        )

    def __len__(self) -> int:
        return len(self.entries)

    def validate(self) -> None:
        """Validate every entry, raising on the first bad one."""
        for entry in self.entries:
            validate_entry(entry.path, entry.target)

    def get(self, path: str) -> str | None:
        """Exact-match lookup."""
        return self._index.get(path)


@dataclass(frozen=True)
class MappingsFile:
    """
    All hosts and their redirect tables.

    Instances are never mutated after construction, so concurrent lookups
    need no locking.
    """

    hosts: MappingProxyType[str, Mapping]

    @classmethod
    def from_hosts(cls, hosts: dict[str, Mapping]) -> MappingsFile:
        """Build a MappingsFile from a host -> Mapping dict."""
        return cls(MappingProxyType(dict(hosts)))

    def host_names(self) -> tuple[str, ...]:
        """Declared host names in file order."""
        return tuple(self.hosts)

    def validate(self) -> None:
        """
        Validate the whole file.

        Checks run per file, then per host, then per entry; the first
        failure rejects the file.

        Raises:
            EmptyMappingsFileError: If no host is declared.
            ReservedHostNameError: If a reserved host name is declared.
            MappingValidationError: First entry-level failure, tagged with its host.
        """
        if not self.hosts:
            raise EmptyMappingsFileError()

        for host in self.hosts:
            if host in RESERVED_HOST_NAMES:
                raise ReservedHostNameError(host)

        for host, mapping in self.hosts.items():
            try:
                mapping.validate()
            except MappingValidationError as e:
                e.host = host
                raise

    def get_redirect_uri(self, host: str, path: str) -> str:
        """
        Resolve host and path to a redirect target.

        Returns the exact-match target, else the host's '/' target, else ""
        when nothing is configured.
        """
        mapping = self.hosts.get(host)
        if mapping is None:
            return ""

        target = mapping.get(path)
        if target is not None:
            return target

        # '/' is the only wildcard; no prefix matching
        return mapping.get(ROOT_PATH) or ""
