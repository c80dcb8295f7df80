"""
Mapping component exceptions.

Validation errors carry a machine-readable ``code`` and, once they have been
raised from a MappingsFile, the ``host`` whose table was rejected.
"""

from __future__ import annotations


class MappingError(ValueError):
    """Base class for every mapping load or validation failure."""

    code = "mapping_error"


class MappingValidationError(MappingError):
    """Raised when a decoded mapping table breaks a validation rule."""

    code = "invalid_mapping"

    def __init__(self, detail: str, host: str | None = None) -> None:
        self.detail = detail
        self.host = host
        super().__init__(detail)

    def __str__(self) -> str:
        if self.host is None:
            return self.detail
        return f"host '{self.host}': {self.detail}"


class InvalidPathError(MappingValidationError):
    """Path is empty or does not start with '/'."""

    code = "invalid_path"

    def __init__(self, path: str, host: str | None = None) -> None:
        self.path = path
        super().__init__(f"path {path!r} must be non-empty and start with '/'", host)


class InvalidRedirectSchemeError(MappingValidationError):
    """Redirect target is not an absolute https URI."""

    code = "invalid_redirect_scheme"

    def __init__(self, path: str, target: str, host: str | None = None) -> None:
        self.path = path
        self.target = target
        super().__init__(
            f"redirect for {path!r} must be an absolute https URI, got {target!r}", host
        )


class ReservedHostNameError(MappingValidationError):
    """Host name is reserved and cannot carry redirects."""

    code = "reserved_host_name"

    def __init__(self, host: str) -> None:
        super().__init__("host name is reserved", host)


class EmptyMappingsFileError(MappingValidationError):
    """The 'mapping' section is missing or declares no hosts."""

    code = "empty_mappings_file"

    def __init__(self) -> None:
        super().__init__("mappings file declares no hosts")


class DeserializationError(MappingError):
    """Raw configuration is not YAML of the expected shape."""

    code = "deserialization_error"
