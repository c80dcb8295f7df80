"""
Mapping component - host/path redirect table.
"""

from ._impl import (
    RESERVED_HOST_NAMES,
    ROOT_PATH,
    Mapping,
    MappingEntry,
    MappingsFile,
    is_https_uri,
    is_valid_path,
    validate_entry,
)
from .component import (
    DEFAULT_MAPPING_PATH,
    MAPPING_PATH_ENV,
    resolve_mapping_path,
    run,
    run_load,
    run_lookup,
    run_parse,
)
from .errors import (
    DeserializationError,
    EmptyMappingsFileError,
    InvalidPathError,
    InvalidRedirectSchemeError,
    MappingError,
    MappingValidationError,
    ReservedHostNameError,
)
from .loader import load_mapping_file, parse
from .models import (
    LoadMappingsInput,
    LookupInput,
    LookupOutput,
    MappingErrorDetail,
    MappingsDocument,
    MappingsOutput,
    ParseMappingsInput,
)
from .ports import EnvironmentPort, FileSystemPort

__all__ = [
    # Entry points
    "run",
    "run_load",
    "run_lookup",
    "run_parse",
    "load_mapping_file",
    "parse",
    "resolve_mapping_path",
    # Tables
    "Mapping",
    "MappingEntry",
    "MappingsFile",
    # Input models
    "LoadMappingsInput",
    "LookupInput",
    "ParseMappingsInput",
    # Output models
    "LookupOutput",
    "MappingErrorDetail",
    "MappingsOutput",
    "MappingsDocument",
    # Errors
    "DeserializationError",
    "EmptyMappingsFileError",
    "InvalidPathError",
    "InvalidRedirectSchemeError",
    "MappingError",
    "MappingValidationError",
    "ReservedHostNameError",
    # Ports
    "EnvironmentPort",
    "FileSystemPort",
    # Validation helpers
    "is_https_uri",
    "is_valid_path",
    "validate_entry",
    # Constants
    "DEFAULT_MAPPING_PATH",
    "MAPPING_PATH_ENV",
    "RESERVED_HOST_NAMES",
    "ROOT_PATH",
]
