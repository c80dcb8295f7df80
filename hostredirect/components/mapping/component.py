"""
Mapping component - load, validate and query the host redirect table.

Invariants:
- I1: Every path starts with '/'
- I2: Every redirect target is an absolute https URI
- I3: At least one host is declared
- I4: The host name 'localhost' is never accepted
- I5: A file is accepted or rejected as a whole

The run_* entry points never raise for bad input; failures are reported
through the output's errors list.
"""

from __future__ import annotations

from pathlib import Path

from ._impl import MappingsFile
from .adapters import default_environment, default_filesystem
from .errors import MappingError, MappingValidationError
from .loader import load_mapping_file, parse
from .models import (
    LoadMappingsInput,
    LookupInput,
    LookupOutput,
    MappingErrorDetail,
    MappingsOutput,
    ParseMappingsInput,
)
from .ports import EnvironmentPort, FileSystemPort

# Default mappings file path (relative to the working directory)
DEFAULT_MAPPING_PATH = "mapping.yaml"

MAPPING_PATH_ENV = "MAPPING_FILE"


def _error_detail(error: Exception) -> MappingErrorDetail:
    """Convert a raised error to a component error."""
    if isinstance(error, MappingValidationError):
        return MappingErrorDetail(code=error.code, message=str(error), host=error.host)
    if isinstance(error, MappingError):
        return MappingErrorDetail(code=error.code, message=str(error))
    if isinstance(error, FileNotFoundError):
        return MappingErrorDetail(code="file_not_found", message=str(error))
    return MappingErrorDetail(code="io_error", message=str(error))


def _failed(error: Exception) -> MappingsOutput:
    return MappingsOutput(mappings=None, errors=[_error_detail(error)], success=False)


def resolve_mapping_path(
    mapping_path: Path | str | None,
    env: EnvironmentPort = default_environment,
) -> Path:
    """Pick the mappings file: explicit path, then $MAPPING_FILE, then the default."""
    if mapping_path is not None:
        return Path(mapping_path)

    env_path = env.get(MAPPING_PATH_ENV)
    if env_path:
        return Path(env_path)

    return Path(DEFAULT_MAPPING_PATH)


# --- Component Entry Points ---


def run_parse(inp: ParseMappingsInput) -> MappingsOutput:
    """
    Parse and validate raw configuration.

    Args:
        inp: Input containing the raw YAML document.

    Returns:
        MappingsOutput with the validated mappings or errors.
    """
    try:
        mappings = parse(inp.data)
    except MappingError as e:
        return _failed(e)

    return MappingsOutput(mappings=mappings, errors=[], success=True)


def run_load(
    inp: LoadMappingsInput,
    *,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
) -> MappingsOutput:
    """
    Load and validate a mappings file.

    Args:
        inp: Input containing an optional mappings path.
        fs: File system port for reading files.
        env: Environment port for reading env vars.

    Returns:
        MappingsOutput with the validated mappings or errors.
    """
    path = resolve_mapping_path(inp.mapping_path, env)

    try:
        mappings = load_mapping_file(path, fs=fs)
    except (MappingError, OSError) as e:
        return _failed(e)

    return MappingsOutput(mappings=mappings, errors=[], success=True)


def run_lookup(inp: LookupInput, *, mappings: MappingsFile) -> LookupOutput:
    """
    Resolve a host and path to its redirect target.

    Args:
        inp: Input containing host and path.
        mappings: Validated mappings to search.

    Returns:
        LookupOutput; target is "" when no redirect is configured.
    """
    target = mappings.get_redirect_uri(inp.host, inp.path)
    return LookupOutput(target=target, found=target != "")


def run(
    inp: ParseMappingsInput | LoadMappingsInput | LookupInput,
    *,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
    mappings: MappingsFile | None = None,
) -> MappingsOutput | LookupOutput:
    """
    Main entry point for the mapping component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ParseMappingsInput):
        return run_parse(inp)
    elif isinstance(inp, LoadMappingsInput):
        return run_load(inp, fs=fs, env=env)
    elif isinstance(inp, LookupInput):
        if mappings is None:
            raise ValueError("Lookup requires loaded mappings")
        return run_lookup(inp, mappings=mappings)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
