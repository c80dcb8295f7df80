"""
Mappings loader - decode and validate the redirect mappings file.

Every MappingsFile returned from here has already passed validate();
callers never need to validate again.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ._impl import Mapping, MappingsFile
from .adapters import default_filesystem
from .errors import DeserializationError
from .models import MappingsDocument
from .ports import FileSystemPort

logger = logging.getLogger(__name__)


def parse(data: bytes | str) -> MappingsFile:
    """
    Decode raw configuration into a validated MappingsFile.

    Args:
        data: YAML document, as bytes or text.

    Returns:
        Validated MappingsFile.

    Raises:
        DeserializationError: If data is not YAML of the expected shape.
        MappingValidationError: If the decoded table breaks a validation rule.
    """
    try:
        # BaseLoader keeps every scalar as text, so hosts like "on" stay strings
        raw = yaml.load(data, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise DeserializationError(f"Invalid YAML syntax: {e}") from e

    # An empty stream decodes to None, an empty document ("---") to ""
    if raw is None or raw == "":
        raw = {}

    try:
        document = MappingsDocument.model_validate(raw)
    except ValidationError as e:
        raise DeserializationError(f"Unexpected mappings file structure:\n{e}") from e

    hosts: dict[str, Mapping] = {}
    for host, table in (document.mapping or {}).items():
        if not table:
            logger.warning("Host %r declares no redirects", host)
        hosts[host] = Mapping.from_dict(table)

    mappings = MappingsFile.from_hosts(hosts)
    mappings.validate()
    return mappings


def load_mapping_file(
    path: Path | str,
    *,
    fs: FileSystemPort = default_filesystem,
) -> MappingsFile:
    """
    Read and parse the mappings file at path.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file can't be read.
        MappingError: If the contents are invalid (see parse).
    """
    path = Path(path)

    if not fs.exists(path):
        raise FileNotFoundError(f"Mappings file not found: {path}")

    logger.debug("Reading mappings file %s", path)
    mappings = parse(fs.read_bytes(path))

    logger.info("Loaded %d host mapping(s) from %s", len(mappings.hosts), path)
    return mappings
